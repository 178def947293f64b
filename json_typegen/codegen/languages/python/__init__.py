"""
Python code generator module.

Generates Python dataclasses, TypedDict classes and Pydantic models from JSON data.
"""

from .generator import (
    PythonGenerator,
    create_python_generator,
    create_dataclass_generator,
    create_pydantic_generator,
    create_typeddict_generator,
)
from .config import (
    PythonOptions,
    PythonStyle,
    get_dataclass_config,
    get_pydantic_config,
    get_typeddict_config,
    get_strict_dataclass_config,
)

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    "create_dataclass_generator",
    "create_pydantic_generator",
    "create_typeddict_generator",
    # Configuration
    "PythonOptions",
    "PythonStyle",
    "get_dataclass_config",
    "get_pydantic_config",
    "get_typeddict_config",
    "get_strict_dataclass_config",
]
