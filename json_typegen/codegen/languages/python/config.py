"""
Python-specific configuration and type mappings.

Provides type mapping and Python-specific options for dataclasses,
TypedDict and Pydantic model generation.
"""

from dataclasses import dataclass
from enum import Enum

from ...core.config import BaseOptions
from ...core.schema import PrimitiveTag


class PythonStyle(Enum):
    """Python code generation styles."""

    DATACLASS = "dataclass"
    TYPEDDICT = "typeddict"
    PYDANTIC = "pydantic"


# Python type mappings
PYTHON_TYPE_MAP = {
    PrimitiveTag.STRING: "str",
    PrimitiveTag.NUMBER: "float",
    PrimitiveTag.BOOLEAN: "bool",
    PrimitiveTag.NULL: "None",
    PrimitiveTag.ANY: "Any",
}

# Module each style's base names are imported from
STYLE_IMPORTS = {
    PythonStyle.DATACLASS: ("dataclasses", "dataclass"),
    PythonStyle.TYPEDDICT: ("typing", "TypedDict"),
    PythonStyle.PYDANTIC: ("pydantic", "BaseModel"),
}


@dataclass
class PythonOptions(BaseOptions):
    """Python generator options."""

    style: PythonStyle = PythonStyle.DATACLASS
    # dataclass options
    use_frozen: bool = False
    use_slots: bool = False
    use_kw_only: bool = False
    # TypedDict options
    use_total: bool = True


# Default configurations for different styles
def get_dataclass_config() -> PythonOptions:
    """Configuration for dataclass generation."""
    return PythonOptions(style=PythonStyle.DATACLASS, use_slots=True)


def get_pydantic_config() -> PythonOptions:
    """Configuration for Pydantic v2 model generation."""
    return PythonOptions(style=PythonStyle.PYDANTIC)


def get_typeddict_config() -> PythonOptions:
    """Configuration for TypedDict generation."""
    return PythonOptions(style=PythonStyle.TYPEDDICT, optional_properties=True)


def get_strict_dataclass_config() -> PythonOptions:
    """Configuration for strict/frozen dataclass generation."""
    return PythonOptions(
        style=PythonStyle.DATACLASS,
        use_slots=True,
        use_frozen=True,
        use_kw_only=True,
    )
