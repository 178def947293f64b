"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    TypeNode,
    Field,
    NodeKind,
    PrimitiveTag,
    infer_type,
    collect_nested_types,
    generate_with_nested_types,
    find_name_collisions,
    unique_types,
)
from .naming import (
    NamingCase,
    convert_case,
    convert_key,
    is_valid_identifier,
    split_into_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_screaming_snake_case,
    to_snake_case,
    to_identifier,
)
from .config import BaseOptions, ConfigError, build_options, options_to_dict
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Type inference - core data structures
    "TypeNode",
    "Field",
    "NodeKind",
    "PrimitiveTag",
    "infer_type",
    "collect_nested_types",
    "generate_with_nested_types",
    "find_name_collisions",
    "unique_types",
    # Naming utilities - language-agnostic
    "NamingCase",
    "convert_case",
    "convert_key",
    "is_valid_identifier",
    "split_into_words",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_screaming_snake_case",
    "to_snake_case",
    "to_identifier",
    # Configuration system
    "BaseOptions",
    "ConfigError",
    "build_options",
    "options_to_dict",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
