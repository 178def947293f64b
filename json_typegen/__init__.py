"""
json-typegen: infer types from sample JSON and emit type definitions.

Example:
    >>> from json_typegen import generate
    >>> print(generate({"name": "Ada"}, "typescript"))
    export interface Root {
      name: string;
    }
"""

from .codegen import (
    BaseOptions,
    ConfigError,
    GenerationResult,
    GeneratorError,
    LanguageConfig,
    RegistryError,
    TargetLanguage,
    TypeNode,
    generate,
    generate_code,
    generate_from_config,
    get_default_options,
    get_generator,
    infer_type,
    list_supported_languages,
    quick_generate,
)
from .utils import JSONLoaderError, load_json

__version__ = "0.1.0"

__all__ = [
    "BaseOptions",
    "ConfigError",
    "GenerationResult",
    "GeneratorError",
    "JSONLoaderError",
    "LanguageConfig",
    "RegistryError",
    "TargetLanguage",
    "TypeNode",
    "generate",
    "generate_code",
    "generate_from_config",
    "get_default_options",
    "get_generator",
    "infer_type",
    "list_supported_languages",
    "load_json",
    "quick_generate",
    "__version__",
]
