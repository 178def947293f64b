"""
JSON Typegen Code Generation Module

Generates type definitions in ten languages from JSON data.
"""

from .registry import (
    LANGUAGE_INFO,
    GeneratorRegistry,
    LanguageConfig,
    RegistryError,
    TargetLanguage,
    generate,
    generate_from_config,
    get_default_options,
    get_generator,
    get_registry,
    list_supported_languages,
    output_filename,
    resolve_language,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.schema import Field, NodeKind, PrimitiveTag, TypeNode, infer_type
from .core.config import BaseOptions, ConfigError, build_options


def quick_generate(json_data, language="typescript", **options):
    """
    Quick code generation from JSON data.

    Args:
        json_data: JSON data (dict/list or JSON text)
        language: Target language
        **options: Generator options, e.g. root_name="Person"

    Returns:
        Generated code string
    """
    # Convert string to data if needed
    if isinstance(json_data, str):
        import json

        json_data = json.loads(json_data)

    generator = get_generator(language, options)
    result = generate_code(generator, json_data)

    if result.success:
        return result.code
    else:
        raise GeneratorError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "TargetLanguage",
    "LanguageConfig",
    "LANGUAGE_INFO",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "BaseOptions",
    "ConfigError",
    "TypeNode",
    "Field",
    "NodeKind",
    "PrimitiveTag",
    "infer_type",
    "build_options",
    "generate",
    "generate_code",
    "generate_from_config",
    "get_default_options",
    "get_generator",
    "get_registry",
    "list_supported_languages",
    "output_filename",
    "resolve_language",
    "quick_generate",
]
