"""
Generator registry system for managing available code generators.

Maps every target language tag to its generator class, and through the
class to its default options. Lookups of unknown tags fail loudly.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import BaseOptions, ConfigError, build_options
from .core.generator import CodeGenerator

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class TargetLanguage(str, Enum):
    """The closed set of supported target languages."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    GO = "go"
    PYTHON = "python"
    RUST = "rust"
    JAVA = "java"
    CSHARP = "csharp"
    KOTLIN = "kotlin"
    SWIFT = "swift"
    PHP = "php"


class LanguageInfo(NamedTuple):
    """Display metadata for a target language."""

    label: str
    extension: str
    lexer: str  # Pygments lexer name used for syntax highlighting


LANGUAGE_INFO: Dict[TargetLanguage, LanguageInfo] = {
    TargetLanguage.TYPESCRIPT: LanguageInfo("TypeScript", "ts", "typescript"),
    TargetLanguage.JAVASCRIPT: LanguageInfo("JavaScript", "js", "javascript"),
    TargetLanguage.GO: LanguageInfo("Go", "go", "go"),
    TargetLanguage.PYTHON: LanguageInfo("Python", "py", "python"),
    TargetLanguage.RUST: LanguageInfo("Rust", "rs", "rust"),
    TargetLanguage.JAVA: LanguageInfo("Java", "java", "java"),
    TargetLanguage.CSHARP: LanguageInfo("C#", "cs", "csharp"),
    TargetLanguage.KOTLIN: LanguageInfo("Kotlin", "kt", "kotlin"),
    TargetLanguage.SWIFT: LanguageInfo("Swift", "swift", "swift"),
    TargetLanguage.PHP: LanguageInfo("PHP", "php", "php"),
}

LANGUAGE_ALIASES: Dict[TargetLanguage, List[str]] = {
    TargetLanguage.TYPESCRIPT: ["ts"],
    TargetLanguage.JAVASCRIPT: ["js"],
    TargetLanguage.GO: ["golang"],
    TargetLanguage.PYTHON: ["py"],
    TargetLanguage.RUST: ["rs"],
    TargetLanguage.JAVA: [],
    TargetLanguage.CSHARP: ["cs", "c#"],
    TargetLanguage.KOTLIN: ["kt"],
    TargetLanguage.SWIFT: [],
    TargetLanguage.PHP: [],
}


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go', 'python')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = str(getattr(language, "value", language)).lower()

        # Check if already registered
        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class
        logger.debug("Registered %s generator for %s", generator_class.__name__, language_key)

        for alias in aliases or []:
            alias_key = alias.lower()

            # Skip if alias is the same as primary
            if alias_key == language_key:
                continue

            # Check for conflicts (unless replacing)
            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """
        Unregister a generator and its aliases.

        Args:
            language: Language name to unregister
        """
        language_key = language.lower()
        self._generators.pop(language_key, None)

        # Remove aliases pointing to this language
        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, language: Union[str, TargetLanguage]) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = str(getattr(language, "value", language)).strip().lower()

        if language_key in self._generators:
            return language_key

        if language_key in self._aliases:
            return self._aliases[language_key]

        available = self.list_languages()
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def get_generator_class(self, language: Union[str, TargetLanguage]) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Args:
            language: Language name or alias

        Returns:
            Generator class

        Raises:
            RegistryError: If language not found
        """
        return self._generators[self.resolve(language)]

    def get_default_options(self, language: Union[str, TargetLanguage]) -> BaseOptions:
        """Return a fresh default option record for language."""
        return self.get_generator_class(language).get_default_options()

    def create_generator(
        self,
        language: Union[str, TargetLanguage],
        config: Optional[Union[BaseOptions, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Args:
            language: Language name
            config: Options record, options dict, or path to a JSON config file

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the language is unknown or the config type invalid
            ConfigError: If the configuration is invalid for the language
        """
        generator_class = self.get_generator_class(language)
        options_class = generator_class.options_class

        if isinstance(config, BaseOptions):
            options = config
        elif isinstance(config, (str, Path)):
            options = build_options(options_class, config_file=config)
        elif isinstance(config, dict):
            options = build_options(options_class, custom_config=config)
        elif config is None:
            options = generator_class.get_default_options()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(options)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """
        Get all aliases for a specific language.

        Args:
            language: Primary language name

        Returns:
            List of aliases for this language
        """
        language_key = language.lower()
        return sorted(
            [alias for alias, target in self._aliases.items() if target == language_key]
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """
        Get all registered names including aliases.

        Returns:
            Dict mapping primary language to list of all names (including aliases)
        """
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self._generators
        }

    def is_supported(self, language: str) -> bool:
        """
        Check if language is supported.

        Args:
            language: Language name or alias

        Returns:
            True if supported
        """
        language_key = str(getattr(language, "value", language)).lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Args:
            language: Language name

        Returns:
            Dict with language information

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        generator_class = self._generators[language_key]

        # Create temporary instance to get info
        temp_generator = generator_class()

        info = {
            "name": temp_generator.language_name,
            "label": language_key,
            "class": generator_class.__name__,
            "file_extension": temp_generator.file_extension,
            "lexer": language_key,
            "aliases": self.get_aliases_for_language(language_key),
            "module": generator_class.__module__,
        }

        if language_key in {target.value for target in TargetLanguage}:
            metadata = LANGUAGE_INFO[TargetLanguage(language_key)]
            info.update(label=metadata.label, lexer=metadata.lexer)

        return info


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """
    Register the generator of every target language with its aliases.

    This is the single source of truth for generator registration.
    """
    from .languages import (
        CSharpGenerator,
        GoGenerator,
        JavaGenerator,
        JavaScriptGenerator,
        KotlinGenerator,
        PhpGenerator,
        PythonGenerator,
        RustGenerator,
        SwiftGenerator,
        TypeScriptGenerator,
    )

    generators = {
        TargetLanguage.TYPESCRIPT: TypeScriptGenerator,
        TargetLanguage.JAVASCRIPT: JavaScriptGenerator,
        TargetLanguage.GO: GoGenerator,
        TargetLanguage.PYTHON: PythonGenerator,
        TargetLanguage.RUST: RustGenerator,
        TargetLanguage.JAVA: JavaGenerator,
        TargetLanguage.CSHARP: CSharpGenerator,
        TargetLanguage.KOTLIN: KotlinGenerator,
        TargetLanguage.SWIFT: SwiftGenerator,
        TargetLanguage.PHP: PhpGenerator,
    }

    for language in TargetLanguage:
        registry.register(language.value, generators[language], LANGUAGE_ALIASES[language])


# Public API functions using the global registry


def resolve_language(language: Union[str, TargetLanguage]) -> TargetLanguage:
    """
    Resolve a language name or alias to its TargetLanguage tag.

    Raises:
        RegistryError: If the name is not one of the supported languages
    """
    primary = get_registry().resolve(language)
    try:
        return TargetLanguage(primary)
    except ValueError as e:
        raise RegistryError(f"{language} is not a built-in target language") from e


def get_generator(
    language: Union[str, TargetLanguage],
    config: Optional[Union[BaseOptions, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """
    Get generator instance from global registry.

    Args:
        language: Language name
        config: Options record, options dict, or config file path

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, config)


def get_default_options(language: Union[str, TargetLanguage]) -> BaseOptions:
    """Return a fresh copy of the default options for language."""
    return get_registry().get_default_options(language)


def generate(
    data: Any, language: Union[str, TargetLanguage], options: Optional[BaseOptions] = None
) -> str:
    """
    Generate source code for a JSON value in the given language.

    Args:
        data: Parsed JSON value
        language: Target language tag or alias
        options: Options record of that language; defaults when None

    Returns:
        Generated source text

    Raises:
        RegistryError: If the language is unknown
        ConfigError: If options belong to another language
    """
    generator = get_generator(language)
    logger.debug("Generating %s code", generator.language_name)
    return generator.generate(data, options)


@dataclass(frozen=True)
class LanguageConfig:
    """A target language paired with an options record of that language."""

    language: TargetLanguage
    options: Optional[BaseOptions] = None

    def __post_init__(self):
        language = resolve_language(self.language)
        expected = get_registry().get_generator_class(language).options_class

        options = self.options if self.options is not None else expected()
        if not isinstance(options, expected):
            raise ConfigError(
                f"Options for {language.value} must be {expected.__name__}, "
                f"got {type(options).__name__}"
            )

        object.__setattr__(self, "language", language)
        object.__setattr__(self, "options", options)


def generate_from_config(data: Any, config: LanguageConfig) -> str:
    """Generate source code from a LanguageConfig pairing."""
    return generate(data, config.language, config.options)


def output_filename(root_name: str, language: Union[str, TargetLanguage]) -> str:
    """Return the download file name for generated code, e.g. ``root.ts``."""
    extension = LANGUAGE_INFO[resolve_language(language)].extension
    return f"{root_name.lower()}.{extension}"


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {language: get_language_info(language) for language in list_supported_languages()}
