"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement: infer
the type tree, render one definition per distinct object type and prepend
the language's header block.
"""

import inspect
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from ...logging_config import get_logger
from .config import BaseOptions, ConfigError
from .schema import PrimitiveTag, TypeNode, find_name_collisions, infer_type, unique_types
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


def quote(value: str) -> str:
    """Render value as a double-quoted string literal (C-family escaping)."""
    return json.dumps(value, ensure_ascii=False)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    options_class: Type[BaseOptions] = BaseOptions

    def __init__(self, options: Optional[BaseOptions] = None):
        """Initialize generator with optional default options."""
        self.options = options if options is not None else self.get_default_options()
        self._check_options(self.options)
        self._template_engine = None

    @classmethod
    def get_default_options(cls) -> BaseOptions:
        """Return a fresh copy of this language's default options."""
        return cls.options_class()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.py')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Defaults to a ``templates`` directory next to the generator module.

        Returns:
            Path to template directory or None
        """
        template_dir = Path(inspect.getfile(type(self))).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_template_directory())
        return self._template_engine

    def _check_options(self, options: BaseOptions) -> None:
        if not isinstance(options, self.options_class):
            raise ConfigError(
                f"{self.language_name} generator expects {self.options_class.__name__}, "
                f"got {type(options).__name__}"
            )

    def generate(self, data: Any, options: Optional[BaseOptions] = None) -> str:
        """
        Generate source code for a JSON value.

        Args:
            data: Parsed JSON value
            options: Options for this call; the generator's own options if None

        Returns:
            Generated code, or an empty string when no object type is reachable
        """
        options = options if options is not None else self.options
        self._check_options(options)

        root = infer_type(data, options.root_name)
        types = [node for node in unique_types(root) if node.is_object]
        definitions = [self.generate_single_schema(node, options) for node in types]
        definitions = [definition for definition in definitions if definition]

        if not definitions:
            logger.debug("No object types reachable from %s; nothing to emit", options.root_name)
            return ""

        parts = []
        header = self.get_header(types, options).strip("\n")
        if header:
            parts.append(header)
        parts.append("\n\n".join(definitions))

        return self.format_code("\n\n".join(parts))

    def generate_single_schema(self, node: TypeNode, options: BaseOptions) -> str:
        """
        Generate code for a single type.

        Args:
            node: Type to generate code for
            options: Options for this call

        Returns:
            Definition of this type only, or "" for non-object nodes
        """
        if not node.is_object:
            return ""
        return self.render_definition(node, options).strip("\n")

    @abstractmethod
    def render_definition(self, node: TypeNode, options: BaseOptions) -> str:
        """Render the definition of one object type."""
        pass

    def get_header(self, types: List[TypeNode], options: BaseOptions) -> str:
        """
        Get the header block (package clause, imports) for the generated code.

        Args:
            types: Object types being emitted, in order
            options: Options for this call

        Returns:
            Header text, or "" if the language needs none
        """
        return ""

    def validate_schemas(
        self, root: TypeNode, options: Optional[BaseOptions] = None
    ) -> List[str]:
        """
        Validate the inferred tree for structural issues worth reporting.

        Args:
            root: Root of the inferred tree
            options: Options the code will be generated with

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for node in unique_types(root):
            if not node.is_object:
                continue

            if not node.fields:
                warnings.append(f"Type '{node.name}' has no fields")

            for member in node.fields:
                if member.node.is_array and member.node.element.primitive == PrimitiveTag.ANY:
                    warnings.append(
                        f"Array field {node.name}.{member.original_name} is empty; "
                        f"element type unknown"
                    )

        for name, signatures in find_name_collisions(root).items():
            warnings.append(
                f"Type name '{name}' is used by {len(signatures)} different shapes; "
                f"only the first is emitted"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, data: Any, options: Optional[BaseOptions] = None
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        data: Parsed JSON value
        options: Options for this call; the generator's own options if None

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    options = options if options is not None else generator.options

    try:
        root = infer_type(data, options.root_name)
        warnings = generator.validate_schemas(root, options)

        code = generator.generate(data, options)

        emitted = [node for node in unique_types(root) if node.is_object]
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(emitted),
            "root_name": options.root_name,
            "optional_properties": options.optional_properties,
            "has_collisions": any("different shapes" in warning for warning in warnings),
        }

        return GenerationResult(code, warnings, metadata)

    except (GeneratorError, ConfigError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
    except Exception as e:
        logger.exception("Unexpected code generation failure")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
