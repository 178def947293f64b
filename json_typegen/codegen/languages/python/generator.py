"""
Python code generator implementation.

Generates Python dataclasses, TypedDict classes or Pydantic models using
templates. Imports are derived from the names the definitions use.
"""

import keyword
from typing import Any, Dict, List, Set, Tuple

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key, is_valid_identifier
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import PYTHON_TYPE_MAP, STYLE_IMPORTS, PythonOptions, PythonStyle

STDLIB_MODULES = {"dataclasses", "typing"}

Import = Tuple[str, str]


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses, TypedDict, and Pydantic models."""

    options_class = PythonOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a Python type annotation."""
        if node.is_array:
            return f"list[{self.map_type(node.element)}]"
        if node.is_object:
            return node.name
        return PYTHON_TYPE_MAP[node.primitive]

    def get_header(self, types: List[TypeNode], options: PythonOptions) -> str:
        """Render the import block for the names used by all definitions."""
        imports: Dict[str, Set[str]] = {}

        for module, name in self._collect_imports(types, options):
            imports.setdefault(module, set()).add(name)

        stdlib = [(m, sorted(n)) for m, n in sorted(imports.items()) if m in STDLIB_MODULES]
        third_party = [
            (m, sorted(n)) for m, n in sorted(imports.items()) if m not in STDLIB_MODULES
        ]
        groups = [group for group in (stdlib, third_party) if group]

        return self.render_template("imports.py.j2", {"groups": groups})

    def _collect_imports(self, types: List[TypeNode], options: PythonOptions) -> List[Import]:
        collected = [STYLE_IMPORTS[options.style]]
        for node in types:
            for member in node.fields:
                collected.extend(self._field_data(member, options)["imports"])
        return collected

    def render_definition(self, node: TypeNode, options: PythonOptions) -> str:
        """Render one class in the configured style."""
        fields = [self._field_data(member, options) for member in node.fields]
        context = {"name": node.name, "fields": fields}

        if options.style == PythonStyle.TYPEDDICT:
            context["total"] = "" if options.use_total else ", total=False"
            context["name_literal"] = quote(node.name)
            context["functional"] = any(
                not self._is_attribute_name(member.original_name) for member in node.fields
            )
            return self.render_template("typeddict.py.j2", context)

        if options.style == PythonStyle.PYDANTIC:
            return self.render_template("pydantic.py.j2", context)

        context["decorator"] = self._build_decorator(options)
        return self.render_template("dataclass.py.j2", context)

    @staticmethod
    def _build_decorator(options: PythonOptions) -> str:
        arguments = []
        if options.use_frozen:
            arguments.append("frozen=True")
        if options.use_slots:
            arguments.append("slots=True")
        if options.use_kw_only:
            arguments.append("kw_only=True")
        return f"@dataclass({', '.join(arguments)})" if arguments else "@dataclass"

    @staticmethod
    def _is_attribute_name(name: str) -> bool:
        return is_valid_identifier(name) and not keyword.iskeyword(name)

    def _field_data(self, member: Field, options: PythonOptions) -> Dict[str, Any]:
        """Generate field data for template."""
        key = member.original_name
        base_type = self.map_type(member.node)
        imports: List[Import] = []

        if _contains_any(member.node):
            imports.append(("typing", "Any"))

        if options.style == PythonStyle.TYPEDDICT:
            field_type = base_type
            if options.optional_properties:
                field_type = f"NotRequired[{base_type}]"
                imports.append(("typing", "NotRequired"))
            return {
                "key": key,
                "key_literal": quote(key),
                "type": field_type,
                "imports": imports,
            }

        name = convert_key(key, NamingCase.SNAKE_CASE, prefix="field_")
        if keyword.iskeyword(name):
            name = f"{name}_"

        field_type = base_type
        if options.optional_properties and base_type != "None":
            field_type = f"{base_type} | None"

        arguments = ["default=None"] if options.optional_properties else []
        default = " = None" if options.optional_properties else ""

        if name != key:
            if options.style == PythonStyle.PYDANTIC:
                arguments.append(f"alias={quote(key)}")
                default = f" = Field({', '.join(arguments)})"
                imports.append(("pydantic", "Field"))
            else:
                arguments.append(f'metadata={{"json_key": {quote(key)}}}')
                default = f" = field({', '.join(arguments)})"
                imports.append(("dataclasses", "field"))

        return {
            "name": name,
            "original_name": key,
            "type": field_type,
            "default": default,
            "imports": imports,
        }

    def validate_schemas(self, root: TypeNode, options: PythonOptions = None) -> List[str]:
        """Validate the inferred tree for Python generation."""
        warnings = super().validate_schemas(root, options)
        options = options if options is not None else self.options

        if options.style == PythonStyle.TYPEDDICT:
            warnings.append("TypedDict classes are type hints only - no runtime validation")

        return warnings


def _contains_any(node: TypeNode) -> bool:
    while node.is_array:
        node = node.element
    return node.is_primitive and node.primitive == PrimitiveTag.ANY


# Factory functions
def create_python_generator(style: str = "dataclass", **options) -> PythonGenerator:
    """Create a Python generator with specified style."""
    from ...core.config import build_options

    return PythonGenerator(build_options(PythonOptions, {"style": style, **options}))


def create_dataclass_generator() -> PythonGenerator:
    """Create generator for Python dataclasses."""
    from .config import get_dataclass_config

    return PythonGenerator(get_dataclass_config())


def create_pydantic_generator() -> PythonGenerator:
    """Create generator for Pydantic v2 models."""
    from .config import get_pydantic_config

    return PythonGenerator(get_pydantic_config())


def create_typeddict_generator() -> PythonGenerator:
    """Create generator for TypedDict classes."""
    from .config import get_typeddict_config

    return PythonGenerator(get_typeddict_config())
