"""
Go code generator implementation.

Generates Go structs with JSON tags from inferred JSON types.
"""

from typing import Any, Dict, List, Optional

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import GoOptions

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "float64",
    PrimitiveTag.BOOLEAN: "bool",
    PrimitiveTag.NULL: "interface{}",
    PrimitiveTag.ANY: "interface{}",
}


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    options_class = GoOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def map_type(self, node: TypeNode, options: GoOptions) -> str:
        """Map an inferred type to a Go type."""
        if node.is_array:
            return f"[]{self.map_type(node.element, options)}"
        if node.is_object:
            return f"*{node.name}" if options.use_pointers else node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def get_header(self, types: List[TypeNode], options: GoOptions) -> str:
        """Render the package clause, if a package name is configured."""
        if not options.package_name:
            return ""
        return f"package {options.package_name}"

    def render_definition(self, node: TypeNode, options: GoOptions) -> str:
        """Render a struct for one object type."""
        context = {
            "name": node.name,
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        return self.render_template("struct.go.j2", context)

    def _field_data(self, member: Field, options: GoOptions) -> Dict[str, Any]:
        field_data = {
            "name": convert_key(
                member.original_name, NamingCase.PASCAL_CASE, prefix="X", fallback="Field"
            ),
            "type": self.map_type(member.node, options),
            "original_name": member.original_name,
            "tag": "",
        }

        if options.use_json_tag:
            field_data["tag"] = " " + self._render_json_tag(member.original_name, options)

        return field_data

    def _render_json_tag(self, key: str, options: GoOptions) -> str:
        """Render JSON tag using template."""
        omitempty = options.omit_empty or options.optional_properties
        value = f"{key},omitempty" if omitempty else key
        return self.render_template("json_tag.go.j2", {"value": quote(value)})

    def validate_schemas(
        self, root: TypeNode, options: Optional[GoOptions] = None
    ) -> List[str]:
        """Validate the inferred tree for Go generation."""
        warnings = super().validate_schemas(root, options)
        options = options if options is not None else self.options

        package_name = options.package_name
        if package_name and not package_name.isidentifier():
            warnings.append(f"Invalid Go package name: {package_name}")

        return warnings


# Factory functions
def create_go_generator(config: Dict[str, Any] = None) -> GoGenerator:
    """Create a Go generator from an options dictionary."""
    from ...core.config import build_options

    return GoGenerator(build_options(GoOptions, config))


def create_web_api_generator() -> GoGenerator:
    """Create generator optimized for web API models."""
    from .config import WEB_API_CONFIG

    return create_go_generator(WEB_API_CONFIG)


def create_library_generator() -> GoGenerator:
    """Create generator optimized for reusable libraries."""
    from .config import LIBRARY_CONFIG

    return create_go_generator(LIBRARY_CONFIG)
