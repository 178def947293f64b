"""
Swift code generator implementation.

Generates Codable Swift structs or classes from inferred JSON types.
"""

from typing import Any, Dict

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import SwiftOptions

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "String",
    PrimitiveTag.NUMBER: "Double",
    PrimitiveTag.BOOLEAN: "Bool",
    PrimitiveTag.NULL: "Any",
    PrimitiveTag.ANY: "Any",
}


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift Codable types."""

    options_class = SwiftOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "swift"

    @property
    def file_extension(self) -> str:
        """Return Swift file extension."""
        return ".swift"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a Swift type."""
        if node.is_array:
            return f"[{self.map_type(node.element)}]"
        if node.is_object:
            return node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def render_definition(self, node: TypeNode, options: SwiftOptions) -> str:
        """Render a struct or class for one object type."""
        fields = [self._field_data(member, options) for member in node.fields]
        needs_coding_keys = any(field["renamed"] for field in fields)

        context = {
            "name": node.name,
            "keyword": "struct" if options.use_struct else "class",
            "conformances": "Codable" if options.use_struct else "Codable, Equatable",
            "fields": fields,
            "coding_keys": options.use_coding_keys and needs_coding_keys,
        }
        return self.render_template("struct.swift.j2", context)

    def _field_data(self, member: Field, options: SwiftOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.CAMEL_CASE)

        field_type = self.map_type(member.node)
        if options.optional_properties or options.use_optional_properties:
            field_type = f"{field_type}?"

        return {
            "name": name,
            "type": field_type,
            "key": quote(member.original_name),
            "renamed": name != member.original_name,
        }


def create_swift_generator(config: Dict[str, Any] = None) -> SwiftGenerator:
    """Create a Swift generator from an options dictionary."""
    from ...core.config import build_options

    return SwiftGenerator(build_options(SwiftOptions, config))
