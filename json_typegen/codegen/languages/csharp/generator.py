"""
C# code generator implementation.

Generates C# positional records or classes with auto-properties from
inferred JSON types.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import CSharpOptions

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "double",
    PrimitiveTag.BOOLEAN: "bool",
    PrimitiveTag.NULL: "object",
    PrimitiveTag.ANY: "object",
}


class CSharpGenerator(CodeGenerator):
    """Code generator for C# records and classes."""

    options_class = CSharpOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a C# type."""
        if node.is_array:
            return f"List<{self.map_type(node.element)}>"
        if node.is_object:
            return node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def get_header(self, types: List[TypeNode], options: CSharpOptions) -> str:
        """Render usings, the nullable directive and the namespace."""
        context = {
            "usings": options.get_usings(),
            "nullable": options.use_nullable_reference_types,
            "namespace": options.namespace,
        }
        return self.render_template("header.cs.j2", context)

    def render_definition(self, node: TypeNode, options: CSharpOptions) -> str:
        """Render a record or class for one object type."""
        context = {
            "name": node.name,
            "data_contract": options.generate_data_contract,
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        template = "record.cs.j2" if options.use_records else "class.cs.j2"
        return self.render_template(template, context)

    def _field_data(self, member: Field, options: CSharpOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.PASCAL_CASE)
        key = quote(member.original_name)

        field_type = self.map_type(member.node)
        if options.optional_properties and options.use_nullable_reference_types:
            field_type = f"{field_type}?"

        attributes = []
        if name != member.original_name:
            if options.use_system_text_json:
                attributes.append(f"JsonPropertyName({key})")
            if options.use_newtonsoft:
                attributes.append(f"JsonProperty({key})")
        if options.generate_data_contract:
            attributes.append(f"DataMember(Name = {key})")

        return {
            "name": name,
            "type": field_type,
            "attributes": attributes,
            # Positional record parameters need the property: target
            "inline_attributes": "".join(f"[property: {a}] " for a in attributes),
        }


def create_csharp_generator(config: Dict[str, Any] = None) -> CSharpGenerator:
    """Create a C# generator from an options dictionary."""
    from ...core.config import build_options

    return CSharpGenerator(build_options(CSharpOptions, config))
