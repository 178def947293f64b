"""
TypeScript code generator implementation.

Generates TypeScript interfaces or type aliases from inferred JSON types.
"""

import re
from typing import Any, Dict

from ...core.generator import CodeGenerator, quote
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import TypeScriptOptions

# TypeScript allows '$' in identifiers
_TS_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "number",
    PrimitiveTag.BOOLEAN: "boolean",
    PrimitiveTag.NULL: "null",
    PrimitiveTag.ANY: "unknown",
}


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces and type aliases."""

    options_class = TypeScriptOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def map_type(self, node: TypeNode, options: TypeScriptOptions) -> str:
        """Map an inferred type to a TypeScript type expression."""
        if node.is_array:
            return f"{self.map_type(node.element, options)}[]"
        if node.is_object:
            return node.name
        if node.primitive == PrimitiveTag.NULL and not options.strict_null_checks:
            return "any"
        return _PRIMITIVE_TYPES[node.primitive]

    def render_definition(self, node: TypeNode, options: TypeScriptOptions) -> str:
        """Render an interface or type alias for one object type."""
        context = {
            "name": node.name,
            "export": "export " if options.use_export else "",
            "keyword": "interface" if options.use_interface else "type",
            "assignment": "" if options.use_interface else " =",
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        return self.render_template("definition.ts.j2", context)

    def _field_data(self, member: Field, options: TypeScriptOptions) -> Dict[str, Any]:
        field_type = self.map_type(member.node, options)
        if options.optional_properties and options.strict_null_checks:
            field_type = f"{field_type} | undefined"

        return {
            "key": self.property_key(member.original_name),
            "type": field_type,
            "marker": "?" if options.optional_properties else "",
            "readonly": "readonly " if options.use_readonly else "",
        }

    @staticmethod
    def property_key(key: str) -> str:
        """Return key as written, single-quoted when it is not an identifier."""
        if _TS_IDENTIFIER.match(key):
            return key
        # JSON escapes cover backslashes and control characters
        escaped = quote(key)[1:-1].replace('\\"', '"').replace("'", "\\'")
        return f"'{escaped}'"


def create_typescript_generator(config: Dict[str, Any] = None) -> TypeScriptGenerator:
    """Create a TypeScript generator from an options dictionary."""
    from ...core.config import build_options

    return TypeScriptGenerator(build_options(TypeScriptOptions, config))
