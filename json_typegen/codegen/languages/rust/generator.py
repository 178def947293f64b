"""
Rust code generator implementation.

Generates Rust structs with serde attributes from inferred JSON types.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import RustOptions

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "String",
    PrimitiveTag.NUMBER: "f64",
    PrimitiveTag.BOOLEAN: "bool",
    PrimitiveTag.NULL: "Option<()>",
    PrimitiveTag.ANY: "serde_json::Value",
}

SERDE_IMPORT = "use serde::{Deserialize, Serialize};"

# Strict keywords usable as raw identifiers; serde strips the r# prefix
RUST_KEYWORDS = {
    "as", "break", "const", "continue", "else", "enum", "extern", "false", "fn",
    "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut", "pub",
    "ref", "return", "static", "struct", "trait", "true", "type", "unsafe", "use",
    "where", "while", "async", "await", "dyn", "abstract", "become", "box", "do",
    "final", "macro", "override", "priv", "typeof", "unsized", "virtual", "yield", "try",
}


class RustGenerator(CodeGenerator):
    """Code generator for Rust structs."""

    options_class = RustOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "rust"

    @property
    def file_extension(self) -> str:
        """Return Rust file extension."""
        return ".rs"

    def map_type(self, node: TypeNode, options: RustOptions) -> str:
        """Map an inferred type to a Rust type."""
        if node.is_array:
            return f"Vec<{self.map_type(node.element, options)}>"
        if node.is_object:
            return f"Box<{node.name}>" if options.use_box else node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def get_header(self, types: List[TypeNode], options: RustOptions) -> str:
        """Import the serde derive macros when they are used."""
        return SERDE_IMPORT if options.derive_serde else ""

    def render_definition(self, node: TypeNode, options: RustOptions) -> str:
        """Render a struct for one object type."""
        context = {
            "name": node.name,
            "derives": options.derives(),
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        return self.render_template("struct.rs.j2", context)

    def _field_data(self, member: Field, options: RustOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.SNAKE_CASE)
        field_type = self.map_type(member.node, options)
        if options.optional_properties:
            field_type = f"Option<{field_type}>"

        identifier = f"r#{name}" if name in RUST_KEYWORDS else name

        attributes = []
        if options.derive_serde:
            if name != member.original_name:
                attributes.append(f"#[serde(rename = {quote(member.original_name)})]")
            if options.optional_properties:
                attributes.append('#[serde(skip_serializing_if = "Option::is_none")]')

        return {"name": identifier, "type": field_type, "attributes": attributes}


def create_rust_generator(config: Dict[str, Any] = None) -> RustGenerator:
    """Create a Rust generator from an options dictionary."""
    from ...core.config import build_options

    return RustGenerator(build_options(RustOptions, config))
