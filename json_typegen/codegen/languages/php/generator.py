"""
PHP code generator implementation.

Generates PHP 8 classes with typed properties from inferred JSON types.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import PhpOptions

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "float",
    PrimitiveTag.BOOLEAN: "bool",
    PrimitiveTag.NULL: "mixed",
    PrimitiveTag.ANY: "mixed",
}


class PhpGenerator(CodeGenerator):
    """Code generator for PHP classes."""

    options_class = PhpOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "php"

    @property
    def file_extension(self) -> str:
        """Return PHP file extension."""
        return ".php"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a PHP type declaration."""
        if node.is_array:
            return "array"
        if node.is_object:
            return node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def get_header(self, types: List[TypeNode], options: PhpOptions) -> str:
        """Render the open tag, strict_types declaration and namespace."""
        context = {"strict_types": options.use_strict_types, "namespace": options.namespace}
        return self.render_template("header.php.j2", context)

    def render_definition(self, node: TypeNode, options: PhpOptions) -> str:
        """Render a class for one object type."""
        context = {
            "name": node.name,
            "readonly": "readonly " if options.use_readonly_properties else "",
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        template = "promoted.php.j2" if options.use_constructor_promotion else "classic.php.j2"
        return self.render_template(template, context)

    def _field_data(self, member: Field, options: PhpOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.CAMEL_CASE)

        field_type = self.map_type(member.node)
        # mixed already includes null
        if options.optional_properties and field_type != "mixed":
            field_type = f"?{field_type}"

        comment = ""
        if name != member.original_name:
            # ?> would close the PHP block inside a line comment
            key = quote(member.original_name).replace("?>", "?\\>")
            comment = f" // {key}"

        return {"name": name, "type": field_type, "comment": comment}


def create_php_generator(config: Dict[str, Any] = None) -> PhpGenerator:
    """Create a PHP generator from an options dictionary."""
    from ...core.config import build_options

    return PhpGenerator(build_options(PhpOptions, config))
