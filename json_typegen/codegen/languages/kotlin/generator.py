"""
Kotlin code generator implementation.

Generates Kotlin data classes from inferred JSON types.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import (
    RENAME_ANNOTATIONS,
    SERIALIZATION_IMPORTS,
    KotlinOptions,
    KotlinSerializationLibrary,
)

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "String",
    PrimitiveTag.NUMBER: "Double",
    PrimitiveTag.BOOLEAN: "Boolean",
    PrimitiveTag.NULL: "Any",
    PrimitiveTag.ANY: "Any",
}

_DEFAULT_VALUES = {
    PrimitiveTag.STRING: '""',
    PrimitiveTag.NUMBER: "0.0",
    PrimitiveTag.BOOLEAN: "false",
}


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin data classes."""

    options_class = KotlinOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "kotlin"

    @property
    def file_extension(self) -> str:
        """Return Kotlin file extension."""
        return ".kt"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a Kotlin type."""
        if node.is_array:
            return f"List<{self.map_type(node.element)}>"
        if node.is_object:
            return node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def get_header(self, types: List[TypeNode], options: KotlinOptions) -> str:
        """Render the imports of the configured serialization library."""
        imports = SERIALIZATION_IMPORTS[options.serialization_library]
        return "\n".join(f"import {name}" for name in imports)

    def render_definition(self, node: TypeNode, options: KotlinOptions) -> str:
        """Render a class for one object type."""
        context = {
            "name": node.name,
            "keyword": "data class" if options.use_data_class else "class",
            "serializable": options.serialization_library == KotlinSerializationLibrary.KOTLINX,
            "fields": [self._field_data(member, options) for member in node.fields],
        }
        return self.render_template("class.kt.j2", context)

    def _field_data(self, member: Field, options: KotlinOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.CAMEL_CASE)

        field_type = self.map_type(member.node)
        if options.optional_properties:
            field_type = f"{field_type}?"

        default = ""
        if options.use_default_values:
            value = self._default_value(member.node)
            # A null default needs a nullable type
            if value == "null" and not field_type.endswith("?"):
                field_type = f"{field_type}?"
            default = f" = {value}"

        annotation = ""
        rename = RENAME_ANNOTATIONS.get(options.serialization_library)
        if rename and name != member.original_name:
            annotation = rename.format(key=quote(member.original_name))

        return {"name": name, "type": field_type, "default": default, "annotation": annotation}

    @staticmethod
    def _default_value(node: TypeNode) -> str:
        if node.is_array:
            return "emptyList()"
        if node.is_object:
            return "null"
        return _DEFAULT_VALUES.get(node.primitive, "null")


def create_kotlin_generator(config: Dict[str, Any] = None) -> KotlinGenerator:
    """Create a Kotlin generator from an options dictionary."""
    from ...core.config import build_options

    return KotlinGenerator(build_options(KotlinOptions, config))
