"""
Java code generator implementation.

Generates records, POJOs, Lombok classes or Immutables interfaces from
inferred JSON types, with optional serialization and validation annotations.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key, to_pascal_case
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import BOXED_TYPES, JavaClassStyle, JavaOptions, JavaSerializationLibrary

_PRIMITIVE_TYPES = {
    PrimitiveTag.STRING: "String",
    PrimitiveTag.NUMBER: "double",
    PrimitiveTag.BOOLEAN: "boolean",
    PrimitiveTag.NULL: "Object",
    PrimitiveTag.ANY: "Object",
}

_RENAME_ANNOTATIONS = {
    JavaSerializationLibrary.JACKSON: "@JsonProperty({key})",
    JavaSerializationLibrary.GSON: "@SerializedName({key})",
    JavaSerializationLibrary.MOSHI: "@Json(name = {key})",
}

_STYLE_TEMPLATES = {
    JavaClassStyle.RECORD: "record.java.j2",
    JavaClassStyle.POJO: "pojo.java.j2",
    JavaClassStyle.LOMBOK: "lombok.java.j2",
    JavaClassStyle.IMMUTABLES: "immutables.java.j2",
}

# Continuation indent lines up with the expression after "return "
_EQUALS_JOINER = " &&\n" + " " * 15


class JavaGenerator(CodeGenerator):
    """Code generator for Java data classes."""

    options_class = JavaOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a Java type."""
        if node.is_array:
            return f"List<{self.map_boxed_type(node.element)}>"
        if node.is_object:
            return node.name
        return _PRIMITIVE_TYPES[node.primitive]

    def map_boxed_type(self, node: TypeNode) -> str:
        """Map an inferred type to a Java type usable as a generic argument."""
        java_type = self.map_type(node)
        return BOXED_TYPES.get(java_type, java_type)

    def get_header(self, types: List[TypeNode], options: JavaOptions) -> str:
        """Render the package clause and imports."""
        context = {"package_name": options.package_name, "imports": options.get_imports()}
        return self.render_template("header.java.j2", context)

    def render_definition(self, node: TypeNode, options: JavaOptions) -> str:
        """Render one type in the configured class style."""
        fields = [self._field_data(member, options) for member in node.fields]
        field_names = [field["name"] for field in fields]

        context = {
            "name": node.name,
            "fields": fields,
            "field_names": field_names,
            "generate_equals": options.generate_equals,
            "equals_expression": _EQUALS_JOINER.join(
                f"Objects.equals({name}, that.{name})" for name in field_names
            )
            or "true",
            "class_annotations": self._class_annotations(options),
        }
        return self.render_template(_STYLE_TEMPLATES[options.class_style], context)

    @staticmethod
    def _class_annotations(options: JavaOptions) -> List[str]:
        annotations = ["@Data"]
        if options.generate_builder:
            annotations.append("@Builder")
        annotations.extend(["@NoArgsConstructor", "@AllArgsConstructor"])
        return annotations

    def _field_data(self, member: Field, options: JavaOptions) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.CAMEL_CASE)

        field_type = self.map_type(member.node)
        if options.use_optional and options.optional_properties:
            field_type = f"Optional<{self.map_boxed_type(member.node)}>"

        annotations = []
        rename = _RENAME_ANNOTATIONS.get(options.serialization_library)
        if rename and name != member.original_name:
            annotations.append(rename.format(key=quote(member.original_name)))

        # Records and Immutables interfaces carry serialization annotations only
        if options.use_validation and options.class_style in (
            JavaClassStyle.POJO,
            JavaClassStyle.LOMBOK,
        ):
            validation = self._validation_annotation(member.node)
            if validation:
                annotations.append(validation)

        return {
            "name": name,
            "type": field_type,
            "accessor": to_pascal_case(name),
            "annotations": annotations,
        }

    @staticmethod
    def _validation_annotation(node: TypeNode) -> str:
        if node.is_primitive and node.primitive == PrimitiveTag.STRING:
            return "@NotBlank"
        if not node.is_primitive:
            return "@NotNull"
        return ""


def create_java_generator(config: Dict[str, Any] = None) -> JavaGenerator:
    """Create a Java generator from an options dictionary."""
    from ...core.config import build_options

    return JavaGenerator(build_options(JavaOptions, config))


def create_spring_generator() -> JavaGenerator:
    """Create generator for Lombok beans with Jackson and validation annotations."""
    return create_java_generator(
        {
            "class_style": "lombok",
            "serialization_library": "jackson",
            "use_validation": True,
            "generate_builder": True,
        }
    )
