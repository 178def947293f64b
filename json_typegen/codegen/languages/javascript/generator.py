"""
JavaScript code generator implementation.

Generates ES6 classes, ES5 constructor functions or object templates,
documented with JSDoc, plus optional factory and validator functions.
"""

from typing import Any, Dict, Optional

from ...core.generator import CodeGenerator, quote
from ...core.naming import NamingCase, convert_key
from ...core.schema import Field, PrimitiveTag, TypeNode
from .config import JavaScriptOptions

_DOC_TYPES = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "number",
    PrimitiveTag.BOOLEAN: "boolean",
    PrimitiveTag.NULL: "null",
    PrimitiveTag.ANY: "*",
}

_DEFAULT_VALUES = {
    PrimitiveTag.STRING: "''",
    PrimitiveTag.NUMBER: "0",
    PrimitiveTag.BOOLEAN: "false",
}

_TYPEOF_CHECKS = {
    PrimitiveTag.STRING: "string",
    PrimitiveTag.NUMBER: "number",
    PrimitiveTag.BOOLEAN: "boolean",
}


class JavaScriptGenerator(CodeGenerator):
    """Code generator for JavaScript classes and object templates."""

    options_class = JavaScriptOptions

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "javascript"

    @property
    def file_extension(self) -> str:
        """Return JavaScript file extension."""
        return ".js"

    def map_type(self, node: TypeNode) -> str:
        """Map an inferred type to a JSDoc type expression."""
        if node.is_array:
            return f"Array<{self.map_type(node.element)}>"
        if node.is_object:
            return node.name
        return _DOC_TYPES[node.primitive]

    def render_definition(self, node: TypeNode, options: JavaScriptOptions) -> str:
        """Render the class or template for one object type, plus helpers."""
        fields = [self._field_data(member) for member in node.fields]
        params = ", ".join(field["name"] for field in fields)
        context = {
            "name": node.name,
            "doc_name": "{" + node.name + "}",
            "fields": fields,
            "params": params,
            "use_js_doc": options.use_js_doc,
            "use_es6": options.use_es6,
        }

        if not options.use_class:
            context["keyword"] = "const" if options.use_es6 else "var"
            context["template_name"] = f"{node.name.lower()}Template"
            return self.render_template("template.js.j2", context)

        parts = [self.render_template("class.js.j2", context)]
        if options.generate_factory:
            parts.append(self.render_template("factory.js.j2", context))
        if options.generate_validator:
            context["checks"] = [check for check in map(self._type_check, fields) if check]
            parts.append(self.render_template("validator.js.j2", context))

        return "\n\n".join(part.strip("\n") for part in parts)

    def _field_data(self, member: Field) -> Dict[str, Any]:
        name = convert_key(member.original_name, NamingCase.CAMEL_CASE)
        description = ""
        if name != member.original_name:
            key = quote(member.original_name).replace("*/", "*\\/")
            description = f" - JSON key {key}"

        return {
            "name": name,
            "node": member.node,
            "doc_type": "{" + self.map_type(member.node) + "}",
            "description": description,
            "default": self._default_value(member.node),
        }

    @staticmethod
    def _default_value(node: TypeNode) -> str:
        if node.is_array:
            return "[]"
        if node.is_object:
            return "null"
        return _DEFAULT_VALUES.get(node.primitive, "null")

    @staticmethod
    def _type_check(field: Dict[str, Any]) -> Optional[str]:
        node: TypeNode = field["node"]
        accessor = f"obj.{field['name']}"

        if node.is_array:
            return f"if (!Array.isArray({accessor})) return false;"
        if node.is_object:
            return f"if (typeof {accessor} !== 'object' || {accessor} === null) return false;"
        if node.primitive in _TYPEOF_CHECKS:
            return f"if (typeof {accessor} !== '{_TYPEOF_CHECKS[node.primitive]}') return false;"
        return None


def create_javascript_generator(config: Dict[str, Any] = None) -> JavaScriptGenerator:
    """Create a JavaScript generator from an options dictionary."""
    from ...core.config import build_options

    return JavaScriptGenerator(build_options(JavaScriptOptions, config))


def create_es5_generator() -> JavaScriptGenerator:
    """Create generator for ES5 constructor functions with helpers."""
    return create_javascript_generator(
        {"use_es6": False, "generate_factory": True, "generate_validator": True}
    )
