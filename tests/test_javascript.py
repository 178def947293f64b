"""Tests for the JavaScript generator."""

from json_typegen.codegen.languages.javascript import (
    JavaScriptGenerator,
    JavaScriptOptions,
    create_es5_generator,
)


def js(data, **options) -> str:
    return JavaScriptGenerator().generate(data, JavaScriptOptions(**options))


class TestJavaScriptGenerator:
    def test_es6_class_with_jsdoc(self, person_data) -> None:
        assert js(person_data, root_name="Person") == (
            "/**\n"
            " * @class Person\n"
            " * @property {string} name\n"
            " * @property {number} age\n"
            " * @property {Array<string>} tags\n"
            " */\n"
            "class Person {\n"
            "  constructor(name, age, tags) {\n"
            "    this.name = name;\n"
            "    this.age = age;\n"
            "    this.tags = tags;\n"
            "  }\n"
            "}"
        )

    def test_without_jsdoc(self, person_data) -> None:
        code = js(person_data, root_name="Person", use_js_doc=False)
        assert code.startswith("class Person {")
        assert "@property" not in code

    def test_renamed_key_documented(self, renamed_data) -> None:
        code = js(renamed_data)

        assert ' * @property {string} firstName - JSON key "first_name"' in code
        assert " * @property {string} lastName\n" in code
        assert ' * @property {boolean} isActive - JSON key "is-active"' in code
        assert "constructor(firstName, lastName, isActive)" in code

    def test_es5_constructor_function(self) -> None:
        code = js({"id": 1}, root_name="Item", use_es6=False, use_js_doc=False)
        assert code == "function Item(id) {\n  this.id = id;\n}"

    def test_object_template(self, nested_data) -> None:
        code = js(nested_data, root_name="User", use_class=False)

        assert " * @typedef {Object} User\n" in code
        assert "const userTemplate = {\n  id: 0,\n  profile: null,\n};" in code
        assert "const linksitemTemplate = {\n  url: '',\n  primary: false,\n};" in code
        assert "  links: []," in code

    def test_es5_template_uses_var(self) -> None:
        code = js({"a": None}, use_class=False, use_es6=False, use_js_doc=False)
        assert code == "var rootTemplate = {\n  a: null,\n};"

    def test_object_and_array_doc_types(self, nested_data) -> None:
        code = js(nested_data, root_name="User")
        assert " * @property {Profile} profile" in code
        assert " * @property {Array<LinksItem>} links" in code

    def test_empty_array_doc_type(self) -> None:
        assert " * @property {Array<*>} items" in js({"items": []})


class TestHelpers:
    def test_factory(self, person_data) -> None:
        code = js(person_data, root_name="Person", generate_factory=True)
        assert (
            "/**\n"
            " * Create a new Person instance\n"
            " * @returns {Person}\n"
            " */\n"
            "function createPerson(name, age, tags) {\n"
            "  return new Person(name, age, tags);\n"
            "}"
        ) in code

    def test_validator(self, nested_data) -> None:
        code = js(nested_data, root_name="User", generate_validator=True, use_js_doc=False)
        assert (
            "function isUser(obj) {\n"
            "  if (typeof obj !== 'object' || obj === null) return false;\n"
            "  if (typeof obj.id !== 'number') return false;\n"
            "  if (typeof obj.profile !== 'object' || obj.profile === null) return false;\n"
            "  return true;\n"
            "}"
        ) in code
        assert "  if (!Array.isArray(obj.links)) return false;" in code

    def test_validator_skips_null_fields(self) -> None:
        code = js({"x": None}, generate_validator=True, use_js_doc=False)
        assert "obj.x" not in code

    def test_es5_preset(self, person_data) -> None:
        code = create_es5_generator().generate(person_data)
        assert "function Root(name, age, tags) {" in code
        assert "function createRoot(name, age, tags) {" in code
        assert "function isRoot(obj) {" in code


class TestSymbolKeys:
    def test_renamed_properties(self, symbol_keys_data) -> None:
        code = js(symbol_keys_data)

        assert ' * @property {string} type - JSON key "@type"\n' in code
        assert ' * @property {boolean} _2fa - JSON key "2fa"\n' in code
        assert "constructor(type, schema, _2fa)" in code

    def test_jsdoc_escapes_key(self) -> None:
        code = js({"a*/b": 1, "c\nd": 2})

        assert ' * @property {number} aB - JSON key "a*\\/b"\n' in code
        assert ' * @property {number} cD - JSON key "c\\nd"\n' in code
