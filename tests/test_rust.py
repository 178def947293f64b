"""Tests for the Rust generator."""

from json_typegen.codegen.languages.rust import RustGenerator, RustOptions, create_rust_generator


def rust(data, **options) -> str:
    return RustGenerator().generate(data, RustOptions(**options))


class TestRustGenerator:
    def test_person_struct(self, person_data) -> None:
        assert rust(person_data, root_name="Person") == (
            "use serde::{Deserialize, Serialize};\n"
            "\n"
            "#[derive(Serialize, Deserialize, Debug, Clone)]\n"
            "pub struct Person {\n"
            "    pub name: String,\n"
            "    pub age: f64,\n"
            "    pub tags: Vec<String>,\n"
            "}"
        )

    def test_rename_attributes(self, renamed_data) -> None:
        code = rust(renamed_data)

        assert "    pub first_name: String,\n" in code
        assert '    #[serde(rename = "lastName")]\n    pub last_name: String,' in code
        assert '    #[serde(rename = "is-active")]\n    pub is_active: bool,' in code

    def test_optional_fields(self) -> None:
        code = rust({"id": 1}, optional_properties=True)
        assert (
            '    #[serde(skip_serializing_if = "Option::is_none")]\n'
            "    pub id: Option<f64>,"
        ) in code

    def test_without_serde(self) -> None:
        code = rust({"userId": 1}, derive_serde=False, optional_properties=True)

        assert not code.startswith("use serde")
        assert "#[serde" not in code
        assert code.startswith("#[derive(Debug, Clone)]\n")
        assert "    pub user_id: Option<f64>," in code

    def test_no_derives(self) -> None:
        code = rust({"a": 1}, derive_serde=False, derive_debug=False, derive_clone=False)
        assert code == "pub struct Root {\n    pub a: f64,\n}"

    def test_default_derive(self) -> None:
        assert "#[derive(Serialize, Deserialize, Debug, Clone, Default)]" in rust(
            {"a": 1}, derive_default=True
        )

    def test_keyword_fields_use_raw_identifiers(self) -> None:
        code = rust({"type": "a", "match": 1})
        assert "    pub r#type: String,\n" in code
        assert "    pub r#match: f64,\n" in code

    def test_boxed_nested_struct(self, nested_data) -> None:
        code = rust(nested_data, root_name="User", use_box=True)

        assert code.index("pub struct LinksItem") < code.index("pub struct Profile")
        assert "    pub profile: Box<Profile>,\n" in code
        assert "    pub links: Vec<Box<LinksItem>>,\n" in code

    def test_null_and_any(self) -> None:
        code = rust({"a": None, "b": []})
        assert "    pub a: Option<()>,\n" in code
        assert "    pub b: Vec<serde_json::Value>,\n" in code


def test_factory_and_derive_order() -> None:
    generator = create_rust_generator({"deriveDefault": True, "deriveClone": False})
    assert generator.options.derives() == ["Serialize", "Deserialize", "Debug", "Default"]


class TestSymbolKeys:
    def test_renamed_to_valid_identifiers(self, symbol_keys_data) -> None:
        code = rust(symbol_keys_data)

        assert '    #[serde(rename = "@type")]\n    pub r#type: String,' in code
        assert '    #[serde(rename = "$schema")]\n    pub schema: String,' in code
        assert '    #[serde(rename = "2fa")]\n    pub _2fa: bool,' in code
