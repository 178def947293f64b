"""Behaviour shared by every target language."""

import copy
import dataclasses

import pytest

from json_typegen.codegen.registry import TargetLanguage, generate, get_default_options

ALL_LANGUAGES = list(TargetLanguage)


def with_options(language: TargetLanguage, **changes):
    return dataclasses.replace(get_default_options(language), **changes)


@pytest.mark.parametrize(
    "language, expected",
    [
        (TargetLanguage.TYPESCRIPT, "  list: unknown[];"),
        (TargetLanguage.JAVASCRIPT, " * @property {Array<*>} list\n"),
        (TargetLanguage.GO, "\tList []interface{} "),
        (TargetLanguage.PYTHON, "    list: list[Any]"),
        (TargetLanguage.RUST, "    pub list: Vec<serde_json::Value>,"),
        (TargetLanguage.JAVA, "    List<Object> list\n"),
        (TargetLanguage.CSHARP, "List<object> List\n"),
        (TargetLanguage.KOTLIN, "    val list: List<Any>\n"),
        (TargetLanguage.SWIFT, "    let list: [Any]\n"),
        (TargetLanguage.PHP, "        public array $list\n"),
    ],
)
def test_empty_array_uses_top_type(language, expected) -> None:
    assert expected in generate({"list": []}, language)


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_output_is_deterministic(language, nested_data) -> None:
    first = generate(nested_data, language)

    assert generate(copy.deepcopy(nested_data), language) == first
    assert generate(nested_data, language, get_default_options(language)) == first


@pytest.mark.parametrize(
    "language, marker",
    [
        (TargetLanguage.TYPESCRIPT, "  id?: number"),
        (TargetLanguage.PYTHON, "    id: float | None = None"),
        (TargetLanguage.RUST, "    pub id: Option<f64>,"),
        (TargetLanguage.CSHARP, " double? Id\n"),
        (TargetLanguage.KOTLIN, "    val id: Double?\n"),
        (TargetLanguage.SWIFT, "    let id: Double?\n"),
        (TargetLanguage.PHP, "        public ?float $id\n"),
    ],
)
def test_optional_properties_toggle(language, marker) -> None:
    assert marker in generate({"id": 1}, language, with_options(language, optional_properties=True))
    assert marker not in generate({"id": 1}, language)


@pytest.mark.parametrize(
    "language, identifier",
    [
        (TargetLanguage.TYPESCRIPT, "  '2fa': boolean;"),
        (TargetLanguage.JAVASCRIPT, "this._2fa = _2fa;"),
        (TargetLanguage.GO, "\tX2fa bool "),
        (TargetLanguage.PYTHON, "    field_2fa: bool"),
        (TargetLanguage.RUST, "    pub _2fa: bool,"),
        (TargetLanguage.JAVA, "    boolean _2fa\n"),
        (TargetLanguage.CSHARP, " bool _2fa\n"),
        (TargetLanguage.KOTLIN, "    val _2fa: Boolean\n"),
        (TargetLanguage.SWIFT, "    let _2fa: Bool\n"),
        (TargetLanguage.PHP, "        public bool $_2fa "),
    ],
)
def test_symbol_keys_become_identifiers(language, identifier, symbol_keys_data) -> None:
    code = generate(symbol_keys_data, language)

    assert identifier in code
    assert " 2fa" not in code
    assert " @type" not in code


@pytest.mark.parametrize("language", ALL_LANGUAGES)
def test_nested_type_names_are_identifiers(language) -> None:
    data = {"@meta": {"ok": True}, "2nd": [{"n": 1}]}
    code = generate(data, language)

    assert "Meta" in code
    assert "_2ndItem" in code
