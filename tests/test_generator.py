"""Tests for the shared generator skeleton and generate_code."""

import pytest

from json_typegen.codegen.core.config import BaseOptions, ConfigError
from json_typegen.codegen.core.generator import (
    CodeGenerator,
    GenerationResult,
    generate_code,
    quote,
)
from json_typegen.codegen.core.schema import NodeKind, TypeNode
from json_typegen.codegen.languages.go import GoOptions
from json_typegen.codegen.languages.typescript import TypeScriptGenerator, TypeScriptOptions


class NamesOnlyGenerator(CodeGenerator):
    """Minimal generator listing type and field names."""

    @property
    def language_name(self) -> str:
        return "names"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def get_header(self, types, options) -> str:
        return f"# {len(types)} types"

    def render_definition(self, node: TypeNode, options: BaseOptions) -> str:
        fields = ", ".join(member.original_name for member in node.fields)
        return f"{node.name}({fields})\n"


class TestGenerate:
    """CodeGenerator.generate assembly."""

    def test_header_then_definitions(self, nested_data) -> None:
        code = NamesOnlyGenerator().generate(nested_data)
        assert code == (
            "# 3 types\n\n"
            "LinksItem(url, primary)\n\n"
            "Profile(displayName, links)\n\n"
            "Root(id, profile)"
        )

    def test_root_name_from_options(self) -> None:
        code = NamesOnlyGenerator().generate({"a": 1}, BaseOptions(root_name="Thing"))
        assert code.endswith("Thing(a)")

    def test_scalar_root_gives_empty_output(self) -> None:
        assert NamesOnlyGenerator().generate("just a string") == ""
        assert NamesOnlyGenerator().generate([1, 2, 3]) == ""

    def test_root_array_emits_items(self) -> None:
        code = NamesOnlyGenerator().generate([{"id": 1}])
        assert code == "# 1 types\n\nRootItem(id)"

    def test_empty_object_is_emitted(self) -> None:
        assert NamesOnlyGenerator().generate({}) == "# 1 types\n\nRoot()"

    def test_wrong_options_class_rejected(self) -> None:
        with pytest.raises(ConfigError, match="TypeScriptOptions"):
            TypeScriptGenerator(GoOptions())

        with pytest.raises(ConfigError):
            TypeScriptGenerator().generate({"a": 1}, GoOptions())

    def test_get_default_options_is_fresh(self) -> None:
        first = TypeScriptGenerator.get_default_options()
        second = TypeScriptGenerator.get_default_options()
        assert first == second == TypeScriptOptions()
        assert first is not second

    def test_single_schema_ignores_non_objects(self) -> None:
        generator = NamesOnlyGenerator()
        node = TypeNode(name="x", kind=NodeKind.PRIMITIVE)
        assert generator.generate_single_schema(node, BaseOptions()) == ""


class TestFormatCode:
    def test_strips_trailing_whitespace_and_collapses_blanks(self) -> None:
        code = "a   \n\n\n\n\nb\t\n"
        assert NamesOnlyGenerator().format_code(code) == "a\n\n\nb\n"


class TestGenerateCode:
    """Error-safe wrapper around generate."""

    def test_success_metadata(self, nested_data) -> None:
        generator = TypeScriptGenerator(TypeScriptOptions(root_name="User"))
        result = generate_code(generator, nested_data)

        assert result.success
        assert result.error_message is None
        assert "export interface User {" in result.code
        assert result.metadata == {
            "language": "typescript",
            "file_extension": ".ts",
            "type_count": 3,
            "root_name": "User",
            "optional_properties": False,
            "has_collisions": False,
        }

    def test_warns_on_empty_array(self) -> None:
        result = generate_code(TypeScriptGenerator(), {"items": []})
        assert any("items is empty" in warning for warning in result.warnings)

    def test_warns_on_collisions(self) -> None:
        data = {"a": {"meta": {"x": 1}}, "b": {"meta": {"y": 2}}}
        result = generate_code(TypeScriptGenerator(), data)

        assert result.success
        assert result.metadata["has_collisions"] is True
        assert any("Meta" in warning for warning in result.warnings)

    def test_wrong_options_reported_not_raised(self) -> None:
        result = generate_code(TypeScriptGenerator(), {"a": 1}, GoOptions())

        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, ConfigError)
        assert result.error_message.startswith("Code generation failed")


def test_generation_result_error() -> None:
    error = ValueError("boom")
    result = GenerationResult.error("failed", error)
    assert not result.success
    assert result.exception is error
    assert result.warnings == []


@pytest.mark.parametrize(
    "value, expected",
    [
        ("name", '"name"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("naïve", '"naïve"'),
    ],
)
def test_quote(value, expected) -> None:
    assert quote(value) == expected
