"""Tests for option records and build_options."""

import json

import pytest

from json_typegen.codegen.core.config import (
    BaseOptions,
    ConfigError,
    build_options,
    load_config_file,
    options_to_dict,
)
from json_typegen.codegen.languages.go import GoOptions
from json_typegen.codegen.languages.java import JavaClassStyle, JavaOptions
from json_typegen.codegen.languages.python import PythonOptions, PythonStyle


class TestBuildOptions:
    """Merging defaults, files and dictionaries."""

    def test_defaults(self) -> None:
        options = build_options(GoOptions)
        assert options == GoOptions()
        assert options.root_name == "Root"
        assert options.optional_properties is False

    def test_dict_overrides(self) -> None:
        options = build_options(GoOptions, {"package_name": "models", "use_pointers": True})
        assert options.package_name == "models"
        assert options.use_pointers is True
        assert options.omit_empty is True

    def test_camel_case_keys_accepted(self) -> None:
        options = build_options(GoOptions, {"rootName": "Person", "optionalProperties": True})
        assert options.root_name == "Person"
        assert options.optional_properties is True

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unknown option 'use_tabs'"):
            build_options(GoOptions, {"use_tabs": True})

    def test_enum_from_string(self) -> None:
        options = build_options(JavaOptions, {"class_style": "pojo"})
        assert options.class_style is JavaClassStyle.POJO

    def test_enum_instance_kept(self) -> None:
        options = build_options(PythonOptions, {"style": PythonStyle.PYDANTIC})
        assert options.style is PythonStyle.PYDANTIC

    def test_invalid_enum_value(self) -> None:
        with pytest.raises(ConfigError, match="expected one of"):
            build_options(PythonOptions, {"style": "attrs"})

    def test_bool_type_checked(self) -> None:
        with pytest.raises(ConfigError, match="expected a boolean"):
            build_options(GoOptions, {"use_pointers": "yes"})

    def test_string_type_checked(self) -> None:
        with pytest.raises(ConfigError, match="expected a string"):
            build_options(GoOptions, {"package_name": 3})

    def test_file_then_dict(self, tmp_path) -> None:
        config_file = tmp_path / "go.json"
        config_file.write_text(
            json.dumps({"packageName": "fromfile", "useJsonTag": False}), encoding="utf-8"
        )

        options = build_options(GoOptions, {"package_name": "fromdict"}, config_file)

        assert options.package_name == "fromdict"
        assert options.use_json_tag is False

    def test_fresh_instance_each_call(self) -> None:
        assert build_options(GoOptions) is not build_options(GoOptions)


class TestLoadConfigFile:
    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "absent.json")

    def test_wrong_suffix(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config_file(path)

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config_file(path)

    def test_not_an_object(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config_file(path)


def test_options_to_dict_flattens_enums() -> None:
    result = options_to_dict(JavaOptions())
    assert result["class_style"] == "record"
    assert result["serialization_library"] == "none"
    assert result["root_name"] == "Root"


def test_base_options_defaults() -> None:
    assert BaseOptions() == BaseOptions(root_name="Root", optional_properties=False)


class TestDirectConstruction:
    """Option records built without build_options."""

    def test_enum_string_coerced(self) -> None:
        options = JavaOptions(class_style="lombok")
        assert options.class_style is JavaClassStyle.LOMBOK

    def test_invalid_enum_string(self) -> None:
        with pytest.raises(ConfigError, match="expected one of"):
            PythonOptions(style="attrs")
