"""
Configuration management for code generation.

Every language has a closed option record (a dataclass extending
``BaseOptions``). This module builds those records from defaults, JSON
configuration files and dictionaries, rejecting unknown keys.
"""

import dataclasses
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from ...logging_config import get_logger
from .naming import to_snake_case

logger = get_logger(__name__)

O = TypeVar("O", bound="BaseOptions")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class BaseOptions:
    """Options shared by every language generator."""

    root_name: str = "Root"
    optional_properties: bool = False

    def __post_init__(self):
        # Enum options also accept their string values
        for option in dataclasses.fields(self):
            if isinstance(option.default, Enum):
                value = getattr(self, option.name)
                setattr(self, option.name, _coerce_enum(type(option.default), option.name, value))


def _coerce_enum(enum_class: Type[Enum], key: str, value: Any) -> Enum:
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_class)
        raise ConfigError(f"Invalid value for {key}: {value!r} (expected one of: {valid})")


def options_to_dict(options: BaseOptions) -> Dict[str, Any]:
    """Convert an option record to a JSON-friendly dictionary."""
    result = {}
    for option in dataclasses.fields(options):
        value = getattr(options, option.name)
        result[option.name] = value.value if isinstance(value, Enum) else value
    return result


def _coerce_value(options_class: Type[BaseOptions], key: str, value: Any) -> Any:
    """Coerce a raw config value to the type of the field's default."""
    default = getattr(options_class(), key)

    if isinstance(default, Enum):
        return _coerce_enum(type(default), key, value)

    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"Invalid value for {key}: {value!r} (expected a boolean)")
        return value

    if isinstance(default, str):
        if not isinstance(value, str):
            raise ConfigError(f"Invalid value for {key}: {value!r} (expected a string)")
        return value

    return value


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if not path.suffix.lower() == ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    logger.debug("Loaded configuration file %s", path)
    return config


def build_options(
    options_class: Type[O],
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> O:
    """
    Build an option record from defaults, a config file and overrides.

    Keys may be written in snake_case or camelCase (``rootName``).

    Args:
        options_class: Option dataclass of the target language
        custom_config: Dictionary overrides, applied last
        config_file: Path to JSON configuration file

    Returns:
        A fresh option record

    Raises:
        ConfigError: On unknown keys, invalid values or unreadable files
    """
    merged: Dict[str, Any] = {}

    if config_file:
        merged.update(load_config_file(config_file))

    if custom_config:
        merged.update(custom_config)

    known_fields = {option.name for option in dataclasses.fields(options_class)}
    values = {}

    for raw_key, value in merged.items():
        key = to_snake_case(raw_key)
        if key not in known_fields:
            raise ConfigError(
                f"Unknown option '{raw_key}' for {options_class.__name__}. "
                f"Valid options: {', '.join(sorted(known_fields))}"
            )
        values[key] = _coerce_value(options_class, key, value)

    return options_class(**values)
