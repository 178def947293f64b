"""
Go-specific configuration.

Extends the base options with struct tag, pointer and package settings.
"""

from dataclasses import dataclass

from ...core.config import BaseOptions


@dataclass
class GoOptions(BaseOptions):
    """Go generator options."""

    use_pointers: bool = False
    omit_empty: bool = True
    use_json_tag: bool = True
    package_name: str = ""  # Empty: no package clause


# Default configurations for different Go use cases
WEB_API_CONFIG = {
    "package_name": "models",
    "use_json_tag": True,
    "omit_empty": True,
    "use_pointers": True,
}

CLI_TOOL_CONFIG = {
    "package_name": "main",
    "use_json_tag": False,
    "use_pointers": False,
}

LIBRARY_CONFIG = {
    "package_name": "types",
    "use_json_tag": True,
    "omit_empty": False,
    "use_pointers": False,
}
