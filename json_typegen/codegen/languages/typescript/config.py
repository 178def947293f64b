"""
TypeScript-specific configuration.

Options controlling interface vs. type alias output, export and readonly
modifiers and null handling.
"""

from dataclasses import dataclass

from ...core.config import BaseOptions


@dataclass
class TypeScriptOptions(BaseOptions):
    """TypeScript generator options."""

    use_interface: bool = True
    use_export: bool = True
    use_readonly: bool = False
    strict_null_checks: bool = True


# Presets for common TypeScript use cases
API_RESPONSE_CONFIG = {
    "use_interface": True,
    "use_export": True,
    "use_readonly": True,
    "strict_null_checks": True,
}

LOOSE_CONFIG = {
    "use_interface": False,
    "use_export": False,
    "strict_null_checks": False,
}
