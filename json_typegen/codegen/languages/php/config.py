"""
PHP-specific configuration.

File header and constructor style settings for PHP 8 classes.
"""

from dataclasses import dataclass

from ...core.config import BaseOptions


@dataclass
class PhpOptions(BaseOptions):
    """PHP generator options."""

    use_strict_types: bool = True
    use_readonly_properties: bool = False
    use_constructor_promotion: bool = True  # PHP 8.0+
    namespace: str = ""
