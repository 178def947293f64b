"""
Swift-specific configuration.
"""

from dataclasses import dataclass

from ...core.config import BaseOptions


@dataclass
class SwiftOptions(BaseOptions):
    """Swift generator options."""

    use_struct: bool = True
    use_coding_keys: bool = True
    use_optional_properties: bool = False
