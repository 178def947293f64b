"""
Rust-specific configuration.

Controls the derive list and boxing of nested structs.
"""

from dataclasses import dataclass
from typing import List

from ...core.config import BaseOptions


@dataclass
class RustOptions(BaseOptions):
    """Rust generator options."""

    derive_serde: bool = True
    derive_debug: bool = True
    derive_clone: bool = True
    derive_default: bool = False
    use_box: bool = False

    def derives(self) -> List[str]:
        """Return the traits to derive, in declaration order."""
        derives = []
        if self.derive_serde:
            derives.extend(["Serialize", "Deserialize"])
        if self.derive_debug:
            derives.append("Debug")
        if self.derive_clone:
            derives.append("Clone")
        if self.derive_default:
            derives.append("Default")
        return derives
