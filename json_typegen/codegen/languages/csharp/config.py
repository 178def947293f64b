"""
C#-specific configuration.

Records vs. classes, nullable reference types and serializer attributes.
"""

from dataclasses import dataclass
from typing import List

from ...core.config import BaseOptions


@dataclass
class CSharpOptions(BaseOptions):
    """C# generator options."""

    use_records: bool = True
    use_nullable_reference_types: bool = True
    use_system_text_json: bool = True
    use_newtonsoft: bool = False
    generate_data_contract: bool = False
    namespace: str = ""

    def get_usings(self) -> List[str]:
        """Return the namespaces to import, in emission order."""
        usings = ["System.Collections.Generic"]
        if self.use_system_text_json:
            usings.append("System.Text.Json.Serialization")
        if self.use_newtonsoft:
            usings.append("Newtonsoft.Json")
        if self.generate_data_contract:
            usings.append("System.Runtime.Serialization")
        return usings
