"""
Java-specific configuration.

Class style, serialization library and the imports each option pulls in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from ...core.config import BaseOptions


class JavaClassStyle(Enum):
    """Shape of the generated Java types."""

    RECORD = "record"  # Java 16+
    POJO = "pojo"
    LOMBOK = "lombok"
    IMMUTABLES = "immutables"


class JavaSerializationLibrary(Enum):
    """Library whose rename annotation is emitted for renamed fields."""

    NONE = "none"
    JACKSON = "jackson"
    GSON = "gson"
    MOSHI = "moshi"


SERIALIZATION_IMPORTS = {
    JavaSerializationLibrary.NONE: [],
    JavaSerializationLibrary.JACKSON: ["com.fasterxml.jackson.annotation.JsonProperty"],
    JavaSerializationLibrary.GSON: ["com.google.gson.annotations.SerializedName"],
    JavaSerializationLibrary.MOSHI: ["com.squareup.moshi.Json"],
}

# Boxed counterparts used inside generics
BOXED_TYPES = {
    "int": "Integer",
    "long": "Long",
    "double": "Double",
    "float": "Float",
    "boolean": "Boolean",
    "byte": "Byte",
    "short": "Short",
    "char": "Character",
}


@dataclass
class JavaOptions(BaseOptions):
    """Java generator options."""

    package_name: str = "com.example"
    class_style: JavaClassStyle = JavaClassStyle.RECORD
    serialization_library: JavaSerializationLibrary = JavaSerializationLibrary.NONE
    use_validation: bool = False
    generate_builder: bool = False
    generate_equals: bool = True
    use_optional: bool = False

    def get_imports(self) -> List[str]:
        """Return the fully qualified names to import, in emission order."""
        imports = ["java.util.List"]

        if self.use_optional and self.optional_properties:
            imports.append("java.util.Optional")
        if self.generate_equals and self.class_style == JavaClassStyle.POJO:
            imports.append("java.util.Objects")

        imports.extend(SERIALIZATION_IMPORTS[self.serialization_library])

        if self.class_style == JavaClassStyle.LOMBOK:
            imports.extend(["lombok.Data", "lombok.NoArgsConstructor", "lombok.AllArgsConstructor"])
            if self.generate_builder:
                imports.append("lombok.Builder")
        elif self.class_style == JavaClassStyle.IMMUTABLES:
            imports.append("org.immutables.value.Value")

        if self.use_validation:
            imports.extend(
                [
                    "javax.validation.constraints.NotNull",
                    "javax.validation.constraints.NotBlank",
                ]
            )

        return imports
