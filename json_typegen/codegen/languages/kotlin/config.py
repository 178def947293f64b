"""
Kotlin-specific configuration.

Data class toggle, serialization library and default values.
"""

from dataclasses import dataclass
from enum import Enum

from ...core.config import BaseOptions


class KotlinSerializationLibrary(Enum):
    """Library whose annotations are emitted."""

    NONE = "none"
    KOTLINX = "kotlinx"
    GSON = "gson"
    MOSHI = "moshi"
    JACKSON = "jackson"


SERIALIZATION_IMPORTS = {
    KotlinSerializationLibrary.NONE: [],
    KotlinSerializationLibrary.KOTLINX: [
        "kotlinx.serialization.Serializable",
        "kotlinx.serialization.SerialName",
    ],
    KotlinSerializationLibrary.GSON: ["com.google.gson.annotations.SerializedName"],
    KotlinSerializationLibrary.MOSHI: ["com.squareup.moshi.Json"],
    KotlinSerializationLibrary.JACKSON: ["com.fasterxml.jackson.annotation.JsonProperty"],
}

RENAME_ANNOTATIONS = {
    KotlinSerializationLibrary.KOTLINX: "@SerialName({key})",
    KotlinSerializationLibrary.GSON: "@SerializedName({key})",
    KotlinSerializationLibrary.MOSHI: "@Json(name = {key})",
    KotlinSerializationLibrary.JACKSON: "@JsonProperty({key})",
}


@dataclass
class KotlinOptions(BaseOptions):
    """Kotlin generator options."""

    use_data_class: bool = True
    serialization_library: KotlinSerializationLibrary = KotlinSerializationLibrary.NONE
    use_default_values: bool = False
