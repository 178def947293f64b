"""
Kotlin code generator module.

Generates Kotlin data classes from JSON data.
"""

from .config import KotlinOptions, KotlinSerializationLibrary
from .generator import KotlinGenerator, create_kotlin_generator

__all__ = [
    "KotlinGenerator",
    "KotlinOptions",
    "KotlinSerializationLibrary",
    "create_kotlin_generator",
]
