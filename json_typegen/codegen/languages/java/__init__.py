"""
Java code generator module.

Generates Java records, POJOs, Lombok classes and Immutables interfaces
from JSON data.
"""

from .config import JavaClassStyle, JavaOptions, JavaSerializationLibrary
from .generator import JavaGenerator, create_java_generator, create_spring_generator

__all__ = [
    "JavaGenerator",
    "JavaOptions",
    "JavaClassStyle",
    "JavaSerializationLibrary",
    "create_java_generator",
    "create_spring_generator",
]
