"""
TypeScript code generator module.

Generates TypeScript interfaces and type aliases from JSON data.
"""

from .config import API_RESPONSE_CONFIG, LOOSE_CONFIG, TypeScriptOptions
from .generator import TypeScriptGenerator, create_typescript_generator

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptOptions",
    "create_typescript_generator",
    "API_RESPONSE_CONFIG",
    "LOOSE_CONFIG",
]
