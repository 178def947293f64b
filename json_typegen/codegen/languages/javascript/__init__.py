"""
JavaScript code generator module.

Generates JSDoc-documented classes and object templates from JSON data.
"""

from .config import JavaScriptOptions
from .generator import JavaScriptGenerator, create_es5_generator, create_javascript_generator

__all__ = [
    "JavaScriptGenerator",
    "JavaScriptOptions",
    "create_javascript_generator",
    "create_es5_generator",
]
