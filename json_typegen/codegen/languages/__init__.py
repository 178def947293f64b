"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .csharp import CSharpGenerator, CSharpOptions
from .go import GoGenerator, GoOptions
from .java import JavaClassStyle, JavaGenerator, JavaOptions, JavaSerializationLibrary
from .javascript import JavaScriptGenerator, JavaScriptOptions
from .kotlin import KotlinGenerator, KotlinOptions, KotlinSerializationLibrary
from .php import PhpGenerator, PhpOptions
from .python import PythonGenerator, PythonOptions, PythonStyle
from .rust import RustGenerator, RustOptions
from .swift import SwiftGenerator, SwiftOptions
from .typescript import TypeScriptGenerator, TypeScriptOptions

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptOptions",
    "JavaScriptGenerator",
    "JavaScriptOptions",
    "GoGenerator",
    "GoOptions",
    "PythonGenerator",
    "PythonOptions",
    "PythonStyle",
    "RustGenerator",
    "RustOptions",
    "JavaGenerator",
    "JavaOptions",
    "JavaClassStyle",
    "JavaSerializationLibrary",
    "CSharpGenerator",
    "CSharpOptions",
    "KotlinGenerator",
    "KotlinOptions",
    "KotlinSerializationLibrary",
    "SwiftGenerator",
    "SwiftOptions",
    "PhpGenerator",
    "PhpOptions",
]
