"""
C# code generator module.

Generates C# records and classes from JSON data.
"""

from .config import CSharpOptions
from .generator import CSharpGenerator, create_csharp_generator

__all__ = ["CSharpGenerator", "CSharpOptions", "create_csharp_generator"]
