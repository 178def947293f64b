"""
PHP code generator module.

Generates PHP 8 classes from JSON data.
"""

from .config import PhpOptions
from .generator import PhpGenerator, create_php_generator

__all__ = ["PhpGenerator", "PhpOptions", "create_php_generator"]
