"""
Rust code generator module.

Generates serde-ready Rust structs from JSON data.
"""

from .config import RustOptions
from .generator import RustGenerator, create_rust_generator

__all__ = ["RustGenerator", "RustOptions", "create_rust_generator"]
