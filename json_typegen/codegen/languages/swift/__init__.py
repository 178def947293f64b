"""
Swift code generator module.

Generates Codable Swift types from JSON data.
"""

from .config import SwiftOptions
from .generator import SwiftGenerator, create_swift_generator

__all__ = ["SwiftGenerator", "SwiftOptions", "create_swift_generator"]
