"""
Go code generator module.

Generates Go structs with JSON tags from JSON data.
"""

from .config import CLI_TOOL_CONFIG, LIBRARY_CONFIG, WEB_API_CONFIG, GoOptions
from .generator import (
    GoGenerator,
    create_go_generator,
    create_library_generator,
    create_web_api_generator,
)

__all__ = [
    "GoGenerator",
    "GoOptions",
    # Factory functions
    "create_go_generator",
    "create_web_api_generator",
    "create_library_generator",
    # Presets
    "WEB_API_CONFIG",
    "CLI_TOOL_CONFIG",
    "LIBRARY_CONFIG",
]


# Example usage patterns:
#
# Basic generator:
# generator = create_go_generator()
#
# Custom options:
# generator = create_go_generator({"package_name": "models", "use_pointers": True})
#
# Use presets:
# generator = create_web_api_generator()  # Pre-configured for web APIs
