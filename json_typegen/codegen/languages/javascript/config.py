"""
JavaScript-specific configuration.

JavaScript has no static types; these options choose between classes and
plain object templates and control the JSDoc and helper output.
"""

from dataclasses import dataclass

from ...core.config import BaseOptions


@dataclass
class JavaScriptOptions(BaseOptions):
    """JavaScript generator options."""

    use_class: bool = True
    use_js_doc: bool = True
    use_es6: bool = True
    generate_factory: bool = False
    generate_validator: bool = False
