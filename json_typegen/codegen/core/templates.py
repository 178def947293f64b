"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering. Every language
package keeps its templates in a ``templates`` directory beside its
generator module.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader
from jinja2 import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment for source code output."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


@lru_cache(maxsize=None)
def _cached_engine(template_dir: Path) -> TemplateEngine:
    return TemplateEngine(template_dir)


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """
    Create a template engine.

    Engines backed by a template directory are shared: a Jinja2 environment
    is safe to render from concurrently and caches compiled templates.

    Args:
        template_dir: Directory containing template files, or None for an
            empty engine

    Returns:
        TemplateEngine instance
    """
    if template_dir is None:
        return TemplateEngine()
    return _cached_engine(Path(template_dir))
