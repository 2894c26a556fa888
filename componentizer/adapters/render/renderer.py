from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .jinja_renderer import JinjaTemplateRenderer
from .python_renderer import PythonTemplateRenderer


class TemplateRenderer:
    """Renderer port over the programmatic and structured renderers."""

    def __init__(
        self,
        programmatic: PythonTemplateRenderer,
        structured: JinjaTemplateRenderer,
    ):
        self.programmatic = programmatic
        self.structured = structured

    def render_programmatic(self, path: str, context: Mapping[str, Any]) -> str:
        return self.programmatic.render(path, context)

    def render_structured(self, path: str, context: Mapping[str, Any]) -> str:
        return self.structured.render(path, context)


def create_template_renderer(template_dirs: Sequence[str | Path]) -> TemplateRenderer:
    """Create the default renderer for a set of template directories."""
    return TemplateRenderer(
        programmatic=PythonTemplateRenderer(),
        structured=JinjaTemplateRenderer(template_dirs),
    )
