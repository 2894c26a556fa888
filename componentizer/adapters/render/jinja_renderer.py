"""
Structured template renderer backed by Jinja2.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


class JinjaTemplateRenderer:
    """Renders markup templates found under the template directories."""

    def __init__(self, template_dirs: Sequence[str | Path]) -> None:
        self.template_dirs = [Path(d).resolve() for d in template_dirs]
        self.env = Environment(
            loader=FileSystemLoader([str(d) for d in self.template_dirs]),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            keep_trailing_newline=True,
        )

    def template_name(self, path: str) -> str:
        """Loader name of a located template path."""
        target = Path(path).resolve()
        for base in self.template_dirs:
            if target.is_relative_to(base):
                return target.relative_to(base).as_posix()
        # Already relative to a template directory
        return Path(path).as_posix()

    def render(self, path: str, context: Mapping[str, Any]) -> str:
        template = self.env.get_template(self.template_name(path))
        return template.render(**context)
