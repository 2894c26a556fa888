"""
Programmatic template renderer.

A programmatic template is a Python module defining ``render(context) -> str``.
The module is executed on every render, like a plain include.
"""

from __future__ import annotations

import hashlib
import importlib.util
from collections.abc import Mapping
from typing import Any


class PythonTemplateRenderer:
    """Renders Python module templates."""

    def render(self, path: str, context: Mapping[str, Any]) -> str:
        digest = hashlib.sha256(path.encode()).hexdigest()[:16]
        spec = importlib.util.spec_from_file_location(f"_componentizer_tpl_{digest}", path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load template: {path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        render = getattr(module, "render", None)
        if not callable(render):
            raise TypeError(f"Template {path} does not define render(context)")
        return str(render(dict(context)))
