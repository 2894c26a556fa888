"""
Build component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from componentizer.components.ordering.ports import ComponentConfigPort

from .models import TemplateSettings


class SettingsPort(Protocol):
    """Port for template location settings."""

    def get_advanced_settings(self) -> TemplateSettings:
        """Get template roots and extensions."""
        ...


class ConfigStorePort(ComponentConfigPort, SettingsPort, Protocol):
    """Port for everything the builder reads from configuration."""


class RendererPort(Protocol):
    """Port for rendering a selected template file."""

    def render_programmatic(self, path: str, context: Mapping[str, Any]) -> str:
        """Render a programmatic (code) template."""
        ...

    def render_structured(self, path: str, context: Mapping[str, Any]) -> str:
        """Render a structured (markup) template with a context."""
        ...
