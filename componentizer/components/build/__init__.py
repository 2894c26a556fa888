"""
Build component - Ordered component rendering.
"""

from ._impl import ComponentBuilder, template_roots
from .component import run, run_build, run_select_templates
from .models import (
    BuildInput,
    BuildOutput,
    BuildValidationError,
    SelectTemplatesInput,
    SelectTemplatesOutput,
    TemplateSettings,
)
from .ports import ConfigStorePort, RendererPort, SettingsPort

__all__ = [
    # Entry points
    "run",
    "run_build",
    "run_select_templates",
    # Models
    "BuildInput",
    "BuildOutput",
    "BuildValidationError",
    "SelectTemplatesInput",
    "SelectTemplatesOutput",
    "TemplateSettings",
    # Ports
    "ConfigStorePort",
    "RendererPort",
    "SettingsPort",
    # Builder
    "ComponentBuilder",
    "template_roots",
]
