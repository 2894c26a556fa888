"""
Selector component - Template file selection.
"""

from ._impl import ComponentSelector, select_file, template_candidates
from .component import run, run_select
from .models import SelectorValidationError, SelectTemplateInput, SelectTemplateOutput
from .ports import TemplateLocatorPort

__all__ = [
    # Entry points
    "run",
    "run_select",
    # Models
    "SelectTemplateInput",
    "SelectTemplateOutput",
    "SelectorValidationError",
    # Ports
    "TemplateLocatorPort",
    # Selection
    "ComponentSelector",
    "select_file",
    "template_candidates",
]
