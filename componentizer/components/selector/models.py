"""
Selector component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from componentizer.domain.entities import SelectedTemplate, TemplateRoot

# --- Validation Error ---


@dataclass(frozen=True)
class SelectorValidationError:
    """Selector validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SelectTemplateInput:
    """Input for selecting a component's template."""

    component: str
    suffixes: tuple[str, ...]
    roots: tuple[TemplateRoot, ...]


# --- Output Models ---


@dataclass(frozen=True)
class SelectTemplateOutput:
    """Output with the selected template, or None when nothing exists."""

    template: SelectedTemplate | None
    errors: list[SelectorValidationError] = field(default_factory=list)
    success: bool = True
