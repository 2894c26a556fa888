"""
Ordering component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from componentizer.domain.entities import ComponentId, SubjectId

# --- Validation Error ---


@dataclass(frozen=True)
class OrderingValidationError:
    """Ordering validation error."""

    code: str
    message: str
    field: str | None = None


# --- Configuration Model ---


@dataclass(frozen=True)
class ComponentTemplate:
    """Template configured for a component id."""

    template: str
    title: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class OrderComponentsInput:
    """Input for ordering the components of a subject."""

    subject_id: SubjectId | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ComponentOrderOutput:
    """Output containing the render order of a subject's components."""

    component_ids: tuple[ComponentId, ...]
    templates: tuple[str, ...]
    errors: list[OrderingValidationError] = field(default_factory=list)
    success: bool = True
