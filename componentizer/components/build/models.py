"""
Build component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from componentizer.domain.entities import SelectedTemplate, SubjectId

# --- Validation Error ---


@dataclass(frozen=True)
class BuildValidationError:
    """Build validation error."""

    code: str
    message: str
    field: str | None = None


# --- Settings Model ---


@dataclass(frozen=True)
class TemplateSettings:
    """Where component templates live and how they are named."""

    component_path: str = "components"
    structured_path: str = "views"
    programmatic_extension: str = "py"
    structured_extension: str = "html"


# --- Input Models ---


@dataclass(frozen=True)
class BuildInput:
    """Input for building a subject's components."""

    subject_id: SubjectId | None = None
    components: tuple[str, ...] | None = None
    suffixes: tuple[str, ...] | None = None
    extra_suffixes: tuple[str, ...] = ()


@dataclass(frozen=True)
class SelectTemplatesInput:
    """Input for resolving templates without rendering them."""

    subject_id: SubjectId | None = None
    components: tuple[str, ...] | None = None
    suffixes: tuple[str, ...] | None = None
    extra_suffixes: tuple[str, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class BuildOutput:
    """Output containing the rendered components."""

    html: str
    templates: tuple[SelectedTemplate, ...]
    errors: list[BuildValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SelectTemplatesOutput:
    """Output describing what a build would render."""

    components: tuple[str, ...]
    suffixes: tuple[str, ...]
    templates: tuple[SelectedTemplate, ...]
    errors: list[BuildValidationError] = field(default_factory=list)
    success: bool = True
