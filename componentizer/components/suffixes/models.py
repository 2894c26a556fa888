"""
Suffixes component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from componentizer.domain.entities import SubjectId


class ViewKind(str, Enum):
    """Classification of the current request."""

    SEARCH = "search"
    NOT_FOUND = "404"
    HOME = "home"
    SINGULAR = "singular"
    LISTING = "listing"
    INDEX = "index"


# --- Validation Error ---


@dataclass(frozen=True)
class SuffixValidationError:
    """Suffix validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ResolveSuffixesInput:
    """Input for resolving the suffix hierarchy of a request."""

    subject_id: SubjectId | None = None
    extra_suffixes: tuple[str, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class SuffixesOutput:
    """Output containing suffixes, most specific first."""

    suffixes: tuple[str, ...]
    view_kind: ViewKind | None = None
    errors: list[SuffixValidationError] = field(default_factory=list)
    success: bool = True
