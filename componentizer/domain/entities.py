from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

# --- Identifiers ---
ComponentId = str | int
SubjectId = str | int

LocationPolicy = Mapping[str, Sequence[ComponentId]]

# --- Templates ---
TemplateKind = Literal["programmatic", "structured"]

INDEX_SUFFIX = "index"

# Stripped from custom template slugs and post type slugs before use as suffixes.
KNOWN_TEMPLATE_EXTENSIONS = (".php", ".py", ".html", ".jinja2", ".jinja", ".twig")


@dataclass(frozen=True)
class TemplateRoot:
    """A directory searched for one kind of template file."""

    path: str
    extension: str
    kind: TemplateKind


@dataclass(frozen=True)
class SelectedTemplate:
    """The template chosen for one component."""

    component: str
    path: str
    kind: TemplateKind


# --- Errors ---


class InvalidOverrideError(TypeError):
    """Raised when an override is not an ordered sequence of strings."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"{name} expects a list or tuple of strings, got {type(value).__name__}"
        )
        self.name = name
        self.value = value


def ensure_string_sequence(name: str, value: object) -> list[str]:
    """
    Validate an override at the boundary.

    Strings are rejected even though they are sequences; a single suffix must go
    through the prepend operation instead.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidOverrideError(name, value)
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise InvalidOverrideError(name, value)
    return items


def normalize_id(value: ComponentId) -> ComponentId:
    """
    Canonical form of a component or subject id.

    Ids saved as text ("7") and ids loaded as numbers (7) name the same
    thing, so decimal strings become ints. Other strings are kept.
    """
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
    return value


def strip_template_extension(slug: str) -> str:
    """Drop a known template file extension from the end of a slug."""
    for ext in KNOWN_TEMPLATE_EXTENSIONS:
        if slug.endswith(ext):
            return slug[: -len(ext)]
    return slug
