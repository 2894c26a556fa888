"""
Ordering component port definitions.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from typing import Protocol

from componentizer.domain.entities import ComponentId, LocationPolicy, SubjectId

from .models import ComponentTemplate


class ComponentConfigPort(Protocol):
    """Port for component configuration."""

    def get_component_template_map(self) -> Mapping[ComponentId, ComponentTemplate]:
        """Get the template configured for each component id."""
        ...

    def get_location_order(self) -> LocationPolicy:
        """Get pinned orders keyed by location ("top", "bottom")."""
        ...

    def get_visible_on_listing_ids(self) -> Collection[ComponentId]:
        """Get component ids that also render on listing pages."""
        ...


class ContentRepoPort(Protocol):
    """Port for component assignments stored with content."""

    def get_raw_component_order(self, subject_id: SubjectId | None) -> Sequence[ComponentId]:
        """Get the explicit component order saved for a subject (may be empty)."""
        ...

    def discover_component_ids(self, subject_id: SubjectId | None) -> Sequence[ComponentId]:
        """Get the components that apply to a subject when none were saved."""
        ...


class ViewContextPort(Protocol):
    """Port for the parts of the request context ordering depends on."""

    def is_single_item_view(self) -> bool:
        """True for any single content item."""
        ...

    def current_subject_id(self) -> SubjectId | None:
        """Subject being processed when none is pinned."""
        ...
