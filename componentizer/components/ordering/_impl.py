"""
ComponentOrderResolver - Render order of a subject's components.

Key behaviors:
- Raw ids come from the subject's saved order, else from discovery
- Ids pinned to "top" come first and ids pinned to "bottom" come last,
  each group in the location's configured order
- Unpinned ids keep their raw relative order
- Ids without a configured template are dropped
- Outside single-item views only ids visible on listings are kept
- "7" and 7 are the same id
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping, Sequence

from componentizer.domain.entities import (
    ComponentId,
    LocationPolicy,
    SubjectId,
    ensure_string_sequence,
    normalize_id,
)

from .models import ComponentTemplate
from .ports import ComponentConfigPort, ContentRepoPort, ViewContextPort

logger = logging.getLogger(__name__)

LOCATION_TOP = "top"
LOCATION_BOTTOM = "bottom"


# --- Ordering Functions ---


def sort_by_location(
    location: str,
    component_ids: Iterable[ComponentId],
    policy: LocationPolicy,
) -> list[ComponentId]:
    """Ids from component_ids pinned to location, in the location's order."""
    available = {normalize_id(c) for c in component_ids}
    pinned: list[ComponentId] = []
    for component_id in map(normalize_id, policy.get(location) or ()):
        if component_id in available:
            pinned.append(component_id)
            available.discard(component_id)
    return pinned


def order_component_ids(
    component_ids: Iterable[ComponentId],
    policy: LocationPolicy,
) -> tuple[ComponentId, ...]:
    """Order raw ids as top ++ middle ++ bottom. Duplicates keep their first position."""
    raw = list(dict.fromkeys(normalize_id(c) for c in component_ids))

    top = sort_by_location(LOCATION_TOP, raw, policy)
    taken = set(top)
    bottom = sort_by_location(LOCATION_BOTTOM, [c for c in raw if c not in taken], policy)
    taken.update(bottom)
    middle = [c for c in raw if c not in taken]

    return tuple(top + middle + bottom)


def filter_renderable(
    ordered_ids: Sequence[ComponentId],
    template_map: Mapping[ComponentId, ComponentTemplate],
    visible_on_listing: Collection[ComponentId],
    *,
    single_item_view: bool,
) -> list[tuple[ComponentId, str]]:
    """Pair ids with their templates, dropping unconfigured and hidden ones."""
    templates = {normalize_id(c): t for c, t in template_map.items()}
    visible = {normalize_id(c) for c in visible_on_listing}
    renderable: list[tuple[ComponentId, str]] = []
    for component_id in map(normalize_id, ordered_ids):
        configured = templates.get(component_id)
        if configured is None:
            logger.debug("No template configured for component %r", component_id)
            continue
        if not single_item_view and component_id not in visible:
            continue
        renderable.append((component_id, configured.template))
    return renderable


# --- Resolver ---


class ComponentOrderResolver:
    """
    Lazily computed, cached component order for one request.

    The resolved order is a tuple of component template names.
    """

    def __init__(
        self,
        config: ComponentConfigPort,
        content_repo: ContentRepoPort,
        context: ViewContextPort,
    ) -> None:
        self._config = config
        self._content_repo = content_repo
        self._context = context
        self._templates: tuple[str, ...] | None = None
        self._component_ids: tuple[ComponentId, ...] | None = None
        self._overridden = False

    @property
    def overridden(self) -> bool:
        return self._overridden

    def raw_component_ids(self, subject_id: SubjectId | None) -> list[ComponentId]:
        raw = self._content_repo.get_raw_component_order(subject_id)
        if not raw:
            raw = self._content_repo.discover_component_ids(subject_id)
        return list(raw or ())

    def resolve_ids(self, subject_id: SubjectId | None = None) -> tuple[ComponentId, ...]:
        """Ordered, renderable component ids. Empty once overridden."""
        self.resolve(subject_id)
        return self._component_ids or ()

    def resolve(self, subject_id: SubjectId | None = None) -> tuple[str, ...]:
        if self._templates is None:
            if subject_id is None:
                subject_id = self._context.current_subject_id()
            ordered = order_component_ids(
                self.raw_component_ids(subject_id),
                self._config.get_location_order() or {},
            )
            renderable = filter_renderable(
                ordered,
                self._config.get_component_template_map(),
                self._config.get_visible_on_listing_ids(),
                single_item_view=self._context.is_single_item_view(),
            )
            self._component_ids = tuple(c for c, _ in renderable)
            self._templates = tuple(t for _, t in renderable)
            logger.debug("Resolved components for %s: %s", subject_id, self._templates)
        return self._templates

    def override(self, templates: Sequence[str]) -> tuple[str, ...]:
        self._templates = tuple(ensure_string_sequence("set_components", templates))
        self._component_ids = None
        self._overridden = True
        return self._templates

    def invalidate(self) -> None:
        """Drop a computed order; overrides survive."""
        if not self._overridden:
            self._templates = None
            self._component_ids = None

    def reset(self) -> None:
        self._templates = None
        self._component_ids = None
        self._overridden = False
