"""
SuffixResolver - Template hierarchy suffixes for the current request.

Builds the ordered list of name suffixes used to pick the most specific
template variant of a component, loosely following a CMS template hierarchy.

Key behaviors:
- Requests are classified into a ViewKind by an ordered predicate table
- Each ViewKind has its own suffix builder
- Editor screens use a separate chain with no listing branch
- The list always ends with "index"
- Results are cached per resolver until reset
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from componentizer.domain.entities import (
    INDEX_SUFFIX,
    SubjectId,
    ensure_string_sequence,
    normalize_id,
    strip_template_extension,
)

from .models import ViewKind
from .ports import RequestContextPort

logger = logging.getLogger(__name__)

SuffixBuilder = Callable[[RequestContextPort, SubjectId | None], list[str]]


# --- Classification ---

# First match wins.
VIEW_CLASSIFIERS: tuple[tuple[ViewKind, Callable[[RequestContextPort], bool]], ...] = (
    (ViewKind.SEARCH, lambda ctx: ctx.is_search_view()),
    (ViewKind.NOT_FOUND, lambda ctx: ctx.is_not_found_view()),
    (ViewKind.HOME, lambda ctx: ctx.is_home_view()),
    (ViewKind.SINGULAR, lambda ctx: ctx.is_single_item_view()),
    (ViewKind.LISTING, lambda ctx: ctx.is_listing_view()),
)


def classify_view(context: RequestContextPort) -> ViewKind:
    """Classify a public request."""
    for kind, matches in VIEW_CLASSIFIERS:
        if matches(context):
            return kind
    return ViewKind.INDEX


# --- Builders ---


def item_suffixes(
    item_type: str | None,
    template_slug: str | None,
    *,
    is_page: bool,
    is_attachment: bool,
) -> list[str]:
    """Suffixes for a single item, without the trailing "singular"."""
    if is_page:
        suffixes = ["page"]
        if template_slug:
            suffixes.insert(0, strip_template_extension(template_slug))
        return suffixes

    if is_attachment:
        return ["attachment", "single"]

    if item_type:
        post_type = strip_template_extension(item_type)
        return [f"single-{post_type}", post_type, "single"]

    return ["single"]


def _search_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    return ["search"]


def _not_found_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    return ["404"]


def _home_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    if context.is_front_page_view():
        return ["front-page", "home"]
    return ["home"]


def _singular_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    head = item_suffixes(
        context.item_type(),
        context.custom_template_slug_of(subject_id),
        is_page=context.is_page_view(),
        is_attachment=context.is_attachment_view(),
    )
    return head + ["singular"]


def _taxonomy_suffixes(context: RequestContextPort) -> list[str]:
    taxonomy = context.current_listing_taxonomy_slug()
    if taxonomy:
        return [f"taxonomy-{taxonomy}", "taxonomy"]
    return ["taxonomy"]


def _post_type_archive_suffixes(context: RequestContextPort) -> list[str]:
    item_type = context.item_type()
    if not item_type:
        return []
    post_type = strip_template_extension(item_type)
    return [f"archive-{post_type}", post_type]


# First match wins; post type archives are the fallback.
LISTING_CLASSIFIERS: tuple[
    tuple[Callable[[RequestContextPort], bool], Callable[[RequestContextPort], list[str]]], ...
] = (
    (lambda ctx: ctx.is_author_listing(), lambda ctx: ["author"]),
    (lambda ctx: ctx.is_category_listing(), lambda ctx: ["category"]),
    (lambda ctx: ctx.is_tag_listing(), lambda ctx: ["tag"]),
    (lambda ctx: ctx.is_taxonomy_listing(), _taxonomy_suffixes),
    (lambda ctx: ctx.is_date_listing(), lambda ctx: ["date"]),
)


def _listing_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    suffixes: list[str] = []
    for matches, build in LISTING_CLASSIFIERS:
        if matches(context):
            suffixes = build(context)
            break
    else:
        suffixes = _post_type_archive_suffixes(context)

    if context.is_paged_listing():
        suffixes.append("paged")
    suffixes.append("archive")
    return suffixes


def _index_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    return []


SUFFIX_BUILDERS: dict[ViewKind, SuffixBuilder] = {
    ViewKind.SEARCH: _search_suffixes,
    ViewKind.NOT_FOUND: _not_found_suffixes,
    ViewKind.HOME: _home_suffixes,
    ViewKind.SINGULAR: _singular_suffixes,
    ViewKind.LISTING: _listing_suffixes,
    ViewKind.INDEX: _index_suffixes,
}


def _same_subject(subject_id: SubjectId | None, other: SubjectId | None) -> bool:
    if subject_id is None or other is None:
        return False
    return normalize_id(subject_id) == normalize_id(other)


def editor_suffixes(context: RequestContextPort, subject_id: SubjectId | None) -> list[str]:
    """Suffixes for the editor screen of a single subject."""
    posts_page = context.posts_page_id()
    front_page = context.front_page_id()
    item_type = context.item_type()

    if _same_subject(subject_id, posts_page):
        head = ["home"]
    elif _same_subject(subject_id, front_page):
        head = ["front-page"]
    else:
        head = item_suffixes(
            item_type,
            context.custom_template_slug_of(subject_id),
            is_page=item_type == "page",
            is_attachment=item_type == "attachment",
        )
    return head + ["singular"]


def build_suffixes(
    context: RequestContextPort,
    subject_id: SubjectId | None,
) -> tuple[str, ...]:
    """Compute the full suffix list for a request, ending with "index"."""
    if context.is_editor_context():
        prefix = editor_suffixes(context, subject_id)
    else:
        prefix = SUFFIX_BUILDERS[classify_view(context)](context, subject_id)
    return tuple(prefix) + (INDEX_SUFFIX,)


# --- Resolver ---


class SuffixResolver:
    """
    Lazily computed, cached suffix list for one request.

    An override replaces the cached list and is kept until reset().
    """

    def __init__(self, context: RequestContextPort) -> None:
        self._context = context
        self._suffixes: tuple[str, ...] | None = None
        self._overridden = False

    @property
    def overridden(self) -> bool:
        return self._overridden

    def resolve(self, subject_id: SubjectId | None = None) -> tuple[str, ...]:
        if self._suffixes is None:
            if subject_id is None:
                subject_id = self._context.current_subject_id()
            self._suffixes = build_suffixes(self._context, subject_id)
            logger.debug("Resolved suffixes for %s: %s", subject_id, self._suffixes)
        return self._suffixes

    def override(self, suffixes: Sequence[str]) -> tuple[str, ...]:
        self._suffixes = tuple(ensure_string_sequence("set_suffixes", suffixes))
        self._overridden = True
        return self._suffixes

    def prepend(
        self,
        suffix: str | Sequence[str],
        subject_id: SubjectId | None = None,
    ) -> tuple[str, ...]:
        """Put one suffix or an ordered sequence ahead of the current list."""
        if isinstance(suffix, str):
            extra = [suffix]
        else:
            extra = ensure_string_sequence("add_suffixes", suffix)
        self._suffixes = tuple(extra) + self.resolve(subject_id)
        self._overridden = True
        return self._suffixes

    def invalidate(self) -> None:
        """Drop a computed list; overrides survive."""
        if not self._overridden:
            self._suffixes = None

    def reset(self) -> None:
        self._suffixes = None
        self._overridden = False
