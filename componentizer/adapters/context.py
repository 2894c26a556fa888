"""
Explicit request context.

Replaces ambient "current request" lookups with a value passed to the builder.
Implements the suffixes and ordering context ports.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from componentizer.domain.entities import SubjectId, normalize_id


@dataclass(frozen=True)
class RequestContext:
    """Snapshot of the request being rendered."""

    subject_id: SubjectId | None = None
    post_type: str | None = None
    editor: bool = False

    # Single items
    singular: bool = False
    page: bool = False
    attachment: bool = False

    # Other views
    search: bool = False
    not_found: bool = False
    home: bool = False
    front_page: bool = False

    # Listings
    listing: bool = False
    author: bool = False
    category: bool = False
    tag: bool = False
    taxonomy: bool = False
    taxonomy_slug: str | None = None
    date: bool = False
    paged: bool = False

    # Site reading settings
    posts_page: SubjectId | None = None
    static_front_page: SubjectId | None = None

    template_slugs: Mapping[SubjectId, str] = field(default_factory=dict)

    def is_editor_context(self) -> bool:
        return self.editor

    def is_single_item_view(self) -> bool:
        return self.singular or self.page or self.attachment

    def is_page_view(self) -> bool:
        return self.page

    def is_attachment_view(self) -> bool:
        return self.attachment

    def is_listing_view(self) -> bool:
        return (
            self.listing
            or self.author
            or self.category
            or self.tag
            or self.taxonomy
            or self.date
        )

    def is_search_view(self) -> bool:
        return self.search

    def is_not_found_view(self) -> bool:
        return self.not_found

    def is_home_view(self) -> bool:
        return self.home

    def is_front_page_view(self) -> bool:
        return self.front_page

    def is_author_listing(self) -> bool:
        return self.author

    def is_category_listing(self) -> bool:
        return self.category

    def is_tag_listing(self) -> bool:
        return self.tag

    def is_taxonomy_listing(self) -> bool:
        return self.taxonomy

    def is_date_listing(self) -> bool:
        return self.date

    def is_paged_listing(self) -> bool:
        return self.paged

    def item_type(self) -> str | None:
        return self.post_type

    def custom_template_slug_of(self, subject_id: SubjectId | None) -> str | None:
        if subject_id is None:
            subject_id = self.subject_id
        if subject_id is None:
            return None
        wanted = normalize_id(subject_id)
        for key, slug in self.template_slugs.items():
            if normalize_id(key) == wanted:
                return slug or None
        return None

    def current_listing_taxonomy_slug(self) -> str | None:
        return self.taxonomy_slug

    def current_subject_id(self) -> SubjectId | None:
        return self.subject_id

    def posts_page_id(self) -> SubjectId | None:
        return self.posts_page

    def front_page_id(self) -> SubjectId | None:
        return self.static_front_page
