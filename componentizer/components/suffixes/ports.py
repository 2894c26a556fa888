"""
Suffixes component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from componentizer.domain.entities import SubjectId


class RequestContextPort(Protocol):
    """Port describing the request being rendered."""

    def is_editor_context(self) -> bool:
        """True when rendering inside the editor/preview screen."""
        ...

    def is_single_item_view(self) -> bool:
        """True for any single content item (page, post, attachment)."""
        ...

    def is_page_view(self) -> bool:
        """True when the single item is a page."""
        ...

    def is_attachment_view(self) -> bool:
        """True when the single item is an attachment."""
        ...

    def is_listing_view(self) -> bool:
        """True for archive listings."""
        ...

    def is_search_view(self) -> bool:
        """True for search results."""
        ...

    def is_not_found_view(self) -> bool:
        """True when nothing matched the request."""
        ...

    def is_home_view(self) -> bool:
        """True for the posts index."""
        ...

    def is_front_page_view(self) -> bool:
        """True for the site front page."""
        ...

    def is_author_listing(self) -> bool: ...

    def is_category_listing(self) -> bool: ...

    def is_tag_listing(self) -> bool: ...

    def is_taxonomy_listing(self) -> bool: ...

    def is_date_listing(self) -> bool: ...

    def is_paged_listing(self) -> bool:
        """True on any listing page after the first."""
        ...

    def item_type(self) -> str | None:
        """Post type of the current item or listing, if any."""
        ...

    def custom_template_slug_of(self, subject_id: SubjectId | None) -> str | None:
        """Custom template declared by the subject, if any."""
        ...

    def current_listing_taxonomy_slug(self) -> str | None:
        """Taxonomy slug of the current taxonomy listing, if known."""
        ...

    def current_subject_id(self) -> SubjectId | None:
        """Subject being processed when none is pinned."""
        ...

    def posts_page_id(self) -> SubjectId | None:
        """Page configured to show the posts index."""
        ...

    def front_page_id(self) -> SubjectId | None:
        """Page configured as the static front page."""
        ...
