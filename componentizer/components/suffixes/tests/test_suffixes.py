"""
Suffixes component unit tests.

Tests for view classification, suffix chains and resolver caching.
"""

from __future__ import annotations

import pytest

from componentizer.adapters.context import RequestContext
from componentizer.components.suffixes import (
    ResolveSuffixesInput,
    SuffixResolver,
    ViewKind,
    build_suffixes,
    classify_view,
    item_suffixes,
    run,
    run_resolve,
)
from componentizer.domain.entities import InvalidOverrideError

# --- Counting Context ---


class CountingContext:
    """Delegates to a RequestContext and counts suffix computations."""

    def __init__(self, inner: RequestContext) -> None:
        self._inner = inner
        self.computations = 0

    def is_editor_context(self) -> bool:
        self.computations += 1
        return self._inner.is_editor_context()

    def __getattr__(self, name: str):
        return getattr(self._inner, name)


@pytest.fixture
def event_context() -> RequestContext:
    return RequestContext(subject_id=7, post_type="event", singular=True)


# --- Public Singular ---


class TestSingularSuffixes:
    """Single item suffix chains."""

    def test_single_post_type(self, event_context: RequestContext) -> None:
        """Custom post type item without a custom template."""
        assert build_suffixes(event_context, 7) == (
            "single-event",
            "event",
            "single",
            "singular",
            "index",
        )

    def test_page_with_custom_template(self) -> None:
        """Custom template slug goes first, without its extension."""
        ctx = RequestContext(
            subject_id=3,
            post_type="page",
            singular=True,
            page=True,
            template_slugs={3: "landing.php"},
        )
        assert build_suffixes(ctx, 3) == ("landing", "page", "singular", "index")

    def test_page_without_custom_template(self) -> None:
        ctx = RequestContext(subject_id=3, post_type="page", page=True)
        assert build_suffixes(ctx, 3) == ("page", "singular", "index")

    def test_custom_template_of_other_subject_ignored(self) -> None:
        """Only the rendered subject's template counts."""
        ctx = RequestContext(
            subject_id=3,
            post_type="page",
            page=True,
            template_slugs={4: "landing.php"},
        )
        assert build_suffixes(ctx, 3) == ("page", "singular", "index")

    def test_custom_template_ignored_for_posts(self) -> None:
        """Custom templates only apply to pages."""
        ctx = RequestContext(
            subject_id=7,
            post_type="event",
            singular=True,
            template_slugs={7: "landing.php"},
        )
        assert build_suffixes(ctx, 7)[0] == "single-event"

    def test_attachment(self) -> None:
        ctx = RequestContext(subject_id=9, post_type="attachment", attachment=True)
        assert build_suffixes(ctx, 9) == ("attachment", "single", "singular", "index")

    def test_item_without_type(self) -> None:
        ctx = RequestContext(subject_id=9, singular=True)
        assert build_suffixes(ctx, 9) == ("single", "singular", "index")

    def test_post_type_extension_stripped(self) -> None:
        assert item_suffixes("event.py", None, is_page=False, is_attachment=False) == [
            "single-event",
            "event",
            "single",
        ]


# --- Other Public Views ---


class TestPublicViewSuffixes:
    """Home, search, not found and fallback chains."""

    def test_home(self) -> None:
        assert build_suffixes(RequestContext(home=True), None) == ("home", "index")

    def test_home_on_front_page(self) -> None:
        ctx = RequestContext(home=True, front_page=True)
        assert build_suffixes(ctx, None) == ("front-page", "home", "index")

    def test_static_front_page_is_singular(self) -> None:
        """A static front page is a page, not the posts index."""
        ctx = RequestContext(subject_id=2, post_type="page", page=True, front_page=True)
        assert build_suffixes(ctx, 2) == ("page", "singular", "index")

    def test_search(self) -> None:
        assert build_suffixes(RequestContext(search=True), None) == ("search", "index")

    def test_not_found(self) -> None:
        assert build_suffixes(RequestContext(not_found=True), None) == ("404", "index")

    def test_search_wins_over_not_found(self) -> None:
        ctx = RequestContext(search=True, not_found=True)
        assert classify_view(ctx) == ViewKind.SEARCH

    def test_home_wins_over_singular(self) -> None:
        ctx = RequestContext(home=True, singular=True, post_type="post")
        assert classify_view(ctx) == ViewKind.HOME

    def test_nothing_matched(self) -> None:
        assert classify_view(RequestContext()) == ViewKind.INDEX
        assert build_suffixes(RequestContext(), None) == ("index",)


# --- Listings ---


class TestListingSuffixes:
    """Archive listing chains."""

    def test_taxonomy_second_page(self) -> None:
        ctx = RequestContext(taxonomy=True, taxonomy_slug="genre", paged=True)
        assert build_suffixes(ctx, None) == (
            "taxonomy-genre",
            "taxonomy",
            "paged",
            "archive",
            "index",
        )

    def test_taxonomy_without_slug(self) -> None:
        ctx = RequestContext(taxonomy=True)
        assert build_suffixes(ctx, None) == ("taxonomy", "archive", "index")

    def test_author_wins_over_category(self) -> None:
        ctx = RequestContext(author=True, category=True)
        assert build_suffixes(ctx, None) == ("author", "archive", "index")

    def test_category(self) -> None:
        ctx = RequestContext(category=True, post_type="post")
        assert build_suffixes(ctx, None) == ("category", "archive", "index")

    def test_tag_wins_over_taxonomy(self) -> None:
        ctx = RequestContext(tag=True, taxonomy=True, taxonomy_slug="genre")
        assert build_suffixes(ctx, None) == ("tag", "archive", "index")

    def test_date(self) -> None:
        ctx = RequestContext(date=True, paged=True)
        assert build_suffixes(ctx, None) == ("date", "paged", "archive", "index")

    def test_post_type_archive(self) -> None:
        ctx = RequestContext(listing=True, post_type="event")
        assert build_suffixes(ctx, None) == ("archive-event", "event", "archive", "index")

    def test_listing_without_type(self) -> None:
        ctx = RequestContext(listing=True)
        assert build_suffixes(ctx, None) == ("archive", "index")

    def test_first_page_is_not_paged(self) -> None:
        ctx = RequestContext(listing=True, post_type="event", paged=False)
        assert "paged" not in build_suffixes(ctx, None)


# --- Editor ---


class TestEditorSuffixes:
    """Editor screen chains."""

    def test_posts_page(self) -> None:
        ctx = RequestContext(editor=True, subject_id=10, post_type="page", posts_page=10)
        assert build_suffixes(ctx, 10) == ("home", "singular", "index")

    def test_front_page(self) -> None:
        ctx = RequestContext(editor=True, subject_id=2, post_type="page", static_front_page=2)
        assert build_suffixes(ctx, 2) == ("front-page", "singular", "index")

    def test_page_with_template(self) -> None:
        ctx = RequestContext(
            editor=True,
            subject_id=5,
            post_type="page",
            template_slugs={5: "templates/full-width.php"},
        )
        assert build_suffixes(ctx, 5) == ("templates/full-width", "page", "singular", "index")

    def test_post(self) -> None:
        ctx = RequestContext(editor=True, subject_id=7, post_type="event")
        assert build_suffixes(ctx, 7) == ("single-event", "event", "single", "singular", "index")

    def test_attachment(self) -> None:
        ctx = RequestContext(editor=True, subject_id=9, post_type="attachment")
        assert build_suffixes(ctx, 9) == ("attachment", "single", "singular", "index")

    def test_listing_flags_ignored(self) -> None:
        """The editor has no listing branch."""
        ctx = RequestContext(editor=True, subject_id=7, post_type="event", listing=True)
        assert "archive" not in build_suffixes(ctx, 7)

    def test_text_subject_matches_numeric_posts_page(self) -> None:
        ctx = RequestContext(editor=True, subject_id="10", post_type="page", posts_page=10)
        assert build_suffixes(ctx, "10") == ("home", "singular", "index")

    def test_numeric_subject_matches_text_front_page(self) -> None:
        ctx = RequestContext(editor=True, subject_id=2, post_type="page", static_front_page="2")
        assert build_suffixes(ctx, 2) == ("front-page", "singular", "index")

    def test_unset_subject_is_not_posts_page(self) -> None:
        ctx = RequestContext(editor=True, post_type="post")
        assert build_suffixes(ctx, None) == ("single-post", "post", "single", "singular", "index")


# --- Resolver ---


class TestSuffixResolver:
    """Caching, overrides and resets."""

    def test_resolve_is_cached(self, event_context: RequestContext) -> None:
        ctx = CountingContext(event_context)
        resolver = SuffixResolver(ctx)

        first = resolver.resolve()
        second = resolver.resolve()

        assert first is second
        assert ctx.computations == 1

    def test_resolve_uses_current_subject(self) -> None:
        ctx = RequestContext(
            subject_id=3, post_type="page", page=True, template_slugs={3: "wide.php"}
        )
        assert SuffixResolver(ctx).resolve()[0] == "wide"

    def test_override_replaces_list(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        resolver.override(["custom"])

        assert resolver.resolve() == ("custom",)
        assert resolver.overridden is True

    def test_reset_recomputes(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        resolver.override(["custom"])
        resolver.reset()

        assert resolver.resolve()[0] == "single-event"
        assert resolver.overridden is False

    def test_prepend_single_suffix(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        assert resolver.prepend("featured") == (
            "featured",
            "single-event",
            "event",
            "single",
            "singular",
            "index",
        )

    def test_prepend_sequence_keeps_order(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        result = resolver.prepend(["a", "b"])

        assert result[:3] == ("a", "b", "single-event")
        assert result[-1] == "index"

    def test_prepend_onto_override(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        resolver.override(["x"])
        assert resolver.prepend("y") == ("y", "x")

    def test_prepend_rejects_non_sequence(self, event_context: RequestContext) -> None:
        with pytest.raises(InvalidOverrideError):
            SuffixResolver(event_context).prepend(3)  # type: ignore[arg-type]

    def test_override_rejects_string(self, event_context: RequestContext) -> None:
        with pytest.raises(InvalidOverrideError):
            SuffixResolver(event_context).override("single")

    def test_override_rejects_non_string_items(self, event_context: RequestContext) -> None:
        with pytest.raises(InvalidOverrideError):
            SuffixResolver(event_context).override([1, 2])  # type: ignore[list-item]

    def test_invalidate_keeps_override(self, event_context: RequestContext) -> None:
        resolver = SuffixResolver(event_context)
        resolver.override(["kept"])
        resolver.invalidate()
        assert resolver.resolve() == ("kept",)

    def test_invalidate_drops_computed(self, event_context: RequestContext) -> None:
        ctx = CountingContext(event_context)
        resolver = SuffixResolver(ctx)
        resolver.resolve()
        resolver.invalidate()
        resolver.resolve()
        assert ctx.computations == 2


# --- Entry Points ---


class TestRunResolve:
    """Component entry points."""

    def test_run_resolve(self, event_context: RequestContext) -> None:
        result = run_resolve(ResolveSuffixesInput(), context=event_context)

        assert result.success is True
        assert result.view_kind == ViewKind.SINGULAR
        assert result.suffixes[0] == "single-event"

    def test_run_resolve_with_extra_suffixes(self, event_context: RequestContext) -> None:
        inp = ResolveSuffixesInput(extra_suffixes=("promo",))
        result = run(inp, context=event_context)
        assert result.suffixes[:2] == ("promo", "single-event")

    def test_run_rejects_unknown_input(self, event_context: RequestContext) -> None:
        with pytest.raises(ValueError):
            run(object(), context=event_context)  # type: ignore[arg-type]

    def test_run_resolve_reports_invalid_extra_suffixes(
        self, event_context: RequestContext
    ) -> None:
        inp = ResolveSuffixesInput(extra_suffixes=(1,))  # type: ignore[arg-type]
        result = run_resolve(inp, context=event_context)

        assert result.success is False
        assert result.suffixes == ()
        assert result.errors[0].field == "add_suffixes"
