"""
ComponentSelector - Most specific existing template for a component.

Candidates are "<root>/<component>-<suffix>.<ext>" for each suffix in order,
then "<root>/<component>.<ext>". The first candidate the locator finds wins.
Roots are searched one after another, never interleaved.
"""

from __future__ import annotations

from collections.abc import Sequence

from componentizer.domain.entities import SelectedTemplate, TemplateRoot

from .ports import TemplateLocatorPort


def _join(root: str, name: str) -> str:
    root = root.rstrip("/")
    return f"{root}/{name}" if root else name


def template_candidates(
    root: str,
    component: str,
    suffixes: Sequence[str],
    extension: str,
) -> list[str]:
    """Candidate paths for a component, most specific first."""
    extension = extension.lstrip(".")
    candidates = [_join(root, f"{component}-{suffix}.{extension}") for suffix in suffixes]
    candidates.append(_join(root, f"{component}.{extension}"))
    return candidates


def select_file(
    locator: TemplateLocatorPort,
    root: str,
    component: str,
    suffixes: Sequence[str],
    extension: str,
) -> str | None:
    """First existing candidate under one root, or None."""
    return locator.locate(template_candidates(root, component, suffixes, extension))


class ComponentSelector:
    """Selects templates across an ordered chain of template roots."""

    def __init__(self, locator: TemplateLocatorPort, roots: Sequence[TemplateRoot]) -> None:
        self._locator = locator
        self._roots = tuple(roots)

    def select(self, component: str, suffixes: Sequence[str]) -> SelectedTemplate | None:
        for root in self._roots:
            path = select_file(self._locator, root.path, component, suffixes, root.extension)
            if path:
                return SelectedTemplate(component=component, path=path, kind=root.kind)
        return None
