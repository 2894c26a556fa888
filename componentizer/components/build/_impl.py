"""
ComponentBuilder - Builds a page from its ordered components.

One builder is created per render request. Component order, suffixes and the
subject are resolved lazily and cached on the instance.

Key behaviors:
- Each component is matched against the programmatic root, then the
  structured root
- Components without any matching template are skipped
- set_* overrides are kept until the matching reset_*
- Changing the subject drops computed (not overridden) caches
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from componentizer.components.ordering import ComponentOrderResolver, ContentRepoPort
from componentizer.components.selector import ComponentSelector, TemplateLocatorPort
from componentizer.components.suffixes import RequestContextPort, SuffixResolver
from componentizer.domain.entities import SelectedTemplate, SubjectId, TemplateRoot

from .models import TemplateSettings
from .ports import ConfigStorePort, RendererPort

logger = logging.getLogger(__name__)


def template_roots(settings: TemplateSettings) -> tuple[TemplateRoot, ...]:
    """Template roots in search order."""
    return (
        TemplateRoot(
            path=settings.component_path,
            extension=settings.programmatic_extension,
            kind="programmatic",
        ),
        TemplateRoot(
            path=settings.structured_path,
            extension=settings.structured_extension,
            kind="structured",
        ),
    )


class ComponentBuilder:
    """Resolves and renders the components of one subject."""

    def __init__(
        self,
        config: ConfigStorePort,
        content_repo: ContentRepoPort,
        context: RequestContextPort,
        locator: TemplateLocatorPort,
        renderer: RendererPort,
    ) -> None:
        self._context = context
        self._renderer = renderer
        self._post_id: SubjectId | None = None
        self._suffixes = SuffixResolver(context)
        self._components = ComponentOrderResolver(config, content_repo, context)
        self._selector = ComponentSelector(
            locator, template_roots(config.get_advanced_settings())
        )

    # --- Subject ---

    def get_post_id(self) -> SubjectId | None:
        if self._post_id is not None:
            return self._post_id
        return self._context.current_subject_id()

    def set_post_id(self, subject_id: SubjectId) -> SubjectId:
        self._post_id = subject_id
        self._invalidate()
        return subject_id

    def reset_post_id(self) -> None:
        self._post_id = None
        self._invalidate()

    def _invalidate(self) -> None:
        self._components.invalidate()
        self._suffixes.invalidate()

    # --- Components ---

    def get_components(self) -> tuple[str, ...]:
        return self._components.resolve(self.get_post_id())

    def set_components(self, components: Sequence[str]) -> tuple[str, ...]:
        return self._components.override(components)

    def reset_components(self) -> None:
        self._components.reset()

    # --- Suffixes ---

    def get_suffixes(self) -> tuple[str, ...]:
        return self._suffixes.resolve(self.get_post_id())

    def set_suffixes(self, suffixes: Sequence[str]) -> tuple[str, ...]:
        return self._suffixes.override(suffixes)

    def add_suffixes(self, suffix: str | Sequence[str]) -> tuple[str, ...]:
        return self._suffixes.prepend(suffix, self.get_post_id())

    def reset_suffixes(self) -> None:
        self._suffixes.reset()

    # --- Build ---

    def select_templates(self) -> list[SelectedTemplate]:
        """Templates that a build renders, in order."""
        suffixes = self.get_suffixes()
        selected: list[SelectedTemplate] = []
        for component in self.get_components():
            template = self._selector.select(component, suffixes)
            if template is None:
                logger.debug("No template found for component %r", component)
                continue
            selected.append(template)
        return selected

    def render_context(self, template: SelectedTemplate) -> dict[str, Any]:
        return {
            "component": template.component,
            "template": template.path,
            "subject_id": self.get_post_id(),
            "suffixes": list(self.get_suffixes()),
        }

    def render_template(self, template: SelectedTemplate) -> str:
        context = self.render_context(template)
        if template.kind == "programmatic":
            return self._renderer.render_programmatic(template.path, context)
        return self._renderer.render_structured(template.path, context)

    def build(self, out: TextIO | None = None) -> None:
        """Render every component to out (stdout by default)."""
        if out is None:
            out = sys.stdout
        for template in self.select_templates():
            out.write(self.render_template(template))

    def render_to_string(self) -> str:
        """Return what build() would write."""
        buffer = io.StringIO()
        self.build(buffer)
        return buffer.getvalue()
