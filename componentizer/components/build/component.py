"""
Build component - Ordered component rendering.

Combines component ordering, suffix resolution and template selection into
the rendered output of one subject.

Invariants:
- Components render in resolved order
- A missing template skips the component, never the build
- Invalid overrides are rejected before anything renders
"""

from __future__ import annotations

from componentizer.components.ordering import ContentRepoPort
from componentizer.components.selector import TemplateLocatorPort
from componentizer.components.suffixes import RequestContextPort
from componentizer.domain.entities import InvalidOverrideError

from ._impl import ComponentBuilder
from .models import (
    BuildInput,
    BuildOutput,
    BuildValidationError,
    SelectTemplatesInput,
    SelectTemplatesOutput,
)
from .ports import ConfigStorePort, RendererPort


def _prepare(
    builder: ComponentBuilder, inp: BuildInput | SelectTemplatesInput
) -> list[BuildValidationError]:
    """Apply pinned subject and overrides from the input."""
    if inp.subject_id is not None:
        builder.set_post_id(inp.subject_id)
    try:
        if inp.components is not None:
            builder.set_components(inp.components)
        if inp.suffixes is not None:
            builder.set_suffixes(inp.suffixes)
        if inp.extra_suffixes:
            builder.add_suffixes(inp.extra_suffixes)
    except InvalidOverrideError as e:
        return [BuildValidationError(code="invalid_override", message=str(e), field=e.name)]
    return []


# --- Component Entry Points ---


def run_build(
    inp: BuildInput,
    *,
    config: ConfigStorePort,
    content_repo: ContentRepoPort,
    context: RequestContextPort,
    locator: TemplateLocatorPort,
    renderer: RendererPort,
) -> BuildOutput:
    """
    Render a subject's components.

    Args:
        inp: Input with optional subject and overrides.
        config: Configuration port.
        content_repo: Content repository port.
        context: Request context port.
        locator: Template locator port.
        renderer: Template renderer port.

    Returns:
        BuildOutput with rendered HTML and the templates used.
    """
    builder = ComponentBuilder(config, content_repo, context, locator, renderer)
    errors = _prepare(builder, inp)
    if errors:
        return BuildOutput(html="", templates=(), errors=errors, success=False)

    templates = tuple(builder.select_templates())
    html = "".join(builder.render_template(t) for t in templates)

    return BuildOutput(
        html=html,
        templates=templates,
        errors=[],
        success=True,
    )


def run_select_templates(
    inp: SelectTemplatesInput,
    *,
    config: ConfigStorePort,
    content_repo: ContentRepoPort,
    context: RequestContextPort,
    locator: TemplateLocatorPort,
    renderer: RendererPort,
) -> SelectTemplatesOutput:
    """
    Resolve components, suffixes and templates without rendering.

    Args:
        inp: Input with optional subject and overrides.
        config: Configuration port.
        content_repo: Content repository port.
        context: Request context port.
        locator: Template locator port.
        renderer: Template renderer port.

    Returns:
        SelectTemplatesOutput describing what a build would render.
    """
    builder = ComponentBuilder(config, content_repo, context, locator, renderer)
    errors = _prepare(builder, inp)
    if errors:
        return SelectTemplatesOutput(
            components=(), suffixes=(), templates=(), errors=errors, success=False
        )

    return SelectTemplatesOutput(
        components=builder.get_components(),
        suffixes=builder.get_suffixes(),
        templates=tuple(builder.select_templates()),
        errors=[],
        success=True,
    )


def run(
    inp: BuildInput | SelectTemplatesInput,
    *,
    config: ConfigStorePort,
    content_repo: ContentRepoPort,
    context: RequestContextPort,
    locator: TemplateLocatorPort,
    renderer: RendererPort,
) -> BuildOutput | SelectTemplatesOutput:
    """
    Main entry point for the build component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        config: Configuration port.
        content_repo: Content repository port.
        context: Request context port.
        locator: Template locator port.
        renderer: Template renderer port.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, BuildInput):
        return run_build(
            inp,
            config=config,
            content_repo=content_repo,
            context=context,
            locator=locator,
            renderer=renderer,
        )
    elif isinstance(inp, SelectTemplatesInput):
        return run_select_templates(
            inp,
            config=config,
            content_repo=content_repo,
            context=context,
            locator=locator,
            renderer=renderer,
        )
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
