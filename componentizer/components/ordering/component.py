"""
Ordering component - Render order of a subject's components.

Invariants:
- Each component id appears at most once
- Top-pinned ids precede unpinned ids, which precede bottom-pinned ids
- Pinned groups keep the location's configured order
- Ids without a configured template are never rendered
- Listing views only render ids marked visible on listings
"""

from __future__ import annotations

from ._impl import ComponentOrderResolver
from .models import ComponentOrderOutput, OrderComponentsInput
from .ports import ComponentConfigPort, ContentRepoPort, ViewContextPort

# --- Component Entry Points ---


def run_order(
    inp: OrderComponentsInput,
    *,
    config: ComponentConfigPort,
    content_repo: ContentRepoPort,
    context: ViewContextPort,
) -> ComponentOrderOutput:
    """
    Resolve the component order for a subject.

    Args:
        inp: Input with an optional pinned subject.
        config: Component configuration port.
        content_repo: Content repository port.
        context: Request context port.

    Returns:
        ComponentOrderOutput with ordered ids and their templates.
    """
    resolver = ComponentOrderResolver(config, content_repo, context)
    templates = resolver.resolve(inp.subject_id)

    return ComponentOrderOutput(
        component_ids=resolver.resolve_ids(inp.subject_id),
        templates=templates,
        errors=[],
        success=True,
    )


def run(
    inp: OrderComponentsInput,
    *,
    config: ComponentConfigPort,
    content_repo: ContentRepoPort,
    context: ViewContextPort,
) -> ComponentOrderOutput:
    """
    Main entry point for the ordering component.

    Args:
        inp: Input object determining the operation.
        config: Component configuration port.
        content_repo: Content repository port.
        context: Request context port.

    Returns:
        ComponentOrderOutput with the resolved order.
    """
    if isinstance(inp, OrderComponentsInput):
        return run_order(inp, config=config, content_repo=content_repo, context=context)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
