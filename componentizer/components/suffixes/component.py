"""
Suffixes component - Template hierarchy suffixes.

Resolves the ordered suffixes used to select the most specific template
variant of a component for the current request.

Invariants:
- The list always ends with "index"
- Exactly one view branch contributes suffixes
- Extra suffixes are placed ahead of the computed ones
"""

from __future__ import annotations

from componentizer.domain.entities import InvalidOverrideError

from ._impl import SuffixResolver, classify_view
from .models import ResolveSuffixesInput, SuffixesOutput, SuffixValidationError, ViewKind
from .ports import RequestContextPort

# --- Component Entry Points ---


def run_resolve(
    inp: ResolveSuffixesInput,
    *,
    context: RequestContextPort,
) -> SuffixesOutput:
    """
    Resolve the suffix hierarchy for a request.

    Args:
        inp: Input with an optional pinned subject and extra suffixes.
        context: Request context port.

    Returns:
        SuffixesOutput with suffixes, most specific first.
    """
    view_kind = ViewKind.SINGULAR if context.is_editor_context() else classify_view(context)

    resolver = SuffixResolver(context)
    try:
        if inp.extra_suffixes:
            suffixes = resolver.prepend(inp.extra_suffixes, inp.subject_id)
        else:
            suffixes = resolver.resolve(inp.subject_id)
    except InvalidOverrideError as e:
        return SuffixesOutput(
            suffixes=(),
            view_kind=view_kind,
            errors=[
                SuffixValidationError(code="invalid_override", message=str(e), field=e.name)
            ],
            success=False,
        )

    return SuffixesOutput(
        suffixes=suffixes,
        view_kind=view_kind,
        errors=[],
        success=True,
    )


def run(
    inp: ResolveSuffixesInput,
    *,
    context: RequestContextPort,
) -> SuffixesOutput:
    """
    Main entry point for the suffixes component.

    Args:
        inp: Input object determining the operation.
        context: Request context port.

    Returns:
        SuffixesOutput with suffixes.
    """
    if isinstance(inp, ResolveSuffixesInput):
        return run_resolve(inp, context=context)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
