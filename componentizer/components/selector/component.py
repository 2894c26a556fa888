"""
Selector component - Template file selection.

Invariants:
- More specific suffixes win over less specific ones
- The bare component template is the last candidate of each root
- A match in an earlier root always wins over a later root
"""

from __future__ import annotations

from ._impl import ComponentSelector
from .models import SelectTemplateInput, SelectTemplateOutput
from .ports import TemplateLocatorPort

# --- Component Entry Points ---


def run_select(
    inp: SelectTemplateInput,
    *,
    locator: TemplateLocatorPort,
) -> SelectTemplateOutput:
    """
    Select the template for a single component.

    Args:
        inp: Input with component name, suffixes and template roots.
        locator: Template locator port.

    Returns:
        SelectTemplateOutput with the selected template or None.
    """
    selector = ComponentSelector(locator, inp.roots)

    return SelectTemplateOutput(
        template=selector.select(inp.component, inp.suffixes),
        errors=[],
        success=True,
    )


def run(
    inp: SelectTemplateInput,
    *,
    locator: TemplateLocatorPort,
) -> SelectTemplateOutput:
    """
    Main entry point for the selector component.

    Args:
        inp: Input object determining the operation.
        locator: Template locator port.

    Returns:
        SelectTemplateOutput with the selection result.
    """
    if isinstance(inp, SelectTemplateInput):
        return run_select(inp, locator=locator)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
