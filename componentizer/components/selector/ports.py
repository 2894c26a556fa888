"""
Selector component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class TemplateLocatorPort(Protocol):
    """Port for template existence checks."""

    def locate(self, candidates: Sequence[str]) -> str | None:
        """Return the first candidate that exists, searched in order."""
        ...
