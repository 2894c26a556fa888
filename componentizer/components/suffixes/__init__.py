"""
Suffixes component - Template hierarchy suffixes.
"""

from ._impl import (
    SUFFIX_BUILDERS,
    VIEW_CLASSIFIERS,
    SuffixResolver,
    build_suffixes,
    classify_view,
    editor_suffixes,
    item_suffixes,
)
from .component import run, run_resolve
from .models import (
    ResolveSuffixesInput,
    SuffixesOutput,
    SuffixValidationError,
    ViewKind,
)
from .ports import RequestContextPort

__all__ = [
    # Entry points
    "run",
    "run_resolve",
    # Models
    "ResolveSuffixesInput",
    "SuffixesOutput",
    "SuffixValidationError",
    "ViewKind",
    # Ports
    "RequestContextPort",
    # Resolver
    "SUFFIX_BUILDERS",
    "VIEW_CLASSIFIERS",
    "SuffixResolver",
    "build_suffixes",
    "classify_view",
    "editor_suffixes",
    "item_suffixes",
]
