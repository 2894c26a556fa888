"""
Ordering component - Render order of a subject's components.
"""

from ._impl import (
    LOCATION_BOTTOM,
    LOCATION_TOP,
    ComponentOrderResolver,
    filter_renderable,
    order_component_ids,
    sort_by_location,
)
from .component import run, run_order
from .models import (
    ComponentOrderOutput,
    ComponentTemplate,
    OrderComponentsInput,
    OrderingValidationError,
)
from .ports import ComponentConfigPort, ContentRepoPort, ViewContextPort

__all__ = [
    # Entry points
    "run",
    "run_order",
    # Models
    "ComponentOrderOutput",
    "ComponentTemplate",
    "OrderComponentsInput",
    "OrderingValidationError",
    # Ports
    "ComponentConfigPort",
    "ContentRepoPort",
    "ViewContextPort",
    # Resolver
    "LOCATION_BOTTOM",
    "LOCATION_TOP",
    "ComponentOrderResolver",
    "filter_renderable",
    "order_component_ids",
    "sort_by_location",
]
