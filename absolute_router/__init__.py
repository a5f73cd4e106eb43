"""absolute_router: url pattern routing with host segments."""

from absolute_router.errors import ConfigurationError
from absolute_router.parsing import RoutePattern, Segment
from absolute_router.routing import AbsoluteRoute
from absolute_router.table import RouteTable
from absolute_router.types import Request, RouteData, VirtualPathData

__version__ = "1.0.0"

__all__ = [
    "AbsoluteRoute",
    "ConfigurationError",
    "Request",
    "RoutePattern",
    "RouteData",
    "RouteTable",
    "Segment",
    "VirtualPathData",
]
