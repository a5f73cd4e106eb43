from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from absolute_router.routing import AbsoluteRoute


@dataclass(frozen=True)
class Request:
    scheme: str
    host: str
    path: str
    query: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Request":
        """Build a request descriptor from an absolute url."""
        parts = urlsplit(url)
        return cls(
            scheme=parts.scheme,
            host=parts.hostname or "",
            path=parts.path or "/",
            query=parts.query,
        )


@dataclass(frozen=True)
class RouteData:
    route: "AbsoluteRoute"
    values: Dict[str, Any]
    data_tokens: Dict[str, Any] = field(default_factory=dict)

    @property
    def handler(self) -> Any:
        """Return the handler token of the matched route."""
        return self.route.handler


@dataclass(frozen=True)
class VirtualPathData:
    route: "AbsoluteRoute"
    virtual_path: str
    data_tokens: Dict[str, Any] = field(default_factory=dict)
