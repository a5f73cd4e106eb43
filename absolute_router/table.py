"""Ordered route table."""

import logging
import sys
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from absolute_router.routing import AbsoluteRoute
from absolute_router.types import Request, RouteData, VirtualPathData


class RouteTable:
    """Candidate routes tried in registration order."""

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str = "absolute_router",
        configure_logs: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize route table."""
        self.name: str = name
        self.debug: bool = debug
        self.routes: List[AbsoluteRoute] = []
        self.named_routes: Dict[str, AbsoluteRoute] = {}
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[AbsoluteRoute]:
        return iter(self.routes)

    def _configure_logging(self) -> None:
        """Send table logs to stdout, debug level when ``debug`` is set.

        Tables sharing a logger name reuse its stdout handler but each
        one applies its own level.
        """
        self.log.setLevel(logging.DEBUG if self.debug else logging.ERROR)
        self.log.propagate = False
        if self._has_stdout_handler(self.log):
            return

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(self.FORMAT_STRING))
        self.log.addHandler(handler)

    @staticmethod
    def _has_stdout_handler(log: logging.Logger) -> bool:
        return any(
            isinstance(handler, logging.StreamHandler) and handler.stream == sys.stdout
            for handler in log.handlers
        )

    def add_route(
        self, route: AbsoluteRoute, name: Optional[str] = None
    ) -> AbsoluteRoute:
        """Register a prebuilt route."""
        if name is not None:
            if name in self.named_routes:
                raise ValueError(
                    f'Duplicate route name detected: "{name}"\n'
                    "Route names must be unique."
                )
            self.named_routes[name] = route

        self.routes.append(route)
        self.log.debug(f"Registered route {route.url_pattern!r} as {name!r}")
        return route

    def add(self, url_pattern: str, handler: Any = None, **kwargs) -> AbsoluteRoute:
        """Build and register a route."""
        name = kwargs.pop("name", None)
        defaults = kwargs.pop("defaults", None)
        constraints = kwargs.pop("constraints", None)
        data_tokens = kwargs.pop("data_tokens", None)

        if kwargs:
            raise TypeError(
                f"TypeError: add() got unexpected keyword "
                f"arguments: {', '.join(list(kwargs))}"
            )

        route = AbsoluteRoute(
            url_pattern,
            defaults=defaults,
            constraints=constraints,
            data_tokens=data_tokens,
            handler=handler,
        )
        return self.add_route(route, name)

    def route(self, url_pattern: str, **kwargs) -> Callable:
        """Register route."""

        def _register_view(endpoint):
            self.add(url_pattern, endpoint, **kwargs)
            return endpoint

        return _register_view

    def get(self, name: str) -> Optional[AbsoluteRoute]:
        """Return the route registered under ``name``."""
        return self.named_routes.get(name)

    def match(self, request: Union[Request, str]) -> Optional[RouteData]:
        """Return the route data of the first route matching the request."""
        if isinstance(request, str):
            request = Request.from_url(request)

        for route in self.routes:
            route_data = route.match(request)
            if route_data is not None:
                self.log.debug(
                    f"{request.host}{request.path} matched {route.url_pattern!r}"
                )
                return route_data

        self.log.debug(f"No route for: {request.scheme}://{request.host}{request.path}")
        return None

    def generate(
        self,
        values: Optional[Mapping[str, Any]] = None,
        current_values: Optional[Mapping[str, Any]] = None,
        name: Optional[str] = None,
        scheme: Optional[str] = None,
    ) -> Optional[VirtualPathData]:
        """Return the url built by the first route accepting the values.

        With ``name`` only the route registered under that name is used.
        """
        if name is not None:
            candidates = [self.named_routes[name]]
        else:
            candidates = self.routes

        for route in candidates:
            path_data = route.generate(values, current_values, scheme=scheme)
            if path_data is not None:
                self.log.debug(
                    f"Generated {path_data.virtual_path!r} from {route.url_pattern!r}"
                )
                return path_data

        self.log.debug(f"No route can generate a url for: {dict(values or {})}")
        return None
