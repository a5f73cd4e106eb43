"""Absolute route matching and url generation."""

import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from absolute_router.errors import ConfigurationError
from absolute_router.parsing import RoutePattern, Segment, split_host, split_path
from absolute_router.types import Request, RouteData, VirtualPathData


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _override_merge(
    source: Optional[Mapping[str, Any]], destination: Dict[str, Any]
) -> Dict[str, Any]:
    if source:
        destination.update(source)
    return destination


def _merge(
    source: Optional[Mapping[str, Any]], destination: Dict[str, Any]
) -> Dict[str, Any]:
    if source:
        for key, value in source.items():
            destination.setdefault(key, value)
    return destination


def _compile_constraints(
    constraints: Optional[Mapping[str, Any]], url_pattern: str
) -> Mapping[str, "re.Pattern[str]"]:
    expressions: Dict[str, "re.Pattern[str]"] = {}
    for name, rule in (constraints or {}).items():
        if not isinstance(rule, str):
            raise ConfigurationError(
                f"The constraint entry '{name}' on the route with URL pattern "
                f"'{url_pattern}' must have a string value.",
                name,
                url_pattern,
            )
        try:
            expressions[name] = re.compile(f"^({rule})$", re.IGNORECASE)
        except re.error as err:
            raise ConfigurationError(
                f"The constraint entry '{name}' on the route with URL pattern "
                f"'{url_pattern}' is not a valid regular expression: {err}",
                name,
                url_pattern,
            ) from err
    return MappingProxyType(expressions)


def _match_segments(
    segments: Sequence[Segment], tokens: Sequence[str], values: Dict[str, str]
) -> bool:
    if not segments:
        return True
    if len(segments) != len(tokens):
        return False
    for segment, token in zip(segments, tokens):
        if segment.name is None:
            if segment.value != token:
                return False
        else:
            values[segment.name] = token
    return True


def _fill_segments(
    segments: Sequence[Segment],
    values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    force_defaults: bool = False,
) -> List[str]:
    """Resolve pattern segments into url tokens.

    Default values are held back until a literal or an explicit value
    follows them, so trailing defaults are dropped. With
    ``force_defaults`` (used for hosts) defaults are merged into the
    available values first and always written.
    """
    available = dict(values)
    if force_defaults:
        _merge(defaults, available)

    output: List[str] = []
    pending: List[str] = []
    for segment in segments:
        if segment.name is None:
            output.extend(pending)
            pending.clear()
            output.append(segment.value)
            continue

        name = segment.name
        if name in available:
            value = _to_string(available[name])
            if (
                not force_defaults
                and name in defaults
                and value.lower() == _to_string(defaults[name]).lower()
            ):
                pending.append(value)
                continue
            output.extend(pending)
            pending.clear()
            output.append(value)
        elif name in defaults:
            pending.append(_to_string(defaults[name]))
    return output


class AbsoluteRoute:
    """Route matching a url pattern that may include the host."""

    def __init__(
        self,
        url_pattern: str,
        defaults: Optional[Mapping[str, Any]] = None,
        constraints: Optional[Mapping[str, Any]] = None,
        data_tokens: Optional[Mapping[str, Any]] = None,
        handler: Any = None,
    ) -> None:
        """Initialize route object."""
        self.url_pattern = url_pattern
        self.defaults: Mapping[str, Any] = MappingProxyType(dict(defaults or {}))
        self.constraints = constraints
        self.data_tokens: Mapping[str, Any] = MappingProxyType(dict(data_tokens or {}))
        self.handler = handler

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.url_pattern!r})"

    @property
    def url_pattern(self) -> str:
        return self._url_pattern

    @url_pattern.setter
    def url_pattern(self, value: Optional[str]) -> None:
        self.pattern = RoutePattern.parse(value)
        self._url_pattern = value or ""

    @property
    def constraints(self) -> Optional[Mapping[str, Any]]:
        return self._constraints

    @constraints.setter
    def constraints(self, value: Optional[Mapping[str, Any]]) -> None:
        # a rejected rule leaves the previous constraints in place
        expressions = _compile_constraints(value, self.url_pattern)
        self._constraint_expressions = expressions
        self._constraints = MappingProxyType(dict(value)) if value is not None else None

    def _match_constraints(self, values: Mapping[str, Any]) -> bool:
        for name, expression in self._constraint_expressions.items():
            if not expression.match(_to_string(values.get(name))):
                return False
        return True

    def match(self, request: Request) -> Optional[RouteData]:
        """Match a request against the route.

        Returns ``RouteData`` on success, ``None`` when the host or path
        does not fit the pattern or a constraint rejects a value.
        """
        bindings: Dict[str, str] = {}
        if not _match_segments(
            self.pattern.host_segments, split_host(request.host), bindings
        ):
            return None
        if not _match_segments(
            self.pattern.path_segments, split_path(request.path), bindings
        ):
            return None

        values = _override_merge(bindings, dict(self.defaults))
        if not self._match_constraints(values):
            return None

        return RouteData(
            route=self,
            values=values,
            data_tokens=_override_merge(self.data_tokens, {}),
        )

    def generate(
        self,
        values: Optional[Mapping[str, Any]] = None,
        current_values: Optional[Mapping[str, Any]] = None,
        scheme: Optional[str] = None,
    ) -> Optional[VirtualPathData]:
        """Build the url of the route from route values.

        ``values`` override ``current_values`` (usually the values of the
        route that matched the current request). ``scheme`` is used for
        patterns with a host and falls back to the pattern's scheme, then
        to ``http``. Returns ``None`` when a constraint rejects a value.
        """
        context_values = _override_merge(values, dict(current_values or {}))
        if not self._match_constraints(context_values):
            return None

        path = "/".join(
            _fill_segments(self.pattern.path_segments, context_values, self.defaults)
        )
        if self.pattern.host_segments:
            host = ".".join(
                _fill_segments(
                    self.pattern.host_segments,
                    context_values,
                    self.defaults,
                    force_defaults=True,
                )
            )
            scheme = scheme or self.pattern.scheme or "http"
            virtual_path = f"{scheme}://{host}/{path}"
        else:
            virtual_path = path

        return VirtualPathData(
            route=self,
            virtual_path=virtual_path,
            data_tokens=_override_merge(self.data_tokens, {}),
        )
