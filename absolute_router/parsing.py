"""Url pattern parsing."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from absolute_router.patterns import scheme_pattern, variable_pattern


def split_host(host: str) -> List[str]:
    """Split a host name into dot separated tokens."""
    if not host:
        return []
    return host.split(".")


def split_path(path: str) -> List[str]:
    """Split a path into slash separated tokens.

    The leading slash and a single trailing slash are ignored, so
    ``/``, ``""`` and ``//`` are all empty paths.
    """
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    if not path:
        return []
    return path.split("/")


@dataclass(frozen=True)
class Segment:
    """A single host or path token of a url pattern.

    Literal:  ``Index``   (name=None)
    Variable: ``{area}``  (name="area")
    """

    value: str
    name: Optional[str] = None

    @classmethod
    def from_token(cls, token: str) -> "Segment":
        """Classify a raw token as literal or variable."""
        match = variable_pattern.match(token)
        if match:
            return cls(token, match.group("name"))
        return cls(token)

    @property
    def is_variable(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        return self.value


def _split_host_and_path(pattern: str) -> Tuple[Optional[str], str, str]:
    match = scheme_pattern.match(pattern)
    if match:
        scheme = match.group("scheme").lower()
        host, _, path = pattern[match.end() :].partition("/")
        return scheme, host, path

    if pattern.startswith("/"):
        return None, "", pattern

    # no scheme: only a lone dotted token ("{company}.com", "{company}.com/")
    # is a host, "v1.2/{controller}" stays local
    head, _, tail = pattern.partition("/")
    if "." in head and not tail:
        return None, head, ""
    return None, "", pattern


@dataclass(frozen=True)
class RoutePattern:
    """Parsed url pattern.

    Segments never include the scheme, the query string or the
    surrounding slashes.
    """

    host_segments: Tuple[Segment, ...] = ()
    path_segments: Tuple[Segment, ...] = ()
    scheme: Optional[str] = None

    @classmethod
    def parse(cls, pattern: Optional[str]) -> "RoutePattern":
        """Parse a raw url pattern.

        Examples::

            "{area}/{controller}"      -> path=({area}, {controller})
            "http://{company}.com/"    -> host=({company}, com), path=()
            "{company}.com"            -> host=({company}, com), path=()
            "{area}/{controller}?a=5"  -> path=({area}, {controller})
        """
        pattern = (pattern or "").partition("?")[0]
        scheme, host, path = _split_host_and_path(pattern)
        return cls(
            host_segments=tuple(Segment.from_token(t) for t in split_host(host)),
            path_segments=tuple(Segment.from_token(t) for t in split_path(path)),
            scheme=scheme,
        )

    @property
    def variables(self) -> List[str]:
        """Return variable names, host first then path."""
        return [
            segment.name
            for segment in self.host_segments + self.path_segments
            if segment.name is not None
        ]
