"""Test url pattern parsing."""

import pytest

from absolute_router.parsing import RoutePattern, Segment, split_host, split_path


def _path(pattern):
    return [str(s) for s in RoutePattern.parse(pattern).path_segments]


def _host(pattern):
    return [str(s) for s in RoutePattern.parse(pattern).host_segments]


def test_pattern_just_local():
    """Should assign local pattern."""
    assert _path("{area}") == ["{area}"]
    assert _host("{area}") == []


def test_pattern_with_domain():
    """Should skip the domain in path segments."""
    assert _path("http://acme.com/{area}/Index") == ["{area}", "Index"]
    assert _host("http://acme.com/{area}/Index") == ["acme", "com"]


def test_pattern_with_query():
    """Should drop the query string."""
    assert _path("{area}/{controller}?a=5&b=6") == ["{area}", "{controller}"]


def test_pattern_with_domain_and_query():
    """Should drop the query string after the domain."""
    assert _path("http://acme.com/{area}?a=5&b=6") == ["{area}"]


@pytest.mark.parametrize(
    "pattern",
    ["http://{company}.com/", "http://{company}.com", "{company}.com", "{company}.com/"],
)
def test_pattern_just_domain(pattern):
    """Should return empty local pattern and the host segments."""
    assert _path(pattern) == []
    assert _host(pattern) == ["{company}", "com"]


def test_pattern_end_with_slash():
    """Should not include the trailing slash."""
    assert _path("{controller}/Index/") == ["{controller}", "Index"]


def test_pattern_just_slash():
    """Should return empty segments."""
    assert _path("/") == []
    assert _host("/") == []


def test_pattern_empty():
    """Should return empty segments."""
    pattern = RoutePattern.parse("")
    assert pattern.host_segments == ()
    assert pattern.path_segments == ()
    assert RoutePattern.parse(None) == pattern


@pytest.mark.parametrize(
    "pattern",
    [
        "{controller}/{action}",
        "/{area}/{controller}",
        "Home/Index",
        "files/report.pdf",
        "/report.pdf",
    ],
)
def test_pattern_without_host(pattern):
    """Patterns without scheme or lone dotted token have no host."""
    assert _host(pattern) == []


def test_pattern_dotted_first_segment_is_local():
    """A dotted token followed by path segments stays in the path."""
    assert _host("v1.2/{controller}/{action}") == []
    assert _path("v1.2/{controller}/{action}") == [
        "v1.2",
        "{controller}",
        "{action}",
    ]
    assert _host("{company}.com/{area}") == []
    assert _path("{company}.com/{area}") == ["{company}.com", "{area}"]
    assert RoutePattern.parse("v1.2/{controller}").scheme is None


def test_pattern_scheme():
    """Should keep the scheme, lowercased."""
    assert RoutePattern.parse("HTTPS://acme.com/x").scheme == "https"
    assert RoutePattern.parse("ftp://acme.com/").scheme == "ftp"
    assert RoutePattern.parse("{area}").scheme is None


def test_segment_classification():
    """Should tag variable and literal segments."""
    pattern = RoutePattern.parse("http://www.{company}.com/{area}/Index")
    host = pattern.host_segments
    assert host[0] == Segment("www")
    assert not host[0].is_variable
    assert host[1] == Segment("{company}", "company")
    assert host[1].is_variable
    assert pattern.path_segments[1].name is None
    assert pattern.variables == ["company", "area"]


def test_segment_from_token():
    """Only whole-token single brace pairs are variables."""
    assert Segment.from_token("{id}").name == "id"
    assert Segment.from_token("{}").name is None
    assert Segment.from_token("id{x}").name is None
    assert Segment.from_token("{{id}}").name is None


def test_route_pattern_frozen():
    """Test that RoutePattern is frozen (immutable)."""
    pattern = RoutePattern.parse("{area}")
    with pytest.raises(AttributeError):
        pattern.path_segments = ()


def test_split_helpers():
    """Should tokenize hosts and paths."""
    assert split_host("") == []
    assert split_host("www.acme.com") == ["www", "acme", "com"]
    assert split_path("/") == []
    assert split_path("") == []
    assert split_path("/Home/Index/") == ["Home", "Index"]
    assert split_path("Home/Index") == ["Home", "Index"]
