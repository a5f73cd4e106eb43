from unittest.mock import Mock

import pytest

from absolute_router.routing import AbsoluteRoute


@pytest.fixture
def funct():
    """Mock function for testing purposes."""
    return Mock(__name__="Mock")


@pytest.fixture
def mvc_route(funct):
    """Local route with controller and action defaults."""
    return AbsoluteRoute(
        "{controller}/{action}",
        defaults={"controller": "Home", "action": "Index"},
        handler=funct,
    )


@pytest.fixture
def company_route(funct):
    """Route with a variable host segment."""
    return AbsoluteRoute(
        "http://{company}.com/{area}/{controller}",
        defaults={"company": "acme", "controller": "Home"},
        data_tokens={"namespace": "companies"},
        handler=funct,
    )
