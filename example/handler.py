"""app: resolve and build urls."""

from absolute_router import RouteTable

routes = RouteTable(name="app", debug=True)


@routes.route(
    "http://{company}.com/{area}/{controller}",
    name="company",
    defaults={"company": "acme", "controller": "Home"},
    constraints={"company": "acme|contoso"},
    data_tokens={"namespace": "companies"},
)
def company(area: str, controller: str, company: str) -> str:
    """Return company page."""
    return f"{company}: {area}/{controller}"


@routes.route("{id}", name="item", constraints={"id": r"\d+"})
def item(id: str) -> str:
    """Return item page."""
    return f"item {id}"


@routes.route(
    "{controller}/{action}",
    name="default",
    defaults={"controller": "Home", "action": "Index"},
)
def default(controller: str, action: str) -> str:
    """Return controller action."""
    return f"{controller}.{action}"


def handle(url: str) -> str:
    """Dispatch url to the matching view."""
    route_data = routes.match(url)
    if route_data is None:
        return "Not found"
    return route_data.handler(**route_data.values)


if __name__ == "__main__":
    print(handle("http://contoso.com/Sales/Orders"))
    print(handle("http://localhost/42"))
    print(handle("http://localhost/Products/List"))
    print(routes.generate({"action": "About"}, name="default").virtual_path)
