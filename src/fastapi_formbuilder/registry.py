"""Per-route form registration."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from starlette.requests import Request

F = TypeVar("F", bound=Callable[..., Any])

RouteKey = str | Callable[..., Any]


@dataclass(frozen=True)
class FormDescriptor:
    """Marks a route as needing a form, optionally naming its config file.

    An empty ``name`` means the config file is looked up from the request
    path on a best-effort basis; an explicit name must resolve or the
    request fails.
    """

    name: str = ""
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def fatal(self) -> bool:
        return bool(self.name)


class FormRegistry:
    """Mapping of routes to form descriptors, populated at startup."""

    def __init__(self) -> None:
        self._routes: dict[RouteKey, FormDescriptor] = {}

    def register(self, route: RouteKey, name: str = "", **options: Any) -> FormDescriptor:
        descriptor = FormDescriptor(name=name, options=options)
        self._routes[route] = descriptor
        return descriptor

    def form(self, name: str = "", **options: Any) -> Callable[[F], F]:
        """Register the decorated endpoint as needing a form.

        Usage:
            @app.get("/books/edit")
            @forms.form()
            async def edit(ctx: RequestContext = Depends(setup)): ...

            @app.get("/books/view")
            @forms.form("/books/edit")
            async def view(ctx: RequestContext = Depends(setup)): ...
        """

        def decorator(endpoint: F) -> F:
            self.register(endpoint, name, **options)
            return endpoint

        return decorator

    def lookup(self, request: Request) -> FormDescriptor | None:
        """Find the descriptor for the route handling ``request``.

        Tries the matched endpoint, then the matched route's path template,
        then the literal URL path.
        """
        endpoint = request.scope.get("endpoint")
        if endpoint is not None and endpoint in self._routes:
            return self._routes[endpoint]

        route = request.scope.get("route")
        route_path = getattr(route, "path", None)
        if route_path is not None and route_path in self._routes:
            return self._routes[route_path]

        return self._routes.get(request.url.path)

    def __contains__(self, route: object) -> bool:
        return route in self._routes

    def __len__(self) -> int:
        return len(self._routes)
