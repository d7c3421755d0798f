"""Form setup component — builds the route's form before the handler runs."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request

from fastapi_formbuilder._types import FormFactory
from fastapi_formbuilder.component import ComponentCategory, FlowComponent
from fastapi_formbuilder.context import RequestContext
from fastapi_formbuilder.form import Form
from fastapi_formbuilder.registry import FormDescriptor, FormRegistry
from fastapi_formbuilder.resolver import FormConfigResolver

_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class FormSetup(FlowComponent):
    """Resolves the form config for the current route and caches the form.

    With ``name`` given (``""`` included) the component describes its own
    route. Otherwise ``registry`` is consulted, and routes it does not know
    are left untouched.
    """

    category = ComponentCategory.FORM

    def __init__(
        self,
        resolver: FormConfigResolver,
        *,
        registry: FormRegistry | None = None,
        name: str | None = None,
        factory: FormFactory = Form,
        **options: Any,
    ) -> None:
        if name is None and registry is None:
            raise ValueError("FormSetup needs a registry or an explicit name")
        self._resolver = resolver
        self._registry = registry
        self._descriptor = (
            FormDescriptor(name=name, options=options) if name is not None else None
        )
        self._factory = factory

    def descriptor_for(self, request: Request) -> FormDescriptor | None:
        if self._descriptor is not None:
            return self._descriptor
        assert self._registry is not None
        return self._registry.lookup(request)

    async def resolve(self, ctx: RequestContext) -> None:
        descriptor = self.descriptor_for(ctx.request)
        if descriptor is None:
            return

        params = await collect_params(ctx.request)
        options = self._resolver.resolve(descriptor, ctx.request.url.path, params)

        form = self._factory(**options)
        ctx.form = form
        ctx.state["form"] = form


async def collect_params(request: Request) -> dict[str, Any]:
    """Merge query and form body parameters; repeated keys become lists."""
    params: dict[str, Any] = _flatten_multi(request.query_params.multi_items())

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPES):
        form_data = await request.form()
        body = _flatten_multi(
            (k, v) for k, v in form_data.multi_items() if isinstance(v, str)
        )
        params.update(body)

    return params


def _flatten_multi(items: Any) -> dict[str, Any]:
    grouped: dict[str, list[str]] = {}
    for key, value in items:
        grouped.setdefault(key, []).append(value)
    return {k: v[0] if len(v) == 1 else v for k, v in grouped.items()}
