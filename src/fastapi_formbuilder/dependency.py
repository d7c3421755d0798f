"""flow_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_formbuilder.context import RequestContext
from fastapi_formbuilder.exceptions import (
    FormAbort,
    FormException,
    FormInternalError,
)
from fastapi_formbuilder.flow import Flow, ResolvedFlow


def flow_dependency(flow: Flow) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that executes the flow."""
    resolved = flow.resolve()
    dep = _make_dependency(resolved)
    dep._flow_resolved = resolved  # type: ignore[attr-defined]
    return dep


def _make_dependency(
    resolved: ResolvedFlow,
) -> Callable[..., Awaitable[RequestContext]]:
    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(request=request)

        try:
            for component in resolved.components:
                await component.resolve(ctx)
        except FormAbort as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except FormException:
            raise
        except Exception as exc:
            wrapped = FormInternalError("Internal form error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

        return ctx

    return dependency
