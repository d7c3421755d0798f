"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request


@dataclass
class RequestContext:
    """Lightweight per-request state container mutated by flow components.

    ``form`` is the cache slot written by ``FormSetup``; the same object is
    mirrored under ``state["form"]`` for consumers that only pass state on,
    such as template contexts.
    """

    request: Request
    form: Any | None = None
    state: dict[str, Any] = field(default_factory=dict)
