"""FlowComponent abstract base class and ComponentCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from fastapi_formbuilder.context import RequestContext


class ComponentCategory(Enum):
    """Processing component categories, defining strict execution order."""

    FORM = "form"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "form": 1,
            "custom": 2,
        }
        return _ORDER[self.value]


class FlowComponent(ABC):
    """Base abstraction for processing units run before a route handler."""

    category: ClassVar[ComponentCategory]

    @abstractmethod
    async def resolve(self, ctx: RequestContext) -> None: ...
