"""Shared pytest fixtures for fastapi-formbuilder tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from starlette.requests import Request

from fastapi_formbuilder.config import FormConfig
from fastapi_formbuilder.resolver import FormConfigResolver


@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        **scope_extra: Any,
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        scope.update(scope_extra)
        return Request(scope)

    return _make


@pytest.fixture
def forms_dir(tmp_path: Path) -> Path:
    """Empty form config directory under a temporary application home."""
    path = tmp_path / "root" / "forms"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_form() -> Any:
    """Write a form config file below a directory, creating parents."""

    def _write(directory: Path, relative: str, content: str = "") -> Path:
        target = directory / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return target

    return _write


@pytest.fixture
def resolver(tmp_path: Path, forms_dir: Path) -> FormConfigResolver:
    """Resolver using the default ``<home>/root/forms`` search path."""
    return FormConfigResolver(FormConfig(home=str(tmp_path)), debug=False)
