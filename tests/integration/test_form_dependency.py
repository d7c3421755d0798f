"""Integration tests for form setup with FastAPI and httpx."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from fastapi_formbuilder.components.form_setup import FormSetup
from fastapi_formbuilder.config import FormConfig
from fastapi_formbuilder.context import RequestContext
from fastapi_formbuilder.dependency import flow_dependency
from fastapi_formbuilder.flow import Flow
from fastapi_formbuilder.registry import FormRegistry
from fastapi_formbuilder.resolver import FormConfigResolver

BOOK_FORM = """\
name: books_edit
fields:
    title:
        required: 1
    isbn:
        validate: INT
"""


def _make_app(home: Path) -> FastAPI:
    forms = FormRegistry()
    resolver = FormConfigResolver(FormConfig(home=str(home)), debug=False)
    setup = flow_dependency(Flow(FormSetup(resolver, registry=forms)))

    app = FastAPI()

    @app.api_route("/books/edit", methods=["GET", "POST"])
    @forms.form()
    async def edit(ctx: RequestContext = Depends(setup)) -> dict[str, Any]:  # noqa: B008
        form = ctx.form
        valid = form.validate() if form.submitted else None
        return {
            "form": form.to_dict(),
            "submitted": form.submitted,
            "valid": valid,
            "params": form.params,
        }

    @app.get("/books/view")
    @forms.form("/books/edit")
    async def view(ctx: RequestContext = Depends(setup)) -> dict[str, Any]:  # noqa: B008
        ctx.form.static = True
        return {"form": ctx.form.to_dict()}

    @app.get("/books/missing")
    @forms.form("books/missing")
    async def missing(ctx: RequestContext = Depends(setup)) -> dict[str, Any]:  # noqa: B008
        return {}

    @app.get("/books/{book_id}/notes")
    async def notes(ctx: RequestContext = Depends(setup)) -> dict[str, Any]:  # noqa: B008
        return {"has_form": ctx.form is not None}

    @app.get("/books/list")
    async def listing(ctx: RequestContext = Depends(setup)) -> dict[str, Any]:  # noqa: B008
        return {"has_form": ctx.form is not None, "state": list(ctx.state)}

    forms.register("/books/{book_id}/notes", "books/notes")
    return app


@pytest.fixture
def app(tmp_path: Path, forms_dir: Path, write_form: Any) -> FastAPI:
    write_form(forms_dir, "books/edit.fb", BOOK_FORM)
    write_form(forms_dir, "books/notes.fb", "name: notes\n")
    return _make_app(tmp_path)


async def _request(app: FastAPI, method: str, path: str, **kwargs: Any) -> Any:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, path, **kwargs)


class TestFormDependencyIntegration:
    async def test_path_derived_form(self, app: FastAPI) -> None:
        resp = await _request(app, "GET", "/books/edit")
        assert resp.status_code == 200
        data = resp.json()
        assert data["form"]["name"] == "books_edit"
        assert data["form"]["action"] == "/books/edit"
        assert list(data["form"]["fields"]) == ["title", "isbn"]
        assert data["submitted"] is False

    async def test_explicit_name_reuses_other_form(self, app: FastAPI) -> None:
        resp = await _request(app, "GET", "/books/view")
        assert resp.status_code == 200
        data = resp.json()
        assert data["form"]["name"] == "books_edit"
        assert data["form"]["action"] == "/books/view"
        assert data["form"]["static"] is True

    async def test_missing_explicit_form_returns_500(
        self, app: FastAPI, tmp_path: Path
    ) -> None:
        resp = await _request(app, "GET", "/books/missing")
        assert resp.status_code == 500
        assert "books/missing.fb" in resp.json()["detail"]
        assert str(tmp_path) not in resp.json()["detail"]

    async def test_route_template_registration(self, app: FastAPI) -> None:
        resp = await _request(app, "GET", "/books/42/notes")
        assert resp.status_code == 200
        assert resp.json() == {"has_form": True}

    async def test_unregistered_route_gets_no_form(self, app: FastAPI) -> None:
        resp = await _request(app, "GET", "/books/list")
        assert resp.status_code == 200
        assert resp.json() == {"has_form": False, "state": []}

    async def test_submitted_form_data_becomes_params(self, app: FastAPI) -> None:
        resp = await _request(
            app,
            "POST",
            "/books/edit?from=query",
            data={"_submitted_books_edit": "1", "title": "Dune", "isbn": "42"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["submitted"] is True
        assert data["valid"] is True
        assert data["params"]["title"] == "Dune"
        assert data["params"]["from"] == "query"

    async def test_invalid_submission(self, app: FastAPI) -> None:
        resp = await _request(
            app,
            "POST",
            "/books/edit",
            data={"_submitted_books_edit": "1", "title": "", "isbn": "abc"},
        )
        data = resp.json()
        assert data["valid"] is False
        errors = data["form"]["errors"]
        assert errors["title"] == "required"
        assert errors["isbn"].startswith("Input should be a valid integer")

    async def test_missing_optional_form_logs_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        app = _make_app(tmp_path / "elsewhere")
        with caplog.at_level(logging.WARNING, logger="fastapi_formbuilder.resolver"):
            resp = await _request(app, "GET", "/books/edit")
        assert resp.status_code == 200
        assert resp.json()["form"]["fields"] == {}
        assert "Can't access form config books/edit.fb" in caplog.text

    async def test_malformed_source_returns_500(
        self, tmp_path: Path, forms_dir: Path, write_form: Any
    ) -> None:
        write_form(forms_dir, "books/edit.fb", "fields: [unclosed\n")
        app = _make_app(tmp_path)
        resp = await _request(app, "GET", "/books/edit")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Internal form error"
