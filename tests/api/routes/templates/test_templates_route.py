"""Testes dos endpoints do catálogo de templates."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from starlette.requests import Request

from api.routes.templates import router as router_module
from app.infra.templates import JsonTemplateStore


def _build_request(body: bytes) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/api/templates/x/preview",
        "raw_path": b"/api/templates/x/preview",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.fixture(autouse=True)
def _catalog(monkeypatch: pytest.MonkeyPatch, catalog_path: Path) -> None:
    monkeypatch.setattr(
        router_module, "create_template_store", lambda: JsonTemplateStore(catalog_path)
    )


@pytest.mark.asyncio
async def test_list_returns_only_approved() -> None:
    templates = await router_module.list_templates()

    names = [template["name"] for template in templates]
    assert len(names) == 6
    assert "flash_sale_draft" not in names
    assert "old_welcome" not in names


@pytest.mark.asyncio
async def test_list_filters_by_category_and_language() -> None:
    templates = await router_module.list_templates(category="UTILITY", language="en")

    assert [t["name"] for t in templates] == [
        "youss_textheader",
        "store_location_notice",
        "monthly_statement",
    ]


@pytest.mark.asyncio
async def test_filters_endpoint() -> None:
    filters = await router_module.list_template_filters()

    assert filters == {
        "categories": ["ALL", "MARKETING", "UTILITY"],
        "languages": ["ALL", "en", "ar"],
    }


@pytest.mark.asyncio
async def test_get_template_and_not_found() -> None:
    template = await router_module.get_template("1012837465920003")
    assert template["name"] == "mj_demo_123"

    response = await router_module.get_template("1012837465920007")
    assert response.status_code == 404
    assert json.loads(response.body) == {"error": "template not found"}


@pytest.mark.asyncio
async def test_variables_endpoint() -> None:
    variables = await router_module.get_template_variables("mj_demo_123")

    assert variables == [
        {"name": "1", "value": "", "placeholder": "Alok"},
        {"name": "2", "value": "", "placeholder": "1200"},
    ]


@pytest.mark.asyncio
async def test_preview_endpoint() -> None:
    request = _build_request(json.dumps({"variables": {"1": "Maria", "2": "50"}}).encode())

    preview = await router_module.preview_template("mj_demo_123", request)

    assert preview["body"] == "Hi Maria, your loyalty balance is 50 points."
    assert preview["missing_variables"] == []


@pytest.mark.asyncio
async def test_preview_rejects_invalid_body() -> None:
    response = await router_module.preview_template("mj_demo_123", _build_request(b"{oops"))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_store_failure_returns_500(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(
        router_module,
        "create_template_store",
        lambda: JsonTemplateStore(tmp_path / "absent.json"),
    )

    response = await router_module.list_templates()

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "failed to load templates"}
