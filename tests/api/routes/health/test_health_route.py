"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from api.routes.health import router as router_module
from app.infra.templates import JsonTemplateStore
from config.settings import ProviderSettings


@pytest.mark.asyncio
async def test_health_reports_service() -> None:
    response = await router_module.health_check()

    assert response.status == "healthy"
    assert response.service == "campanhas_whatsapp"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_credentials(
    monkeypatch: pytest.MonkeyPatch,
    catalog_path: Path,
) -> None:
    monkeypatch.setattr(
        router_module, "create_template_store", lambda: JsonTemplateStore(catalog_path)
    )
    monkeypatch.setattr(router_module, "get_provider_settings", lambda: ProviderSettings())

    response = await router_module.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["templates"]["status"] == "ok"
    assert payload["checks"]["templates"]["detail"] == 8
    assert payload["checks"]["provider"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_dependencies_are_ok(
    monkeypatch: pytest.MonkeyPatch,
    catalog_path: Path,
) -> None:
    monkeypatch.setattr(
        router_module, "create_template_store", lambda: JsonTemplateStore(catalog_path)
    )
    monkeypatch.setattr(
        router_module,
        "get_provider_settings",
        lambda: ProviderSettings(public_id="pub", secret_key="sec"),
    )

    response = await router_module.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"


@pytest.mark.asyncio
async def test_readiness_fails_with_broken_catalog(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setattr(
        router_module,
        "create_template_store",
        lambda: JsonTemplateStore(tmp_path / "absent.json"),
    )
    monkeypatch.setattr(
        router_module,
        "get_provider_settings",
        lambda: ProviderSettings(public_id="pub", secret_key="sec"),
    )

    response = await router_module.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["templates"]["error"] == "TemplateStoreError"
