"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import SERVICE_NAME
from app.bootstrap.dependencies import create_template_store
from config.settings import get_provider_settings
from utils.errors import TemplateStoreError

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: int | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "detail": self.detail,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness: catálogo legível e credenciais do provedor presentes."""
    templates_check = _check_templates()
    provider_check = _check_provider()
    ready = templates_check.status == "ok" and provider_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "templates": templates_check.as_dict(),
            "provider": provider_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_templates() -> DependencyCheck:
    try:
        templates = create_template_store().list_templates()
    except TemplateStoreError as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    return DependencyCheck(status="ok", detail=len(templates))


def _check_provider() -> DependencyCheck:
    errors = get_provider_settings().validate()
    if errors:
        logger.warning("readiness_provider_not_configured", extra={"error_count": len(errors)})
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
