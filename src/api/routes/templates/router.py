"""Endpoints do catálogo de templates.

Endpoints:
- GET /api/templates: templates APPROVED (filtros category/language)
- GET /api/templates/filters: categorias e idiomas disponíveis
- GET /api/templates/{template_id}: um template aprovado
- GET /api/templates/{template_id}/variables: variáveis {{N}} do template
- POST /api/templates/{template_id}/preview: preview com valores preenchidos

O catálogo é relido do arquivo a cada requisição.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.bootstrap.dependencies import create_template_store
from app.domain.template import Template
from app.services.template_catalog import (
    approved_templates,
    available_filters,
    filter_templates,
    find_template,
)
from app.services.template_preview import render_template_preview
from app.services.template_variables import extract_variables
from utils.errors import TemplateStoreError

logger = logging.getLogger(__name__)

router = APIRouter()


class PreviewRequest(BaseModel):
    """Body do endpoint de preview."""

    variables: dict[str, str] = Field(default_factory=dict)


def _store_failure() -> JSONResponse:
    return JSONResponse(
        content={"error": "failed to load templates"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _not_found(template_id: str) -> JSONResponse:
    logger.info("template_not_found", extra={"template_id": template_id})
    return JSONResponse(
        content={"error": "template not found"},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _load_approved() -> list[Template]:
    return approved_templates(create_template_store().list_templates())


@router.get("", response_model=None)
async def list_templates(
    category: str | None = None,
    language: str | None = None,
) -> JSONResponse | list[dict[str, Any]]:
    """Lista templates com status exatamente APPROVED."""
    try:
        templates = _load_approved()
    except TemplateStoreError:
        return _store_failure()

    selected = filter_templates(templates, category=category, language=language)
    return [template.model_dump(exclude_none=True) for template in selected]


@router.get("/filters", response_model=None)
async def list_template_filters() -> JSONResponse | dict[str, Any]:
    """Opções de filtro (ALL + valores distintos dos templates aprovados)."""
    try:
        templates = _load_approved()
    except TemplateStoreError:
        return _store_failure()
    return available_filters(templates).model_dump()


@router.get("/{template_id}", response_model=None)
async def get_template(template_id: str) -> JSONResponse | dict[str, Any]:
    """Retorna um template aprovado por id (ou nome)."""
    try:
        template = find_template(_load_approved(), template_id)
    except TemplateStoreError:
        return _store_failure()
    if template is None:
        return _not_found(template_id)
    return template.model_dump(exclude_none=True)


@router.get("/{template_id}/variables", response_model=None)
async def get_template_variables(template_id: str) -> JSONResponse | list[dict[str, Any]]:
    """Variáveis do template na ordem da primeira ocorrência."""
    try:
        template = find_template(_load_approved(), template_id)
    except TemplateStoreError:
        return _store_failure()
    if template is None:
        return _not_found(template_id)
    return [variable.model_dump() for variable in extract_variables(template.components)]


@router.post("/{template_id}/preview", response_model=None)
async def preview_template(template_id: str, request: Request) -> JSONResponse | dict[str, Any]:
    """Preview do template com os valores informados em `variables`."""
    raw_body = await request.body()
    try:
        body = PreviewRequest.model_validate(json.loads(raw_body) if raw_body else {})
    except (json.JSONDecodeError, PydanticValidationError):
        return JSONResponse(
            content={"error": "invalid request body"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        template = find_template(_load_approved(), template_id)
    except TemplateStoreError:
        return _store_failure()
    if template is None:
        return _not_found(template_id)

    return render_template_preview(template, body.variables).model_dump()
