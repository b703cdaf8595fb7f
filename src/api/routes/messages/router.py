"""Endpoints de envio de mensagens pelo provedor.

Endpoints:
- POST /api/create: repassa o body JSON ao endpoint de envio do provedor
- POST /api/campaigns: dispara um template para vários destinatários
- POST /api/member-events: dispara o template indicado no evento de membro
- GET /api/provider/templates: consulta templates cadastrados no provedor

Falhas do provedor são logadas e devolvidas como 500 com mensagem genérica.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from api.connectors.unifonic import HttpError
from app.bootstrap.dependencies import (
    create_provider_client,
    create_send_campaign_use_case,
    create_send_member_event_use_case,
)
from app.domain.member_event import MemberEvent
from app.protocols.models import CampaignRequest
from utils.errors import MissingTemplateError, TemplateStoreError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATE_NAME_HEADER = "x-template-name"


async def _read_json(request: Request) -> Any:
    """Lê o body como JSON; body vazio ou inválido levanta ValidationError."""
    raw_body = await request.body()
    if not raw_body:
        raise ValidationError("request body is required")
    try:
        return json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise ValidationError("invalid JSON body") from exc


def _error(message: str, status_code: int, **extra: Any) -> JSONResponse:
    return JSONResponse(content={**extra, "error": message}, status_code=status_code)


@router.post("/create")
async def create_message(request: Request) -> JSONResponse:
    """Repassa o payload ao provedor sem transformação."""
    try:
        body = await _read_json(request)
    except ValidationError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST, created=False)

    try:
        data = await create_provider_client().send_message(body)
    except HttpError as exc:
        logger.error(
            "create_message_failed",
            extra={"status_code": exc.status_code, "error": str(exc)},
        )
        return _error("failed to create", status.HTTP_500_INTERNAL_SERVER_ERROR, created=False)

    logger.info("create_message_sent")
    return JSONResponse(content={"created": True, "data": data}, status_code=status.HTTP_200_OK)


@router.post("/campaigns")
async def send_campaign(request: Request) -> JSONResponse:
    """Valida destinatários, monta e envia o template para cada um.

    Returns:
        200 se ao menos um envio teve sucesso, 500 se todos falharam
    """
    try:
        campaign = CampaignRequest.model_validate(await _read_json(request))
    except ValidationError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST, success=False)
    except PydanticValidationError:
        return _error("invalid request body", status.HTTP_400_BAD_REQUEST, success=False)

    try:
        result = await create_send_campaign_use_case().execute(campaign)
    except ValidationError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST, success=False)
    except MissingTemplateError:
        return _error("template not found", status.HTTP_404_NOT_FOUND, success=False)
    except TemplateStoreError:
        return _error(
            "failed to load templates",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            success=False,
        )

    status_code = status.HTTP_200_OK if result.sent else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        content={"success": result.success, **result.model_dump()},
        status_code=status_code,
    )


@router.post("/member-events")
async def send_member_event(request: Request) -> JSONResponse:
    """Envia o template do evento ao telefone do membro.

    O nome do template vem de Data.templateName ou, na ausência, do header
    X-Template-Name.
    """
    try:
        event = MemberEvent.model_validate(await _read_json(request))
    except ValidationError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST, success=False)
    except PydanticValidationError:
        return _error("invalid request body", status.HTTP_400_BAD_REQUEST, success=False)

    try:
        outcome = await create_send_member_event_use_case().execute(
            event,
            template_name=request.headers.get(TEMPLATE_NAME_HEADER),
        )
    except ValidationError as exc:
        return _error(str(exc), status.HTTP_400_BAD_REQUEST, success=False)
    except MissingTemplateError:
        return _error("template not found", status.HTTP_404_NOT_FOUND, success=False)
    except TemplateStoreError:
        return _error(
            "failed to load templates",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            success=False,
        )

    status_code = status.HTTP_200_OK if outcome.success else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(content=outcome.model_dump(), status_code=status_code)


@router.get("/provider/templates")
async def get_provider_templates(
    name: str | None = None,
    language: str | None = None,
) -> JSONResponse:
    """Relay da consulta de templates no provedor."""
    try:
        data = await create_provider_client().get_message_templates(name=name, language=language)
    except HttpError as exc:
        logger.error(
            "provider_templates_failed",
            extra={"status_code": exc.status_code, "error": str(exc)},
        )
        return _error("failed to fetch templates", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(content=data, status_code=status.HTTP_200_OK)
