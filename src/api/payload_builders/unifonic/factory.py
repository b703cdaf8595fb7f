"""Montagem do payload completo de envio (recipient + content)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.unifonic.template import TemplatePayloadBuilder
from app.constants.templates import WHATSAPP_CHANNEL
from utils.errors import MissingTemplateError

if TYPE_CHECKING:
    from app.domain.template import Template
    from app.domain.template_data import TemplateDataSource


def build_base_payload(recipient: str) -> dict[str, Any]:
    """Campos comuns a toda mensagem WhatsApp enviada pelo provedor."""
    return {
        "recipient": {
            "contact": recipient,
            "channel": WHATSAPP_CHANNEL,
        }
    }


def build_full_payload(
    template: Template | None,
    recipient: str,
    data: TemplateDataSource | None = None,
    default_language: str = "en",
) -> dict[str, Any]:
    """Constrói payload completo para o endpoint de envio.

    Args:
        template: Template selecionado
        recipient: Telefone do destinatário
        data: Valores de envio
        default_language: Idioma quando o template não informa

    Returns:
        Payload pronto para envio

    Raises:
        MissingTemplateError: Se template ausente
    """
    if template is None:
        raise MissingTemplateError()

    payload = build_base_payload(recipient)
    payload["content"] = TemplatePayloadBuilder(default_language).build(template, data)
    return payload


class UnifonicPayloadBuilder:
    """Implementação de PayloadBuilderProtocol para o provedor."""

    def __init__(self, default_language: str = "en") -> None:
        self._default_language = default_language

    def build_full_payload(
        self,
        template: Template | None,
        recipient: str,
        data: TemplateDataSource | None = None,
    ) -> dict[str, Any]:
        return build_full_payload(template, recipient, data, self._default_language)
