"""Use case de disparo de campanha: um template para vários destinatários."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.template_data import TemplateDataSource
from app.protocols.models import CampaignRequest, CampaignResult, RecipientResult
from app.services.template_catalog import approved_templates, find_template
from config.logging import mask_phone
from utils.errors import MissingTemplateError, ProviderRequestError

if TYPE_CHECKING:
    from app.domain.template import Template
    from app.protocols.http_client import MessagingHttpClientProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.template_store import TemplateStoreProtocol
    from app.protocols.validator import RecipientValidatorProtocol

logger = logging.getLogger(__name__)


class SendCampaignUseCase:
    """Orquestra validação, build e envio por destinatário.

    Destinatários são validados antes de qualquer chamada de rede. Os envios
    são sequenciais; falha em um destinatário não interrompe os demais.
    """

    def __init__(
        self,
        template_store: TemplateStoreProtocol,
        builder: PayloadBuilderProtocol,
        client: MessagingHttpClientProtocol,
        recipient_validator: RecipientValidatorProtocol,
    ) -> None:
        self._template_store = template_store
        self._builder = builder
        self._client = client
        self._validate_recipients = recipient_validator

    def validate_recipients(self, raw: str | list[str] | None) -> list[str]:
        """Valida destinatários com o validator injetado."""
        return self._validate_recipients(raw)

    def resolve_template(self, template_key: str) -> Template:
        """Busca template aprovado por id ou nome.

        Raises:
            MissingTemplateError: Se não existe template aprovado com a chave
        """
        template = find_template(
            approved_templates(self._template_store.list_templates()),
            template_key,
        )
        if template is None:
            raise MissingTemplateError(template_key)
        return template

    async def execute(self, request: CampaignRequest) -> CampaignResult:
        """Executa a campanha.

        Raises:
            ValidationError: Destinatários inválidos (nenhum envio realizado)
            MissingTemplateError: Template inexistente ou não aprovado
        """
        recipients = self.validate_recipients(request.recipients)
        template = self.resolve_template(request.template_id)
        data = request.data or TemplateDataSource.from_variables(template, request.variables)

        result = CampaignResult(template_id=template.id, template_name=template.name)
        for recipient in recipients:
            outcome = await self.send_one(template, recipient, data)
            result.results.append(outcome)
            if outcome.success:
                result.sent += 1
            else:
                result.failed += 1

        logger.info(
            "campaign_finished",
            extra={
                "template_name": template.name,
                "sent": result.sent,
                "failed": result.failed,
            },
        )
        return result

    async def send_one(
        self,
        template: Template,
        recipient: str,
        data: TemplateDataSource | None,
    ) -> RecipientResult:
        """Envia o template para um destinatário, convertendo falha em resultado."""
        payload = self._builder.build_full_payload(template, recipient, data)
        try:
            response = await self._client.send_message(payload)
        except ProviderRequestError as exc:
            logger.warning(
                "campaign_send_failed",
                extra={
                    "template_name": template.name,
                    "recipient": mask_phone(recipient),
                    "error_type": type(exc).__name__,
                },
            )
            return RecipientResult(
                recipient=recipient,
                success=False,
                message="Failed to send message. Please try again.",
                error_code="PROVIDER_ERROR",
            )

        return RecipientResult(
            recipient=recipient,
            success=True,
            message=f"Successfully sent message to {recipient}",
            response=response,
        )
