"""Use case de envio disparado por evento do programa de fidelidade."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.member_event import MemberEvent
    from app.protocols.models import RecipientResult
    from app.use_cases.campaigns.send_campaign import SendCampaignUseCase

logger = logging.getLogger(__name__)


class SendMemberEventUseCase:
    """Envia ao membro o template indicado no evento.

    O telefone vem de Membership.PhoneNumber e os valores de header/body das
    chaves posicionais do evento; campos ausentes caem nos exemplos.
    """

    def __init__(self, campaign: SendCampaignUseCase) -> None:
        self._campaign = campaign

    async def execute(
        self,
        event: MemberEvent,
        template_name: str | None = None,
    ) -> RecipientResult:
        """Executa o envio.

        Args:
            event: Evento validado
            template_name: Nome vindo de header HTTP, usado quando o evento
                não informa Data.templateName

        Raises:
            ValidationError: Template ou telefone ausente/inválido
            MissingTemplateError: Template inexistente ou não aprovado
        """
        name = event.template_name or template_name
        if not name:
            raise ValidationError("templateName is required")

        if not event.phone_number:
            raise ValidationError("Membership.PhoneNumber is required")

        recipients = self._campaign.validate_recipients([event.phone_number])
        template = self._campaign.resolve_template(name)

        logger.info(
            "member_event_received",
            extra={
                "template_name": template.name,
                "has_member_id": bool(event.membership.member_id),
            },
        )
        return await self._campaign.send_one(template, recipients[0], event.to_data_source())
