"""Casos de uso de campanha (disparo em lote e por evento de membro)."""

from app.use_cases.campaigns.send_campaign import SendCampaignUseCase
from app.use_cases.campaigns.send_member_event import SendMemberEventUseCase

__all__ = [
    "SendCampaignUseCase",
    "SendMemberEventUseCase",
]
