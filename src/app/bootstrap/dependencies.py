"""Factories de dependências — implementações concretas dos protocolos.

As rotas obtêm dependências por estas funções; testes substituem via
monkeypatch no módulo da rota.
"""

from __future__ import annotations

from api.connectors.unifonic import UnifonicHttpClient, create_unifonic_http_client
from api.payload_builders.unifonic import UnifonicPayloadBuilder
from api.validators.campaign import validate_recipients
from app.infra.templates import JsonTemplateStore
from app.use_cases.campaigns import SendCampaignUseCase, SendMemberEventUseCase
from config.settings import get_base_settings, get_provider_settings


def create_template_store() -> JsonTemplateStore:
    """Store do catálogo configurado em TEMPLATES_FILE."""
    return JsonTemplateStore(get_base_settings().templates_file)


def create_provider_client() -> UnifonicHttpClient:
    """Cliente HTTP do provedor com as credenciais do ambiente."""
    return create_unifonic_http_client(get_provider_settings())


def create_send_campaign_use_case() -> SendCampaignUseCase:
    """Use case de campanha com store, builder, cliente e validator reais."""
    return SendCampaignUseCase(
        template_store=create_template_store(),
        builder=UnifonicPayloadBuilder(get_provider_settings().default_language),
        client=create_provider_client(),
        recipient_validator=validate_recipients,
    )


def create_send_member_event_use_case() -> SendMemberEventUseCase:
    """Use case de evento de membro, reaproveitando o de campanha."""
    return SendMemberEventUseCase(create_send_campaign_use_case())
