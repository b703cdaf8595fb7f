"""Exceções de domínio do serviço de campanhas."""

from __future__ import annotations


class CampaignError(Exception):
    """Base para erros de domínio tratados nas rotas."""


class MissingTemplateError(CampaignError):
    """Template não informado ou inexistente no catálogo."""

    def __init__(self, template_key: str | None = None) -> None:
        if template_key:
            message = f"Template não encontrado: {template_key}"
        else:
            message = "Template não informado"
        super().__init__(message)
        self.template_key = template_key


class TemplateStoreError(CampaignError):
    """Catálogo de templates ausente ou malformado."""


class ValidationError(CampaignError):
    """Request inválido (headers, campos de body ou destinatários)."""


class ProviderRequestError(CampaignError):
    """Falha de chamada ao provedor de mensageria (rede, status ou corpo)."""
