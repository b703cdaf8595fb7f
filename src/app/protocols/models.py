"""Contratos de entrada/saída dos casos de uso de campanha."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.template_data import TemplateDataSource


class CampaignRequest(BaseModel):
    """Disparo de um template para uma lista de destinatários."""

    model_config = ConfigDict(extra="forbid")

    template_id: str = Field(..., min_length=1)
    recipients: list[str] | str
    variables: dict[str, str] = Field(default_factory=dict)
    data: TemplateDataSource | None = None


class RecipientResult(BaseModel):
    """Resultado do envio para um destinatário."""

    recipient: str
    success: bool
    message: str
    error_code: str | None = None
    response: dict[str, Any] | None = None


class CampaignResult(BaseModel):
    """Resultado agregado de uma campanha."""

    template_id: str
    template_name: str
    sent: int = 0
    failed: int = 0
    results: list[RecipientResult] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0 and self.sent > 0
