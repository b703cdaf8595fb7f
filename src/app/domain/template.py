"""Template WhatsApp aprovado pelo provedor, como vem do catálogo JSON.

Os componentes seguem a estrutura da Meta: HEADER, BODY, FOOTER, BUTTONS e
CAROUSEL (cards com componentes próprios). Campos desconhecidos do
catálogo são ignorados.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.constants.templates import ComponentType, TemplateStatus

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\d+)\}\}")


class TemplateExample(BaseModel):
    """Valores de exemplo enviados na aprovação do template."""

    model_config = ConfigDict(extra="ignore")

    header_text: list[str] = Field(default_factory=list)
    header_handle: list[str] = Field(default_factory=list)
    body_text: list[list[str]] = Field(default_factory=list)

    @property
    def body_values(self) -> list[str]:
        """Primeira linha de exemplos do body (uma entrada por placeholder)."""
        return self.body_text[0] if self.body_text else []


class TemplateButton(BaseModel):
    """Botão de template (URL, PHONE_NUMBER ou QUICK_REPLY)."""

    model_config = ConfigDict(extra="ignore")

    type: str
    text: str = ""
    url: str | None = None
    phone_number: str | None = None
    example: list[str] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def _upper_type(cls, value: str) -> str:
        return value.upper()

    @property
    def has_dynamic_url(self) -> bool:
        """True se a URL do botão tem sufixo variável ({{1}})."""
        return bool(self.url and PLACEHOLDER_PATTERN.search(self.url))


class LimitedTimeOffer(BaseModel):
    """Oferta por tempo limitado (templates de marketing)."""

    model_config = ConfigDict(extra="ignore")

    text: str
    has_expiration: bool = False


class TemplateComponent(BaseModel):
    """Seção estrutural de um template."""

    model_config = ConfigDict(extra="ignore")

    type: str
    format: str | None = None
    text: str | None = None
    example: TemplateExample | None = None
    buttons: list[TemplateButton] = Field(default_factory=list)
    cards: list[TemplateCard] = Field(default_factory=list)
    limited_time_offer: LimitedTimeOffer | None = None

    @field_validator("type")
    @classmethod
    def _upper_type(cls, value: str) -> str:
        return value.upper()

    @field_validator("format")
    @classmethod
    def _upper_format(cls, value: str | None) -> str | None:
        return value.upper() if value else value

    def placeholders(self) -> list[str]:
        """Índices de placeholder na ordem em que aparecem no texto."""
        if not self.text:
            return []
        return PLACEHOLDER_PATTERN.findall(self.text)


class TemplateCard(BaseModel):
    """Card de carrossel: lista própria de componentes."""

    model_config = ConfigDict(extra="ignore")

    components: list[TemplateComponent] = Field(default_factory=list)

    def find_component(self, component_type: ComponentType) -> TemplateComponent | None:
        return next((c for c in self.components if c.type == component_type), None)


class Template(BaseModel):
    """Template de mensagem aprovado no provedor."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    language: str = ""
    category: str = ""
    status: str = ""
    components: list[TemplateComponent] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # IDs do provedor chegam como número em exports antigos
        return str(value) if isinstance(value, int) else value

    @property
    def is_approved(self) -> bool:
        """Comparação exata: qualquer outro status é tratado como não aprovado."""
        return self.status == TemplateStatus.APPROVED

    def find_component(self, component_type: ComponentType) -> TemplateComponent | None:
        """Retorna o primeiro componente do tipo informado."""
        return next((c for c in self.components if c.type == component_type), None)


TemplateComponent.model_rebuild()
