"""Dados que preenchem os placeholders de um template no envio.

TemplateDataSource é o contrato único entre as origens de dados (formulário
de campanha, evento de membro) e o formatter de payload. Campos são
nomeados e opcionais; chaves desconhecidas são rejeitadas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from app.constants.templates import ComponentType, HeaderFormat

if TYPE_CHECKING:
    from app.domain.template import Template


class TemplateVariable(BaseModel):
    """Slot de variável de um template ({{N}}) com valor preenchido."""

    name: str
    value: str = ""
    placeholder: str = ""


class LocationData(BaseModel):
    """Localização para header LOCATION; os quatro campos são obrigatórios no envio."""

    model_config = ConfigDict(extra="forbid")

    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    name: str | None = None

    @property
    def is_complete(self) -> bool:
        return (
            self.latitude is not None
            and self.longitude is not None
            and bool(self.address)
            and bool(self.name)
        )


class TemplateDataSource(BaseModel):
    """Valores de envio que sobrescrevem os exemplos do template.

    Attributes:
        header_text: Valores posicionais do header TEXT
        header_image_url: URL do header IMAGE
        header_document_url: URL do header DOCUMENT
        header_document_filename: Nome do arquivo exibido no header DOCUMENT
        location: Dados do header LOCATION
        body: Valores do body por índice de placeholder ("1", "2", ...)
        buttons: Valores de botão por índice do botão ("0", "1", ...)
        carousel_images: URL do header de cada card, na ordem dos cards
    """

    model_config = ConfigDict(extra="forbid")

    header_text: list[str] = Field(default_factory=list)
    header_image_url: str | None = None
    header_document_url: str | None = None
    header_document_filename: str | None = None
    location: LocationData | None = None
    body: dict[str, str] = Field(default_factory=dict)
    buttons: dict[str, str] = Field(default_factory=dict)
    carousel_images: list[str] = Field(default_factory=list)

    @classmethod
    def from_variables(
        cls,
        template: Template,
        variables: dict[str, str],
    ) -> TemplateDataSource:
        """Monta a origem de dados a partir das variáveis do formulário.

        As variáveis são únicas por template (mesmo {{1}} no header e no
        body recebe o mesmo valor), então o header TEXT reaproveita o mapa.
        """
        header_text: list[str] = []
        header = template.find_component(ComponentType.HEADER)
        if header is not None and header.format == HeaderFormat.TEXT:
            header_text = [variables.get(name, "") for name in header.placeholders()]

        return cls(
            header_text=header_text,
            body={name: value for name, value in variables.items() if value},
        )
