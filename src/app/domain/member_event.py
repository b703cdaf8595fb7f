"""Evento do programa de fidelidade que dispara um template para o membro.

O payload recebido é grande e pouco tipado; aqui só os campos usados no
envio são nomeados. Demais chaves são ignoradas. Valores de header e body
chegam como `header_textN` / `body_textN` (N a partir de 1) dentro de
`Data`.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from app.domain.template_data import LocationData, TemplateDataSource

_HEADER_KEY = re.compile(r"^header_text(\d+)$")
_BODY_KEY = re.compile(r"^body_text(\d+)$")


class Membership(BaseModel):
    """Dados do membro (somente o necessário para endereçar o envio)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    phone_number: str | None = Field(None, alias="PhoneNumber")
    first_name: str | None = Field(None, alias="FirstName")
    last_name: str | None = Field(None, alias="LastName")
    member_id: str | None = Field(None, alias="MemberId")


class MemberEventData(BaseModel):
    """Seção `Data` do evento: template e valores posicionais."""

    # extra="allow" mantém header_textN/body_textN para leitura posicional
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    template_name: str | None = Field(None, alias="templateName")
    language: str | None = None
    image_url: str | None = None
    document_url: str | None = None
    document_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    location_name: str | None = None

    def positional_values(self, pattern: re.Pattern[str]) -> dict[int, str]:
        """Extrai chaves numeradas (ex: header_text2) como {2: valor}."""
        values: dict[int, str] = {}
        for key, value in (self.model_extra or {}).items():
            match = pattern.match(key)
            if match and value not in (None, ""):
                values[int(match.group(1))] = str(value)
        return values


class MemberEvent(BaseModel):
    """Evento de membro recebido em /api/member-events."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    data: MemberEventData = Field(default_factory=MemberEventData, alias="Data")
    membership: Membership = Field(default_factory=Membership, alias="Membership")

    @property
    def template_name(self) -> str | None:
        return self.data.template_name

    @property
    def phone_number(self) -> str | None:
        return self.membership.phone_number

    def to_data_source(self) -> TemplateDataSource:
        """Converte o evento no contrato único do formatter.

        header_textN vira header_text[N-1]; lacunas recebem string vazia
        para o formatter cair no exemplo do template.
        """
        header_values = self.data.positional_values(_HEADER_KEY)
        header_text = [
            header_values.get(index, "")
            for index in range(1, max(header_values, default=0) + 1)
        ]
        body = {
            str(index): value
            for index, value in self.data.positional_values(_BODY_KEY).items()
        }

        location = None
        if any(
            value is not None
            for value in (
                self.data.latitude,
                self.data.longitude,
                self.data.address,
                self.data.location_name,
            )
        ):
            location = LocationData(
                latitude=self.data.latitude,
                longitude=self.data.longitude,
                address=self.data.address,
                name=self.data.location_name,
            )

        return TemplateDataSource(
            header_text=header_text,
            header_image_url=self.data.image_url,
            header_document_url=self.data.document_url,
            header_document_filename=self.data.document_name,
            location=location,
            body=body,
        )
