"""Preview renderizado de um template com as variáveis preenchidas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from app.constants.templates import ComponentType, HeaderFormat
from app.domain.template_data import TemplateVariable
from app.services.template_variables import (
    apply_values,
    extract_variables,
    format_template_preview,
    missing_variables,
)

if TYPE_CHECKING:
    from app.domain.template import Template


class PreviewButton(BaseModel):
    """Botão como exibido no preview."""

    type: str
    text: str


class TemplatePreview(BaseModel):
    """Resultado do preview de um template."""

    template_id: str
    template_name: str
    header_format: str | None = None
    header_text: str | None = None
    header_media_url: str | None = None
    body: str | None = None
    footer: str | None = None
    buttons: list[PreviewButton] = Field(default_factory=list)
    variables: list[TemplateVariable] = Field(default_factory=list)
    missing_variables: list[str] = Field(default_factory=list)


def render_template_preview(template: Template, values: dict[str, str]) -> TemplatePreview:
    """Monta o preview de header, body, footer e botões.

    Args:
        template: Template selecionado
        values: Valores por nome de variável ({"1": "Alok"})

    Returns:
        TemplatePreview com textos substituídos e variáveis pendentes
    """
    variables = apply_values(extract_variables(template.components), values)

    preview = TemplatePreview(
        template_id=template.id,
        template_name=template.name,
        variables=variables,
        missing_variables=missing_variables(variables),
    )

    header = template.find_component(ComponentType.HEADER)
    if header is not None:
        preview.header_format = header.format
        if header.format == HeaderFormat.TEXT and header.text:
            preview.header_text = format_template_preview(header.text, variables)
        elif header.format in (HeaderFormat.IMAGE, HeaderFormat.DOCUMENT) and header.example:
            preview.header_media_url = next(iter(header.example.header_handle), None)

    body = template.find_component(ComponentType.BODY)
    if body is not None and body.text:
        preview.body = format_template_preview(body.text, variables)

    footer = template.find_component(ComponentType.FOOTER)
    if footer is not None and footer.text:
        preview.footer = footer.text

    buttons = template.find_component(ComponentType.BUTTONS)
    if buttons is not None:
        preview.buttons = [
            PreviewButton(type=button.type, text=button.text) for button in buttons.buttons
        ]

    return preview
