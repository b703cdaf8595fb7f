"""Builder do componente header por formato (TEXT, IMAGE, DOCUMENT, LOCATION)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.templates import HeaderFormat, ParameterType

if TYPE_CHECKING:
    from app.domain.template import TemplateComponent
    from app.domain.template_data import TemplateDataSource


def _first_handle(component: TemplateComponent) -> str | None:
    if component.example and component.example.header_handle:
        return component.example.header_handle[0]
    return None


def _text_parameters(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> list[dict[str, Any]]:
    """Um parâmetro por placeholder declarado no texto do header.

    O valor vem dos dados (posicional) ou do exemplo do template. Header
    estático não recebe parâmetros; slot sem valor descarta o header inteiro
    para não deslocar valores entre placeholders.
    """
    examples = component.example.header_text if component.example else []
    if component.text is not None:
        slots = len(dict.fromkeys(component.placeholders()))
    else:
        slots = len(examples)

    parameters: list[dict[str, Any]] = []
    for index in range(slots):
        override = data.header_text[index] if index < len(data.header_text) else ""
        example = examples[index] if index < len(examples) else ""
        value = override or example
        if not value:
            return []
        parameters.append({"type": ParameterType.TEXT.value, "text": value})
    return parameters


def _image_parameters(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> list[dict[str, Any]]:
    url = data.header_image_url or _first_handle(component)
    if not url:
        return []
    return [{"type": ParameterType.IMAGE.value, "url": url}]


def _document_parameters(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> list[dict[str, Any]]:
    url = data.header_document_url or _first_handle(component)
    if not url:
        return []
    parameter: dict[str, Any] = {"type": ParameterType.FILE.value, "url": url}
    if data.header_document_filename:
        parameter["fileName"] = data.header_document_filename
    return [parameter]


def _location_parameters(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> list[dict[str, Any]]:
    location = data.location
    if location is None or not location.is_complete:
        return []
    return [
        {
            "type": ParameterType.LOCATION.value,
            "location": {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "address": location.address,
                "name": location.name,
            },
        }
    ]


_HEADER_BUILDERS = {
    HeaderFormat.TEXT: _text_parameters,
    HeaderFormat.IMAGE: _image_parameters,
    HeaderFormat.DOCUMENT: _document_parameters,
    HeaderFormat.LOCATION: _location_parameters,
}


def build_header_component(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> dict[str, Any] | None:
    """Constrói o componente header do payload.

    Args:
        component: Componente HEADER do template
        data: Valores de envio

    Returns:
        Componente `{"type": "header", "parameters": [...]}` ou None quando
        o formato é desconhecido ou não há dados para os parâmetros
    """
    builder = _HEADER_BUILDERS.get(component.format or "")
    if builder is None:
        return None

    parameters = builder(component, data)
    if not parameters:
        return None

    return {"type": "header", "parameters": parameters}
