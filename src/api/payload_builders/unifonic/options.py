"""Builders de botões (componente `options`) e carrossel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.templates import (
    ButtonType,
    ComponentType,
    HeaderFormat,
    OptionSubType,
    ParameterType,
)

if TYPE_CHECKING:
    from app.domain.template import TemplateButton, TemplateCard, TemplateComponent


def _button_parameter(
    button: TemplateButton,
    index: int,
    overrides: dict[str, str],
) -> dict[str, Any] | None:
    override = overrides.get(str(index), "")

    if button.type == ButtonType.QUICK_REPLY:
        value = override or button.text
        sub_type = OptionSubType.QUICK_REPLY
    elif button.type == ButtonType.URL and button.has_dynamic_url:
        value = override or next(iter(button.example), "")
        sub_type = OptionSubType.URL
    else:
        # PHONE_NUMBER e URL fixa não recebem parâmetros
        return None

    if not value:
        return None
    return {"value": value, "subType": sub_type.value, "index": index}


def build_buttons_component(
    component: TemplateComponent,
    overrides: dict[str, str],
) -> dict[str, Any] | None:
    """Constrói o componente `options` com os botões parametrizáveis.

    Args:
        component: Componente BUTTONS do template
        overrides: Valores por índice do botão ("0", "1", ...)

    Returns:
        Componente options ou None se nenhum botão recebe parâmetro
    """
    parameters = [
        parameter
        for index, button in enumerate(component.buttons)
        if (parameter := _button_parameter(button, index, overrides)) is not None
    ]
    if not parameters:
        return None
    return {"type": "options", "parameters": parameters}


def _card_components(card: TemplateCard, image_override: str | None) -> list[dict[str, Any]]:
    components: list[dict[str, Any]] = []

    header = card.find_component(ComponentType.HEADER)
    if header is not None and header.format == HeaderFormat.IMAGE:
        handles = header.example.header_handle if header.example else []
        url = image_override or next(iter(handles), "")
        if url:
            components.append(
                {
                    "type": "header",
                    "parameters": [{"type": ParameterType.IMAGE.value, "url": url}],
                }
            )

    buttons = card.find_component(ComponentType.BUTTONS)
    if buttons is not None:
        options = build_buttons_component(buttons, {})
        if options is not None:
            components.append(options)

    return components


def build_carousel_component(
    component: TemplateComponent,
    images: list[str],
) -> dict[str, Any] | None:
    """Constrói o componente carousel, um card por card do template.

    Args:
        component: Componente CAROUSEL do template
        images: URL do header de cada card (sobrescreve o exemplo)

    Returns:
        Componente carousel ou None se o template não tem cards
    """
    cards = []
    for index, card in enumerate(component.cards):
        image_override = images[index] if index < len(images) else None
        cards.append(
            {
                "cardIndex": index,
                "components": _card_components(card, image_override),
            }
        )

    if not cards:
        return None
    return {"type": "carousel", "cards": cards}
