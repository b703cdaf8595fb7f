"""Builder do componente body."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.templates import ParameterType

if TYPE_CHECKING:
    from app.domain.template import TemplateComponent
    from app.domain.template_data import TemplateDataSource


def build_body_component(
    component: TemplateComponent,
    data: TemplateDataSource,
) -> dict[str, Any] | None:
    """Constrói o componente body a partir do array de exemplo do template.

    Cada entrada de example.body_text[0] vira um parâmetro de texto; o valor
    é sobrescrito por data.body["N"] (N = posição + 1) quando preenchido.
    Sem array de exemplo, não há componente body.

    Args:
        component: Componente BODY do template
        data: Valores de envio

    Returns:
        Componente body ou None
    """
    examples = component.example.body_values if component.example else []
    if not examples:
        return None

    parameters = [
        {
            "type": ParameterType.TEXT.value,
            "text": data.body.get(str(index), "") or example,
        }
        for index, example in enumerate(examples, start=1)
    ]
    return {"type": "body", "parameters": parameters}
