"""Extração de variáveis e preview de texto de templates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.template import PLACEHOLDER_PATTERN
from app.domain.template_data import TemplateVariable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.template import TemplateComponent


def extract_variables(components: Iterable[TemplateComponent]) -> list[TemplateVariable]:
    """Extrai os slots {{N}} dos componentes com texto.

    O primeiro aparecimento de cada índice define a ordem e o placeholder.
    O placeholder vem do exemplo de body do próprio componente
    (body_text[0][N-1]) ou, sem exemplo, de um rótulo genérico.

    Args:
        components: Componentes do template, na ordem do template

    Returns:
        Variáveis únicas com value vazio
    """
    variables: list[TemplateVariable] = []
    seen: set[str] = set()

    for component in components:
        if not component.text:
            continue
        examples = component.example.body_values if component.example else []
        for name in PLACEHOLDER_PATTERN.findall(component.text):
            if name in seen:
                continue
            seen.add(name)
            index = int(name) - 1
            placeholder = examples[index] if 0 <= index < len(examples) else ""
            variables.append(
                TemplateVariable(
                    name=name,
                    value="",
                    placeholder=placeholder or f"Variable {name}",
                )
            )

    return variables


def format_template_preview(text: str, variables: Iterable[TemplateVariable]) -> str:
    """Substitui {{name}} pelo valor ou por `[placeholder]` quando vazio."""
    formatted = text
    for variable in variables:
        replacement = variable.value or f"[{variable.placeholder}]"
        formatted = formatted.replace("{{" + variable.name + "}}", replacement)
    return formatted


def apply_values(
    variables: Iterable[TemplateVariable],
    values: dict[str, str],
) -> list[TemplateVariable]:
    """Retorna cópias das variáveis com os valores informados aplicados."""
    return [
        variable.model_copy(update={"value": values.get(variable.name, variable.value)})
        for variable in variables
    ]


def missing_variables(variables: Iterable[TemplateVariable]) -> list[str]:
    """Nomes das variáveis ainda sem valor (ignorando espaços)."""
    return [variable.name for variable in variables if not variable.value.strip()]
