"""Seleção de templates aprovados: filtros por categoria e idioma."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from app.constants.templates import FILTER_ALL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.template import Template


class TemplateFilters(BaseModel):
    """Opções de filtro disponíveis, sempre iniciando por ALL."""

    categories: list[str]
    languages: list[str]


def approved_templates(templates: Iterable[Template]) -> list[Template]:
    """Mantém somente templates com status exatamente APPROVED."""
    return [template for template in templates if template.is_approved]


def _matches(value: str, selected: str | None) -> bool:
    return not selected or selected == FILTER_ALL or value == selected


def filter_templates(
    templates: Iterable[Template],
    category: str | None = None,
    language: str | None = None,
) -> list[Template]:
    """Filtra por categoria e idioma; vazio ou ALL desativa o filtro."""
    return [
        template
        for template in templates
        if _matches(template.category, category) and _matches(template.language, language)
    ]


def available_filters(templates: Iterable[Template]) -> TemplateFilters:
    """Categorias e idiomas distintos, na ordem em que aparecem."""
    categories: dict[str, None] = {}
    languages: dict[str, None] = {}
    for template in templates:
        categories.setdefault(template.category, None)
        languages.setdefault(template.language, None)
    return TemplateFilters(
        categories=[FILTER_ALL, *categories],
        languages=[FILTER_ALL, *languages],
    )


def find_template(templates: Iterable[Template], key: str) -> Template | None:
    """Busca por id e, na falta, por nome."""
    candidates = list(templates)
    by_id = next((t for t in candidates if t.id == key), None)
    if by_id is not None:
        return by_id
    return next((t for t in candidates if t.name == key), None)
