"""Serviços de aplicação.

Unidades reutilizáveis sobre o catálogo de templates (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.template_catalog import (
    TemplateFilters,
    approved_templates,
    available_filters,
    filter_templates,
    find_template,
)
from app.services.template_preview import PreviewButton, TemplatePreview, render_template_preview
from app.services.template_variables import (
    apply_values,
    extract_variables,
    format_template_preview,
    missing_variables,
)

__all__ = [
    "PreviewButton",
    "TemplateFilters",
    "TemplatePreview",
    "apply_values",
    "approved_templates",
    "available_filters",
    "extract_variables",
    "filter_templates",
    "find_template",
    "format_template_preview",
    "missing_variables",
    "render_template_preview",
]
