"""Catálogo estático de templates (arquivo JSON)."""

from app.infra.templates.json_template_store import JsonTemplateStore

__all__ = ["JsonTemplateStore"]
