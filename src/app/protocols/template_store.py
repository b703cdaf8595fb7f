"""Protocolo de leitura do catálogo de templates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.template import Template


class TemplateStoreProtocol(Protocol):
    """Contrato mínimo para listar templates (somente leitura)."""

    def list_templates(self) -> list[Template]: ...
