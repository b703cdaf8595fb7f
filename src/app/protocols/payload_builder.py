"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.template import Template
    from app.domain.template_data import TemplateDataSource


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o payload de envio de um template."""

    def build_full_payload(
        self,
        template: Template | None,
        recipient: str,
        data: TemplateDataSource | None = None,
    ) -> dict[str, Any]: ...
