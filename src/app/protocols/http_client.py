"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class MessagingHttpClientProtocol(Protocol):
    """Contrato mínimo para o cliente HTTP do provedor de mensageria."""

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]: ...

    async def get_message_templates(
        self,
        name: str | None = None,
        language: str | None = None,
    ) -> dict[str, Any]: ...
