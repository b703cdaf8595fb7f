"""Protocolos de validação de requisições outbound."""

from __future__ import annotations

from typing import Protocol

from utils.errors import ValidationError


class RecipientValidatorProtocol(Protocol):
    """Valida e normaliza destinatários; levanta ValidationError se inválidos."""

    def __call__(self, raw: str | list[str] | None) -> list[str]: ...


__all__ = ["RecipientValidatorProtocol", "ValidationError"]
