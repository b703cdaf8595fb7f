"""Filters de logging: injeção de contexto e mascaramento de telefone."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Dígitos finais preservados ao mascarar telefones
_VISIBLE_PHONE_DIGITS = 4


def mask_phone(phone: str | None) -> str:
    """Mascara número de telefone para uso em logs.

    >>> mask_phone("+5511999998888")
    '**********8888'
    """
    if not phone:
        return ""
    visible = phone[-_VISIBLE_PHONE_DIGITS:]
    return "*" * max(len(phone) - _VISIBLE_PHONE_DIGITS, 0) + visible


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem getter, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; correlation_id passado via `extra` é preservado."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
