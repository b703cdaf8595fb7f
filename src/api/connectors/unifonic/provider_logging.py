"""Helpers de logging para a API do provedor (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .provider_errors import ProviderApiError

logger = logging.getLogger(__name__)


def log_provider_error(
    provider_error: ProviderApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga erro do provedor sem expor credenciais ou telefones."""
    logger.warning(
        "provider_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": provider_error.status_code,
            "error_code": provider_error.error_code,
            "is_auth_error": provider_error.is_auth_error,
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "provider_api_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
