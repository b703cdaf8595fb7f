"""Erros e helpers de parsing para a API do provedor (Unifonic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProviderApiError:
    """Erro retornado pela API do provedor."""

    status_code: int
    error_code: str
    error_message: str

    @property
    def is_auth_error(self) -> bool:
        """True para credenciais ausentes ou inválidas (Publicid/Secret)."""
        return self.status_code in (401, 403)


def parse_provider_error(status_code: int, response_data: Any) -> ProviderApiError | None:
    """Extrai informações de erro do response do provedor.

    Aceita tanto `{"error": {"code", "message"}}` quanto o formato plano
    `{"errorCode", "message"}`.

    Args:
        status_code: Status HTTP do response
        response_data: JSON do response (qualquer tipo)

    Returns:
        ProviderApiError se o status indicar erro, None se sucesso
    """
    if 200 <= status_code < 300:
        return None

    body = response_data if isinstance(response_data, dict) else {}
    error_obj = body.get("error")
    if isinstance(error_obj, dict):
        body = error_obj

    error_code = body.get("errorCode", body.get("code", "unknown"))
    error_message = body.get("message", "Erro desconhecido")

    return ProviderApiError(
        status_code=status_code,
        error_code=str(error_code),
        error_message=str(error_message),
    )
