"""Cliente HTTP especializado para a API REST do provedor (Unifonic).

Estende HttpClient genérico com:
- Headers estáticos de credencial (Publicid / Secret)
- Validação das credenciais antes de qualquer chamada
- Tratamento de erros do provedor (status + corpo)
- Logging estruturado sem PII (credenciais, telefones)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.unifonic.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.unifonic.provider_errors import parse_provider_error
from api.connectors.unifonic.provider_logging import log_provider_error, log_success

if TYPE_CHECKING:
    import httpx

    from config.settings import ProviderSettings

logger: logging.Logger = logging.getLogger(__name__)


class UnifonicHttpClient(HttpClient):
    """Cliente HTTP para envio de templates e consulta de templates no provedor."""

    def __init__(
        self,
        settings: ProviderSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Envia mensagem via POST /v1/messages.

        Args:
            payload: Corpo JSON da mensagem (recipient + content)

        Returns:
            Response JSON do provedor

        Raises:
            HttpError: Credenciais ausentes, falha de rede, status não-2xx
                ou response inválido
        """
        endpoint = self._settings.messages_endpoint
        headers = self._build_headers(endpoint)
        response = await self.post(endpoint, json=payload, headers=headers)
        return self._process_response(response, "POST", endpoint)

    async def get_message_templates(
        self,
        name: str | None = None,
        language: str | None = None,
    ) -> dict[str, Any]:
        """Consulta templates WhatsApp cadastrados no provedor.

        Args:
            name: Nome do template (opcional)
            language: Código de idioma (opcional)

        Returns:
            Response JSON do provedor
        """
        endpoint = self._settings.message_templates_endpoint
        headers = self._build_headers(endpoint)
        params = {
            key: value for key, value in (("name", name), ("language", language)) if value
        }
        response = await self.get(endpoint, params=params, headers=headers)
        return self._process_response(response, "GET", endpoint)

    def _build_headers(self, endpoint: str) -> dict[str, str]:
        """Monta headers de autenticação; credencial vazia falha antes do IO."""
        if not self._settings.public_id or not self._settings.secret_key:
            logger.error(
                "provider_credentials_missing",
                extra={"endpoint": endpoint},
            )
            raise HttpError(
                "Credenciais do provedor ausentes. "
                "Verifique API_PUBLIC_ID e API_SECRET_KEY.",
            )
        return {
            **self._settings.auth_headers,
            "Content-Type": "application/json",
        }

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
    ) -> dict[str, Any]:
        """Valida status e corpo do response do provedor."""
        try:
            response_data = response.json() if response.content else {}
        except ValueError as exc:
            # JSONDecodeError e UnicodeDecodeError (corpo fora de UTF-8)
            logger.error(
                "provider_invalid_json",
                extra={"endpoint": endpoint, "status_code": response.status_code},
            )
            raise HttpError("Response JSON inválido", status_code=response.status_code) from exc

        provider_error = parse_provider_error(response.status_code, response_data)
        if provider_error is not None:
            log_provider_error(provider_error, method, endpoint)
            raise HttpError(
                f"Provider API error: {provider_error.error_code} ({provider_error.status_code})",
                status_code=provider_error.status_code,
                response_data=response_data,
            )

        log_success(method, endpoint, response.status_code)
        if not isinstance(response_data, dict):
            return {"data": response_data}
        return response_data


def create_unifonic_http_client(
    settings: ProviderSettings | None = None,
) -> UnifonicHttpClient:
    """Factory para criar cliente do provedor com config padrão.

    Args:
        settings: ProviderSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_provider_settings

    return UnifonicHttpClient(settings=settings or get_provider_settings())
