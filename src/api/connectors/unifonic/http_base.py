"""Cliente HTTP base para conectores da camada API.

Uma tentativa por chamada: o provedor não recebe retries automáticos
(um retry duplicaria o envio, já que não há chave de idempotência).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import ProviderRequestError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(ProviderRequestError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class HttpClient:
    """Cliente HTTP assíncrono simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        )

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {**self._config.default_headers, **(headers or {})}

    async def post(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; falhas de rede viram HttpError."""
        try:
            async with self._client() as client:
                return await client.post(url, json=json, headers=self._headers(headers))
        except httpx.HTTPError as exc:
            logger.warning(
                "http_request_failed",
                extra={"method": "POST", "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """GET com query params; falhas de rede viram HttpError."""
        try:
            async with self._client() as client:
                return await client.get(url, params=params, headers=self._headers(headers))
        except httpx.HTTPError as exc:
            logger.warning(
                "http_request_failed",
                extra={"method": "GET", "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc
