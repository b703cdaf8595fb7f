"""Conector do provedor de mensageria (Unifonic REST API).

Único ponto de IO com o provedor: envio de mensagens de template e
consulta de templates cadastrados.
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import UnifonicHttpClient, create_unifonic_http_client
from .provider_errors import ProviderApiError, parse_provider_error

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "ProviderApiError",
    "UnifonicHttpClient",
    "create_unifonic_http_client",
    "parse_provider_error",
]
