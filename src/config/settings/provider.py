"""Settings do provedor de mensageria (Unifonic).

Credenciais e endpoints da API REST usada para enviar templates WhatsApp.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

PROVIDER_API_BASE_URL: str = "https://apis.unifonic.com"
MESSAGES_PATH: str = "/v1/messages"
MESSAGE_TEMPLATES_PATH: str = "/v1/whatsapp/message_templates"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class ProviderSettings:
    """Configurações do provedor de mensageria.

    Attributes:
        public_id: Credencial enviada no header `Publicid`
        secret_key: Credencial enviada no header `Secret`
        api_base_url: URL base da API REST
        request_timeout_seconds: Timeout das requisições HTTP
        default_language: Idioma usado quando o template não informa um
        invalid_env: Variáveis de ambiente com valor não numérico (ignoradas
            no load e reportadas por validate)
    """

    public_id: str = ""
    secret_key: str = ""

    api_base_url: str = PROVIDER_API_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    default_language: str = "en"
    invalid_env: tuple[str, ...] = ()

    @property
    def messages_endpoint(self) -> str:
        """URL de envio de mensagens."""
        return f"{self.api_base_url.rstrip('/')}{MESSAGES_PATH}"

    @property
    def message_templates_endpoint(self) -> str:
        """URL de consulta de templates WhatsApp no provedor."""
        return f"{self.api_base_url.rstrip('/')}{MESSAGE_TEMPLATES_PATH}"

    @property
    def auth_headers(self) -> dict[str, str]:
        """Headers estáticos de autenticação do provedor."""
        return {
            "Publicid": self.public_id,
            "Secret": self.secret_key,
        }

    def validate(self) -> list[str]:
        """Valida configurações mínimas do provedor.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_id:
            errors.append("API_PUBLIC_ID não configurado")

        if not self.secret_key:
            errors.append("API_SECRET_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("PROVIDER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        errors.extend(f"{name} deve ser numérico" for name in self.invalid_env)

        return errors


def _load_from_env() -> ProviderSettings:
    """Carrega ProviderSettings a partir de variáveis de ambiente.

    Timeout não numérico cai no padrão e fica registrado em invalid_env.
    """
    invalid_env: list[str] = []
    raw_timeout = os.getenv("PROVIDER_REQUEST_TIMEOUT_SECONDS", "")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT_SECONDS
    except ValueError:
        timeout = DEFAULT_REQUEST_TIMEOUT_SECONDS
        invalid_env.append("PROVIDER_REQUEST_TIMEOUT_SECONDS")

    return ProviderSettings(
        public_id=os.getenv("API_PUBLIC_ID", ""),
        secret_key=os.getenv("API_SECRET_KEY", ""),
        api_base_url=os.getenv("PROVIDER_API_BASE_URL", PROVIDER_API_BASE_URL),
        request_timeout_seconds=timeout,
        default_language=os.getenv("PROVIDER_DEFAULT_LANGUAGE", "en"),
        invalid_env=tuple(invalid_env),
    )


@lru_cache(maxsize=1)
def get_provider_settings() -> ProviderSettings:
    """Retorna instância cacheada de ProviderSettings."""
    return _load_from_env()
