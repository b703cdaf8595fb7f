"""Agregador de settings do serviço de campanhas.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_TEMPLATES_FILE,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.provider import (
    MESSAGE_TEMPLATES_PATH,
    MESSAGES_PATH,
    PROVIDER_API_BASE_URL,
    ProviderSettings,
    get_provider_settings,
)

__all__ = [
    "DEFAULT_TEMPLATES_FILE",
    "MESSAGES_PATH",
    "MESSAGE_TEMPLATES_PATH",
    "PROVIDER_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "ProviderSettings",
    "get_base_settings",
    "get_provider_settings",
]
