"""Settings base do serviço de campanhas.

Configurações comuns: ambiente, identificação do serviço, logging e a
origem do catálogo estático de templates.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

Environment = Literal["development", "staging", "production"]

# Catálogo de templates distribuído junto com o pacote config
DEFAULT_TEMPLATES_FILE = Path(__file__).resolve().parents[2] / "data" / "templates.json"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível de log do root logger
        templates_file: Caminho do JSON com as definições de template
    """

    environment: Environment = "development"
    service_name: str = "campanhas-whatsapp"
    debug: bool = False
    log_level: str = "INFO"
    templates_file: Path = DEFAULT_TEMPLATES_FILE

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in {"development", "staging", "production"}:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.templates_file.is_file():
            errors.append(f"TEMPLATES_FILE não encontrado: {self.templates_file}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    templates_file = os.getenv("TEMPLATES_FILE", "")
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "campanhas-whatsapp"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        templates_file=Path(templates_file) if templates_file else DEFAULT_TEMPLATES_FILE,
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
