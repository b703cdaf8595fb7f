"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="campanhas_whatsapp")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("template_request_built", extra={"template_name": "promo"})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message e asctime. Telefones e credenciais nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, mask_phone
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "mask_phone",
]
