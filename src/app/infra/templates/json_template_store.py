"""Store de templates lido de um arquivo JSON estático.

O arquivo é relido a cada chamada: o catálogo é editado fora do serviço
e não há cache.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from app.domain.template import Template
from utils.errors import TemplateStoreError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class JsonTemplateStore:
    """Lê a lista de templates de um arquivo JSON (array de objetos)."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def list_templates(self) -> list[Template]:
        """Carrega todos os templates do arquivo.

        Raises:
            TemplateStoreError: Se o arquivo não existe, não pode ser lido,
                não é JSON válido ou não segue o formato de template.
        """
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            logger.error("template_store_missing", extra={"path": str(self._path)})
            raise TemplateStoreError(f"Arquivo de templates não encontrado: {self._path}") from exc
        except OSError as exc:
            logger.error(
                "template_store_unreadable",
                extra={"path": str(self._path), "error_type": type(exc).__name__},
            )
            raise TemplateStoreError(f"Arquivo de templates ilegível: {self._path}") from exc
        except ValueError as exc:
            # JSONDecodeError e UnicodeDecodeError
            logger.error("template_store_invalid_json", extra={"path": str(self._path)})
            raise TemplateStoreError("Arquivo de templates com JSON inválido") from exc

        if not isinstance(raw, list):
            raise TemplateStoreError("Arquivo de templates deve conter uma lista")

        try:
            templates = [Template.model_validate(item) for item in raw]
        except PydanticValidationError as exc:
            logger.error(
                "template_store_invalid_template",
                extra={"path": str(self._path), "error_count": exc.error_count()},
            )
            raise TemplateStoreError("Template malformado no catálogo") from exc

        logger.debug("template_store_loaded", extra={"template_count": len(templates)})
        return templates

    def is_readable(self) -> bool:
        """True se o arquivo existe e pode ser carregado."""
        try:
            self.list_templates()
        except TemplateStoreError:
            return False
        return True
