"""Configuração do pytest para o serviço de campanhas WhatsApp."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

CATALOG_PATH = src_path / "config" / "data" / "templates.json"


@pytest.fixture
def catalog_path() -> Path:
    """Catálogo de templates distribuído com o serviço."""
    return CATALOG_PATH


@pytest.fixture
def catalog_templates(catalog_path: Path) -> list:
    from app.infra.templates import JsonTemplateStore

    return JsonTemplateStore(catalog_path).list_templates()


@pytest.fixture
def template_by_name(catalog_templates: list):
    """Busca um template do catálogo pelo nome."""

    def _find(name: str):
        return next(t for t in catalog_templates if t.name == name)

    return _find
