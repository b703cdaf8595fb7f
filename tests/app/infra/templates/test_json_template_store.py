"""Testes do store de templates em arquivo JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from app.infra.templates import JsonTemplateStore
from utils.errors import TemplateStoreError


def test_loads_bundled_catalog(catalog_path: Path) -> None:
    templates = JsonTemplateStore(catalog_path).list_templates()

    assert len(templates) == 8
    assert templates[0].name == "sandbox_image_message"


def test_rereads_file_on_each_call(tmp_path: Path) -> None:
    path = tmp_path / "templates.json"
    path.write_text(json.dumps([{"id": "1", "name": "a"}]), encoding="utf-8")
    store = JsonTemplateStore(path)
    assert [t.name for t in store.list_templates()] == ["a"]

    updated = [{"id": "1", "name": "a"}, {"id": 2, "name": "b"}]
    path.write_text(json.dumps(updated), encoding="utf-8")

    assert [t.id for t in store.list_templates()] == ["1", "2"]


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"id": "1"}), json.dumps([{"id": "1"}])],
    ids=["invalid_json", "not_a_list", "missing_name"],
)
def test_malformed_catalog_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "templates.json"
    path.write_text(content, encoding="utf-8")
    store = JsonTemplateStore(path)

    with pytest.raises(TemplateStoreError):
        store.list_templates()
    assert not store.is_readable()


def test_missing_file_raises(tmp_path: Path) -> None:
    store = JsonTemplateStore(tmp_path / "absent.json")

    with pytest.raises(TemplateStoreError, match="não encontrado"):
        store.list_templates()


def test_non_utf8_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "templates.json"
    path.write_bytes(b"[\xff]")
    store = JsonTemplateStore(path)

    with pytest.raises(TemplateStoreError, match="JSON inválido"):
        store.list_templates()
    assert not store.is_readable()


def test_directory_path_raises(tmp_path: Path) -> None:
    store = JsonTemplateStore(tmp_path)

    with pytest.raises(TemplateStoreError, match="ilegível"):
        store.list_templates()
    assert not store.is_readable()
