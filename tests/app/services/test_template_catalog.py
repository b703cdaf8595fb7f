"""Testes de seleção e filtros do catálogo de templates."""

from __future__ import annotations

from app.constants.templates import FILTER_ALL
from app.domain.template import Template
from app.services.template_catalog import (
    approved_templates,
    available_filters,
    filter_templates,
    find_template,
)


def test_approved_excludes_pending_and_rejected(catalog_templates) -> None:
    names = {t.name for t in approved_templates(catalog_templates)}

    assert "flash_sale_draft" not in names
    assert "old_welcome" not in names
    assert len(names) == 6


def test_approved_requires_exact_status() -> None:
    templates = [
        Template(id="1", name="exact", status="APPROVED"),
        Template(id="2", name="lower", status="approved"),
        Template(id="3", name="padded", status="APPROVED "),
    ]

    assert [t.name for t in approved_templates(templates)] == ["exact"]


def test_filter_by_category_and_language(catalog_templates) -> None:
    approved = approved_templates(catalog_templates)

    marketing_ar = filter_templates(approved, category="MARKETING", language="ar")

    assert [t.name for t in marketing_ar] == ["almiswak_test_carousel"]


def test_filter_all_or_empty_disables_filter(catalog_templates) -> None:
    approved = approved_templates(catalog_templates)

    assert filter_templates(approved, category=FILTER_ALL, language="") == approved
    assert filter_templates(approved) == approved


def test_available_filters_start_with_all(catalog_templates) -> None:
    filters = available_filters(approved_templates(catalog_templates))

    assert filters.categories == [FILTER_ALL, "MARKETING", "UTILITY"]
    assert filters.languages == [FILTER_ALL, "en", "ar"]


def test_find_template_by_id_then_name(catalog_templates) -> None:
    assert find_template(catalog_templates, "1012837465920003").name == "mj_demo_123"
    assert find_template(catalog_templates, "monthly_statement").id == "1012837465920006"
    assert find_template(catalog_templates, "nope") is None
