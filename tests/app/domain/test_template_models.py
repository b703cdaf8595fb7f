"""Testes dos modelos de template e dados de envio."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.constants.templates import ComponentType
from app.domain.template import Template
from app.domain.template_data import LocationData, TemplateDataSource


def test_template_coerces_numeric_id_and_uppercases_types() -> None:
    template = Template.model_validate(
        {
            "id": 42,
            "name": "promo",
            "status": "APPROVED",
            "components": [
                {"type": "header", "format": "image"},
                {"type": "body", "text": "Hi {{1}}"},
            ],
            "unknown_field": "ignored",
        }
    )

    assert template.id == "42"
    assert template.is_approved
    header = template.find_component(ComponentType.HEADER)
    assert header is not None
    assert header.format == "IMAGE"
    assert template.find_component(ComponentType.FOOTER) is None


@pytest.mark.parametrize("status", ["approved", "PENDING", "REJECTED", ""])
def test_is_approved_is_exact_match(status: str) -> None:
    template = Template(id="1", name="t", status=status)
    assert not template.is_approved


def test_placeholders_in_text_order() -> None:
    template = Template.model_validate(
        {"id": "1", "name": "t", "components": [{"type": "BODY", "text": "{{2}} and {{1}}"}]}
    )
    body = template.find_component(ComponentType.BODY)
    assert body is not None
    assert body.placeholders() == ["2", "1"]


def test_carousel_cards_parse_nested_components(template_by_name) -> None:
    template = template_by_name("almiswak_test_carousel")
    carousel = template.find_component(ComponentType.CAROUSEL)

    assert carousel is not None
    assert len(carousel.cards) == 3
    assert carousel.cards[0].find_component(ComponentType.HEADER) is not None


def test_dynamic_url_button(template_by_name) -> None:
    buttons = template_by_name("mj_demo_123").find_component(ComponentType.BUTTONS)
    assert buttons is not None
    assert buttons.buttons[0].has_dynamic_url
    assert not buttons.buttons[1].has_dynamic_url


def test_data_source_rejects_unknown_keys() -> None:
    with pytest.raises(PydanticValidationError):
        TemplateDataSource.model_validate({"header_txt": ["typo"]})


def test_location_is_complete_requires_all_fields() -> None:
    assert LocationData(latitude=25.2, longitude=55.3, address="Dubai", name="Mall").is_complete
    assert not LocationData(latitude=25.2, address="Dubai", name="Mall").is_complete
    assert not LocationData(latitude=0.0, longitude=0.0, address="", name="x").is_complete


def test_from_variables_fills_text_header_and_body(template_by_name) -> None:
    template = template_by_name("youss_textheader")

    data = TemplateDataSource.from_variables(template, {"1": "Maria", "2": ""})

    assert data.header_text == ["Maria"]
    assert data.body == {"1": "Maria"}


def test_from_variables_without_text_header(template_by_name) -> None:
    data = TemplateDataSource.from_variables(template_by_name("mj_demo_123"), {"2": "500"})

    assert data.header_text == []
    assert data.body == {"2": "500"}
