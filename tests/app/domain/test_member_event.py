"""Testes do evento de membro e da conversão para TemplateDataSource."""

from __future__ import annotations

from app.domain.member_event import MemberEvent


def _event(**data: object) -> MemberEvent:
    return MemberEvent.model_validate(
        {
            "EventType": "PointsEarned",
            "Data": data,
            "Membership": {"PhoneNumber": "+971500000001", "FirstName": "Alok", "Tier": "Gold"},
        }
    )


def test_aliases_and_properties() -> None:
    event = _event(templateName="mj_demo_123")

    assert event.template_name == "mj_demo_123"
    assert event.phone_number == "+971500000001"
    assert event.membership.first_name == "Alok"


def test_missing_sections_default_to_empty() -> None:
    event = MemberEvent.model_validate({})

    assert event.template_name is None
    assert event.phone_number is None
    assert event.to_data_source().body == {}


def test_positional_keys_become_header_and_body() -> None:
    event = _event(
        templateName="mj_demo_123",
        header_text2="second",
        body_text1="Alok",
        body_text2=1500,
        body_text3="",
    )

    data = event.to_data_source()

    assert data.header_text == ["", "second"]
    assert data.body == {"1": "Alok", "2": "1500"}
    assert data.location is None


def test_media_and_location_fields() -> None:
    event = _event(
        image_url="https://cdn.example.com/a.jpg",
        document_url="https://cdn.example.com/a.pdf",
        document_name="statement.pdf",
        latitude=25.19,
        longitude=55.27,
        address="Financial Centre Rd",
        location_name="Dubai Mall",
    )

    data = event.to_data_source()

    assert data.header_image_url == "https://cdn.example.com/a.jpg"
    assert data.header_document_filename == "statement.pdf"
    assert data.location is not None
    assert data.location.is_complete


def test_partial_location_is_kept_incomplete() -> None:
    data = _event(latitude=25.19).to_data_source()

    assert data.location is not None
    assert not data.location.is_complete
