"""Testes do preview renderizado de templates."""

from __future__ import annotations

from app.services.template_preview import render_template_preview


def test_preview_body_with_values_and_placeholders(template_by_name) -> None:
    preview = render_template_preview(template_by_name("mj_demo_123"), {"1": "Maria"})

    assert preview.body == "Hi Maria, your loyalty balance is [1200] points."
    assert preview.missing_variables == ["2"]
    assert [b.type for b in preview.buttons] == ["URL", "PHONE_NUMBER"]


def test_preview_text_header(template_by_name) -> None:
    preview = render_template_preview(template_by_name("youss_textheader"), {"1": "Sara"})

    assert preview.header_format == "TEXT"
    assert preview.header_text == "Hello Sara"
    assert preview.missing_variables == []


def test_preview_media_header_and_footer(template_by_name) -> None:
    preview = render_template_preview(template_by_name("sandbox_image_message"), {})

    assert preview.header_format == "IMAGE"
    assert preview.header_media_url is not None
    assert preview.footer == "Reply STOP to unsubscribe"
    assert preview.variables == []
