"""Testes da validação de destinatários de campanha."""

from __future__ import annotations

import pytest

from api.validators.campaign import (
    MAX_RECIPIENTS_PER_CAMPAIGN,
    is_valid_phone,
    parse_recipients,
    validate_recipients,
)
from utils.errors import ValidationError


def test_parse_comma_separated_string() -> None:
    assert parse_recipients(" +971500000001 ,, 971500000002,") == [
        "+971500000001",
        "971500000002",
    ]


def test_parse_list_drops_blank_entries() -> None:
    assert parse_recipients(["+971500000001", " ", ""]) == ["+971500000001"]
    assert parse_recipients(None) == []


@pytest.mark.parametrize(
    ("phone", "expected"),
    [
        ("+971500000001", True),
        ("5511999998888", True),
        ("12345", False),
        ("+97150000000123456", False),
        ("+9715-0000-0001", False),
    ],
)
def test_is_valid_phone(phone: str, expected: bool) -> None:
    assert is_valid_phone(phone) is expected


def test_validate_rejects_empty() -> None:
    with pytest.raises(ValidationError, match="No recipients entered"):
        validate_recipients(" , ")


def test_validate_rejects_invalid_phone() -> None:
    with pytest.raises(ValidationError, match="Invalid phone numbers entered"):
        validate_recipients("+971500000001, not-a-phone")


def test_validate_rejects_above_limit() -> None:
    recipients = [f"+9715{index:08d}" for index in range(MAX_RECIPIENTS_PER_CAMPAIGN + 1)]

    with pytest.raises(ValidationError, match="exceeds maximum"):
        validate_recipients(recipients)


def test_validate_returns_normalized_list() -> None:
    assert validate_recipients("+971500000001,+971500000002") == [
        "+971500000001",
        "+971500000002",
    ]
