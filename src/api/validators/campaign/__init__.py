"""Validadores de requisições de campanha.

Uso:
    from api.validators.campaign import validate_recipients

    recipients = validate_recipients("+5511999999999, +971500000000")
"""

from api.validators.campaign.limits import MAX_RECIPIENTS_PER_CAMPAIGN, PHONE_PATTERN
from api.validators.campaign.recipients import (
    is_valid_phone,
    parse_recipients,
    validate_recipients,
)

__all__ = [
    "MAX_RECIPIENTS_PER_CAMPAIGN",
    "PHONE_PATTERN",
    "is_valid_phone",
    "parse_recipients",
    "validate_recipients",
]
