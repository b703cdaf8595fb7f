"""Validação de destinatários de campanha."""

from __future__ import annotations

from api.validators.campaign.limits import MAX_RECIPIENTS_PER_CAMPAIGN, PHONE_PATTERN
from utils.errors import ValidationError


def parse_recipients(raw: str | list[str] | None) -> list[str]:
    """Normaliza destinatários (lista ou string separada por vírgula).

    Espaços são removidos e entradas vazias descartadas.
    """
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    return [item.strip() for item in items if item and item.strip()]


def is_valid_phone(phone: str) -> bool:
    """True se o telefone casa com o formato internacional aceito."""
    return bool(PHONE_PATTERN.match(phone))


def validate_recipients(raw: str | list[str] | None) -> list[str]:
    """Valida os destinatários antes de qualquer chamada de rede.

    Args:
        raw: Destinatários informados no formulário

    Returns:
        Lista normalizada de telefones

    Raises:
        ValidationError: Lista vazia, acima do limite ou com telefone inválido
    """
    recipients = parse_recipients(raw)
    if not recipients:
        raise ValidationError("No recipients entered")

    if len(recipients) > MAX_RECIPIENTS_PER_CAMPAIGN:
        raise ValidationError(
            f"recipients exceeds maximum of {MAX_RECIPIENTS_PER_CAMPAIGN} numbers"
        )

    if any(not is_valid_phone(recipient) for recipient in recipients):
        raise ValidationError("Invalid phone numbers entered")

    return recipients
