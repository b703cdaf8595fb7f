"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CampaignError,
    MissingTemplateError,
    ProviderRequestError,
    TemplateStoreError,
    ValidationError,
)

__all__ = [
    "CampaignError",
    "MissingTemplateError",
    "ProviderRequestError",
    "TemplateStoreError",
    "ValidationError",
]
