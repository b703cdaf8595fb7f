"""Protocolos e contratos do core da aplicação."""

from .http_client import MessagingHttpClientProtocol
from .models import CampaignRequest, CampaignResult, RecipientResult
from .payload_builder import PayloadBuilderProtocol
from .template_store import TemplateStoreProtocol
from .validator import RecipientValidatorProtocol, ValidationError

__all__ = [
    "CampaignRequest",
    "CampaignResult",
    "MessagingHttpClientProtocol",
    "PayloadBuilderProtocol",
    "RecipientResult",
    "RecipientValidatorProtocol",
    "TemplateStoreProtocol",
    "ValidationError",
]
