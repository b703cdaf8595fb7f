"""Enums de domínio para templates WhatsApp e payloads do provedor."""

from __future__ import annotations

from enum import StrEnum


class ComponentType(StrEnum):
    """Tipos de componente de um template (formato do catálogo)."""

    HEADER = "HEADER"
    BODY = "BODY"
    FOOTER = "FOOTER"
    BUTTONS = "BUTTONS"
    CAROUSEL = "CAROUSEL"


class HeaderFormat(StrEnum):
    """Formatos de header suportados."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    DOCUMENT = "DOCUMENT"
    LOCATION = "LOCATION"


class ButtonType(StrEnum):
    """Tipos de botão de template."""

    URL = "URL"
    PHONE_NUMBER = "PHONE_NUMBER"
    QUICK_REPLY = "QUICK_REPLY"


class TemplateStatus(StrEnum):
    """Status de aprovação de template."""

    APPROVED = "APPROVED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"


class ParameterType(StrEnum):
    """Tipos de parâmetro aceitos pelo endpoint de envio do provedor."""

    TEXT = "text"
    IMAGE = "image"
    FILE = "file"
    LOCATION = "location"


class OptionSubType(StrEnum):
    """Subtipos de parâmetro em componentes `options` (botões)."""

    QUICK_REPLY = "quickReply"
    URL = "url"


# Canal fixo do payload de envio
WHATSAPP_CHANNEL = "whatsapp"

# Valor de filtro que desativa a filtragem por categoria/idioma
FILTER_ALL = "ALL"
