"""Builders de payload para a API de mensagens do provedor (Unifonic).

Um builder por tipo de componente; template.py compõe o array
`components` e factory.py monta o payload completo.
"""

from api.payload_builders.unifonic.factory import (
    UnifonicPayloadBuilder,
    build_base_payload,
    build_full_payload,
)
from api.payload_builders.unifonic.template import TemplatePayloadBuilder

__all__ = [
    "TemplatePayloadBuilder",
    "UnifonicPayloadBuilder",
    "build_base_payload",
    "build_full_payload",
]
