"""Builder de mensagens de template para o endpoint de envio do provedor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.unifonic.body import build_body_component
from api.payload_builders.unifonic.header import build_header_component
from api.payload_builders.unifonic.options import (
    build_buttons_component,
    build_carousel_component,
)
from app.constants.templates import ComponentType
from app.domain.template_data import TemplateDataSource

if TYPE_CHECKING:
    from app.domain.template import Template

logger = logging.getLogger(__name__)


class TemplatePayloadBuilder:
    """Converte template + dados de envio no array `components` do provedor.

    Um componente só entra no payload quando há exemplo ou dado para todos
    os seus parâmetros: o provedor rejeita placeholders declarados e não
    preenchidos. FOOTER nunca leva parâmetros.
    """

    def __init__(self, default_language: str = "en") -> None:
        self._default_language = default_language

    def build_components(
        self,
        template: Template,
        data: TemplateDataSource | None = None,
    ) -> list[dict[str, Any]]:
        """Constrói os componentes na ordem do template.

        Args:
            template: Template do catálogo
            data: Valores de envio; None usa apenas os exemplos

        Returns:
            Lista de componentes (header, body, options, carousel)
        """
        data = data or TemplateDataSource()
        components: list[dict[str, Any]] = []

        for component in template.components:
            built: dict[str, Any] | None = None
            if component.type == ComponentType.HEADER:
                built = build_header_component(component, data)
            elif component.type == ComponentType.BODY:
                built = build_body_component(component, data)
            elif component.type == ComponentType.BUTTONS:
                built = build_buttons_component(component, data.buttons)
            elif component.type == ComponentType.CAROUSEL:
                built = build_carousel_component(component, data.carousel_images)

            if built is None:
                if component.type != ComponentType.FOOTER:
                    logger.debug(
                        "template_component_skipped",
                        extra={"template_name": template.name, "component_type": component.type},
                    )
                continue
            components.append(built)

        return components

    def build(
        self,
        template: Template,
        data: TemplateDataSource | None = None,
    ) -> dict[str, Any]:
        """Constrói o objeto `content` da mensagem de template.

        Returns:
            Content conforme API do provedor
        """
        return {
            "type": "template",
            "name": template.name,
            "language": {"code": template.language or self._default_language},
            "components": self.build_components(template, data),
        }
