"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (templates, envio, health)
- Validação inicial de request (body, headers, query params)
- Delegação para services/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/templates/: catálogo, variáveis e preview
- routes/messages/: envio direto, campanhas e eventos de membro
- routes/health/: health checks e readiness
- middleware.py: correlation_id por requisição

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.middleware import CorrelationIdMiddleware
from api.routes.router import create_api_router

__all__ = ["CorrelationIdMiddleware", "create_api_router"]
