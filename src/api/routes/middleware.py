"""Middleware HTTP de correlation_id.

Usa o header X-Correlation-ID recebido (ou gera um UUID), disponibiliza
o valor aos logs durante a requisição e o devolve na resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            return response
        finally:
            reset_correlation_id(token)
