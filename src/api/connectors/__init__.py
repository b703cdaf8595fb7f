"""Connectors — adapters de borda para APIs externas.

Estrutura:
- unifonic/: API de mensagens WhatsApp da Unifonic (envio e templates)
"""

__all__: list[str] = []
