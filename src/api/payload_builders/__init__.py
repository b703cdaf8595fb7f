"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- unifonic/: endpoint de envio de mensagens WhatsApp do provedor
"""

__all__: list[str] = []
