"""Validators — validação de requisições antes de chamar APIs externas.

Estrutura:
- campaign/: destinatários e campos de campanha
"""

__all__: list[str] = []
