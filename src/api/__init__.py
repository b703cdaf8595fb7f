"""API — camada de borda com o provedor de mensagens.

Responsabilidades:
- Receber requests HTTP (templates, campanhas, eventos de membro)
- Validar destinatários e limites
- Construir payloads de template para o provedor
- Enviar requests ao provedor

Subpastas:
- connectors/: cliente HTTP do provedor
- payload_builders/: construção de payloads de template
- validators/: validação de destinatários e limites
- routes/: endpoints HTTP

NÃO PODE conter: regras de campanha nem leitura do catálogo de templates.
"""
