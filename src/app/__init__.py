"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de template, dados de envio e evento de membro
- use_cases/: casos de uso de campanha
- services/: catálogo, variáveis e preview de templates
- infra/: implementações concretas de IO (store JSON)
- protocols/: contratos/interfaces
- observability/: correlation_id
- constants/: constantes da aplicação

Padrão: app executa; api adapta; utils apoia.
"""
