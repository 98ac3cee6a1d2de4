"""App: coração do serviço: casos de uso, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (cliente HTTP, container, inicialização)
- domain/: documento de template, resultado de auditoria, source-location
- use_cases/: validação por nome, validação por YAML, consulta de resultados
- infra/: catálogo, GitHub (rodízio de tokens), webhook, store em memória
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
