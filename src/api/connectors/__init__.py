"""Connectors: clientes HTTP que consomem a API de auditoria.

Estrutura:
- template_audit/: cliente do painel (validação e tabela de resultados)
"""

__all__: list[str] = []
