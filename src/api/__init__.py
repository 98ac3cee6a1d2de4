"""API: camada de borda HTTP.

Responsabilidades:
- Receber requisições de validação e consulta
- Validar o corpo antes de chamar os casos de uso
- Traduzir erros de domínio em respostas {"error": ...}

Subpastas:
- routes/: endpoints HTTP (validação, resultados, health)
- connectors/: clientes que consomem a própria API (painel)

NÃO PODE conter: regra de status, IO com catálogo/GitHub.
"""
