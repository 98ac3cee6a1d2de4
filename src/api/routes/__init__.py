"""Rotas HTTP da API.

Estrutura:
- routes/template_audit/: validação de templates e histórico de resultados
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
