"""Rotas HTTP da auditoria de templates."""

from api.routes.template_audit.router import router

__all__ = ["router"]
