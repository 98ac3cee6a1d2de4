"""Exceções de domínio do serviço de auditoria de templates.

Cada exceção carrega o status HTTP correspondente para que a camada
api traduza falhas sem conhecer regras de negócio.
"""

from __future__ import annotations


class TemplateAuditError(Exception):
    """Base para erros previsíveis da auditoria."""

    status_code: int = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def as_dict(self) -> dict[str, str]:
        payload = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InputValidationError(TemplateAuditError):
    """Campo obrigatório ausente na requisição."""

    status_code = 400


class DocumentParseError(TemplateAuditError):
    """Documento YAML mal formado (details contém o diagnóstico do parser)."""

    status_code = 400


class CatalogEntityNotFoundError(TemplateAuditError):
    """Catálogo respondeu com status de erro para o template."""

    status_code = 404


class UpstreamError(TemplateAuditError):
    """Falha de rede ou de parse ao falar com serviço externo."""

    status_code = 500


class GitHubConfigurationError(UpstreamError):
    """Nenhum token GitHub disponível para a chamada."""


class ConfigurationError(TemplateAuditError):
    """Arquivo de configuração ilegível ou inválido."""
