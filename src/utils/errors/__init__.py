"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CatalogEntityNotFoundError,
    ConfigurationError,
    DocumentParseError,
    GitHubConfigurationError,
    InputValidationError,
    TemplateAuditError,
    UpstreamError,
)

__all__ = [
    "CatalogEntityNotFoundError",
    "ConfigurationError",
    "DocumentParseError",
    "GitHubConfigurationError",
    "InputValidationError",
    "TemplateAuditError",
    "UpstreamError",
]
