"""Casos de uso da auditoria de templates."""

from app.use_cases.template_audit.query_results import QueryResultsUseCase
from app.use_cases.template_audit.validate_by_document import (
    ValidateByDocumentUseCase,
    parse_template_yaml,
)
from app.use_cases.template_audit.validate_by_name import ValidateByNameUseCase

__all__ = [
    "QueryResultsUseCase",
    "ValidateByDocumentUseCase",
    "ValidateByNameUseCase",
    "parse_template_yaml",
]
