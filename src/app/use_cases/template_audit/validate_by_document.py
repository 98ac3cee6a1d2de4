"""Caso de uso: validar template a partir de YAML colado no painel.

Sem checks GitHub: readmeStatus e githubOwnerStatus ficam None e não
entram no cálculo do status.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import yaml
from pydantic_core import PydanticSerializationError

from app.domain.audit_result import AuditResult
from app.domain.template_document import TemplateDocument
from app.observability import record_audit_outcome
from utils.errors import DocumentParseError, InputValidationError

if TYPE_CHECKING:
    from app.protocols import AuditNotifierProtocol, AuditResultStoreProtocol

logger = logging.getLogger(__name__)


def parse_template_yaml(yaml_text: str) -> TemplateDocument:
    """Parseia o YAML em documento tipado.

    Raises:
        DocumentParseError: YAML mal formado (details = diagnóstico do parser).
    """
    try:
        payload = yaml.safe_load(yaml_text)
    except yaml.YAMLError as exc:
        raise DocumentParseError("Invalid YAML", details=str(exc)) from exc
    return TemplateDocument.from_payload(payload)


class ValidateByDocumentUseCase:
    """Valida template informado como texto YAML."""

    def __init__(
        self,
        *,
        store: AuditResultStoreProtocol,
        notifier: AuditNotifierProtocol,
    ) -> None:
        self._store = store
        self._notifier = notifier

    def execute(self, yaml_text: str | None) -> AuditResult:
        if not yaml_text:
            raise InputValidationError("yamlText is required")

        document = parse_template_yaml(yaml_text)
        result = AuditResult.create(
            template_name=document.metadata.name,
            spec=document.spec,
            payload=document.payload,
        )
        try:
            result.to_response()
        except PydanticSerializationError as exc:
            raise DocumentParseError("Invalid YAML", details=str(exc)) from exc

        self._store.append(result)
        self._notifier.notify(result)

        record_audit_outcome("yaml", result.status)
        logger.info("template_validated", extra={"source": "yaml", "status": result.status})
        return result
