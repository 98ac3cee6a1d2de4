"""Caso de uso: validar template buscando metadados no catálogo.

Fluxo:
1. Busca a entidade no catálogo (falha aborta a requisição)
2. Checa description/tags/owner do spec
3. Se a anotação source-location for GitHub, checa README e conta do owner
4. Armazena, notifica e retorna o AuditResult

Falhas dos checks GitHub (rede, sem tokens) degradam o check para None;
o status fica FAIL, mas a requisição não falha.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.audit_result import AuditResult
from app.domain.source_location import parse_github_location
from app.domain.template_document import TemplateDocument
from app.observability import record_audit_outcome
from config.logging import log_fallback
from utils.errors import InputValidationError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from app.protocols import (
        AuditNotifierProtocol,
        AuditResultStoreProtocol,
        CatalogClientProtocol,
        GitHubChecksProtocol,
    )

logger = logging.getLogger(__name__)


class ValidateByNameUseCase:
    """Valida template registrado no catálogo."""

    def __init__(
        self,
        *,
        catalog: CatalogClientProtocol,
        github: GitHubChecksProtocol,
        store: AuditResultStoreProtocol,
        notifier: AuditNotifierProtocol,
    ) -> None:
        self._catalog = catalog
        self._github = github
        self._store = store
        self._notifier = notifier

    async def execute(self, template_name: str | None) -> AuditResult:
        """Executa a validação.

        Raises:
            InputValidationError: templateName ausente.
            CatalogEntityNotFoundError: catálogo não reconhece o template.
            UpstreamError: falha de rede/parse no catálogo.
        """
        if not template_name:
            raise InputValidationError("templateName is required")

        entity = await self._catalog.get_template_entity(template_name)
        document = TemplateDocument.from_payload(entity)

        readme_status: bool | None = None
        github_owner_status: bool | None = None
        repo_ref = parse_github_location(document.spec.source_location)
        if repo_ref is not None:
            readme_status = await _degrade_on_failure(
                "github_readme_check",
                self._github.readme_exists(repo_ref),
            )
            github_owner_status = await _degrade_on_failure(
                "github_owner_check",
                self._github.owner_exists(repo_ref.org),
            )

        result = AuditResult.create(
            template_name=template_name,
            spec=document.spec,
            payload=entity,
            readme_status=readme_status,
            github_owner_status=github_owner_status,
            require_github=True,
        )
        self._store.append(result)
        self._notifier.notify(result)

        record_audit_outcome("template_name", result.status)
        logger.info(
            "template_validated",
            extra={
                "source": "template_name",
                "status": result.status,
                "github_checked": repo_ref is not None,
            },
        )
        return result


async def _degrade_on_failure(component: str, check: Awaitable[bool]) -> bool | None:
    try:
        return await check
    except UpstreamError as exc:
        log_fallback(logger, component, reason=type(exc).__name__)
        return None
