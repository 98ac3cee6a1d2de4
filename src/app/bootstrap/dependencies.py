"""Composition root da auditoria: monta o container de serviços.

O container é criado uma vez no startup e guardado em app.state; store e
rotator são de propriedade dele (nada de estado global de módulo).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_http_client
from app.infra.catalog import CatalogClient
from app.infra.github import GitHubChecks, GitHubFetcher, TokenRotator
from app.infra.stores import MemoryAuditResultStore
from app.infra.webhook import WebhookNotifier
from app.use_cases.template_audit import (
    QueryResultsUseCase,
    ValidateByDocumentUseCase,
    ValidateByNameUseCase,
)

if TYPE_CHECKING:
    import httpx

    from config.settings import TemplateAuditSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuditServices:
    """Serviços da auditoria com ciclo de vida do processo."""

    settings: TemplateAuditSettings
    http_client: httpx.AsyncClient
    store: MemoryAuditResultStore
    rotator: TokenRotator
    notifier: WebhookNotifier
    validate_by_name: ValidateByNameUseCase
    validate_by_document: ValidateByDocumentUseCase
    query_results: QueryResultsUseCase

    async def aclose(self, drain_timeout_seconds: float = 10.0) -> None:
        """Drena webhooks pendentes e fecha o cliente HTTP."""
        await self.notifier.drain(timeout_seconds=drain_timeout_seconds)
        await self.http_client.aclose()


def create_audit_services(
    settings: TemplateAuditSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AuditServices:
    """Cria o container com todas as dependências concretas.

    Args:
        settings: Settings carregadas no startup.
        transport: Transport httpx alternativo (testes).
    """
    http_client = create_http_client(settings, transport=transport)
    store = MemoryAuditResultStore()
    rotator = TokenRotator(settings.github_tokens)
    notifier = WebhookNotifier(http_client, settings.webhook_url)
    github = GitHubChecks(GitHubFetcher(http_client, rotator), settings.github_api_base_url)
    catalog = CatalogClient(http_client, settings)

    if len(rotator) == 0:
        logger.warning("github_tokens_missing", extra={"component": "github"})
    logger.info(
        "audit_services_created",
        extra={
            "github_token_count": len(rotator),
            "webhook_enabled": notifier.enabled,
            "catalog_configured": bool(settings.catalog_url),
        },
    )
    return AuditServices(
        settings=settings,
        http_client=http_client,
        store=store,
        rotator=rotator,
        notifier=notifier,
        validate_by_name=ValidateByNameUseCase(
            catalog=catalog,
            github=github,
            store=store,
            notifier=notifier,
        ),
        validate_by_document=ValidateByDocumentUseCase(store=store, notifier=notifier),
        query_results=QueryResultsUseCase(store=store),
    )
