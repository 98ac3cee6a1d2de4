"""Factory do cliente HTTP compartilhado por catálogo, GitHub e webhook."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from config.settings import TemplateAuditSettings

logger = logging.getLogger(__name__)

USER_AGENT = "template-audit/1.0"


def create_http_client(
    settings: TemplateAuditSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria AsyncClient com deadline por chamada.

    Args:
        settings: Settings com request_timeout_seconds.
        transport: Transport alternativo (ex: httpx.MockTransport em testes).
    """
    client = httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )
    logger.info(
        "http_client_created",
        extra={"timeout_seconds": settings.request_timeout_seconds},
    )
    return client
