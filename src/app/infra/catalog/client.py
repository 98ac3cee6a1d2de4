"""Cliente da API de catálogo (lookup de template por nome)."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from app.observability import record_latency
from utils.errors import CatalogEntityNotFoundError, UpstreamError

if TYPE_CHECKING:
    from config.settings import TemplateAuditSettings

logger = logging.getLogger(__name__)

CATALOG_FETCH_ERROR = "Failed to fetch or parse catalog response"
CATALOG_NOT_FOUND_ERROR = "Template not found in catalog"


class CatalogClient:
    """Busca a entidade template no catálogo com bearer token."""

    def __init__(self, client: httpx.AsyncClient, settings: TemplateAuditSettings) -> None:
        self._client = client
        self._settings = settings

    async def get_template_entity(self, template_name: str) -> Any:
        """Retorna o JSON da entidade.

        Raises:
            UpstreamError: Catálogo não configurado, falha de rede ou JSON inválido.
            CatalogEntityNotFoundError: Catálogo respondeu status não-2xx.
        """
        if not self._settings.catalog_url:
            raise UpstreamError(CATALOG_FETCH_ERROR, details="catalog URL is not configured")

        url = self._settings.catalog_entity_url(quote(template_name, safe=""))
        headers = {"Authorization": f"Bearer {self._settings.catalog_token}"}

        started_at = time.perf_counter()
        try:
            response = await self._client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "catalog_request_failed",
                extra={"component": "catalog", "error_type": type(exc).__name__},
            )
            raise UpstreamError(CATALOG_FETCH_ERROR, details=str(exc) or type(exc).__name__) from exc
        record_latency(
            "catalog",
            "get_entity",
            (time.perf_counter() - started_at) * 1000,
            status_code=response.status_code,
        )

        if not response.is_success:
            logger.info(
                "catalog_entity_not_found",
                extra={"component": "catalog", "status_code": response.status_code},
            )
            raise CatalogEntityNotFoundError(CATALOG_NOT_FOUND_ERROR)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("catalog_response_invalid_json", extra={"component": "catalog"})
            raise UpstreamError(CATALOG_FETCH_ERROR, details=str(exc)) from exc
