"""GET na API GitHub com rodízio de tokens.

Cada tentativa usa o próximo token do rotator. Respostas 403 (forbidden) e
429 (rate limit) passam para o token seguinte; qualquer outro status volta
na hora. Esgotados os tokens, devolve a última resposta 403/429. Não há
sleep/backoff entre tentativas.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from app.observability import record_latency, record_token_rotation
from utils.errors import GitHubConfigurationError, UpstreamError

if TYPE_CHECKING:
    from app.infra.github.token_rotator import TokenRotator

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({403, 429})
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"


class GitHubFetcher:
    """Fetcher com a mesma forma de um GET simples (url + opções httpx)."""

    def __init__(self, client: httpx.AsyncClient, rotator: TokenRotator) -> None:
        self._client = client
        self._rotator = rotator

    async def fetch(self, url: str, **options: Any) -> httpx.Response:
        """Executa GET tentando um token por vez.

        Raises:
            GitHubConfigurationError: Se não houver tokens configurados.
            UpstreamError: Em falha de rede/timeout.
        """
        attempts = len(self._rotator)
        if attempts == 0:
            raise GitHubConfigurationError("No GitHub tokens available")

        caller_headers = dict(options.pop("headers", None) or {})
        last_response: httpx.Response | None = None

        for attempt in range(1, attempts + 1):
            token = self._rotator.next()
            headers = {
                **caller_headers,
                "Authorization": f"token {token}",
                "Accept": GITHUB_ACCEPT_HEADER,
            }
            response = await self._send(url, headers, options)
            if response.status_code not in RETRYABLE_STATUS_CODES:
                return response

            record_token_rotation(response.status_code, attempt, attempts)
            last_response = response

        logger.warning(
            "github_tokens_exhausted",
            extra={"component": "github", "attempts": attempts},
        )
        return last_response  # type: ignore[return-value]

    async def _send(
        self,
        url: str,
        headers: dict[str, str],
        options: dict[str, Any],
    ) -> httpx.Response:
        started_at = time.perf_counter()
        try:
            response = await self._client.get(url, headers=headers, **options)
        except httpx.HTTPError as exc:
            logger.warning(
                "github_request_failed",
                extra={"component": "github", "error_type": type(exc).__name__},
            )
            raise UpstreamError("GitHub request failed", details=str(exc)) from exc
        record_latency(
            "github",
            "get",
            (time.perf_counter() - started_at) * 1000,
            status_code=response.status_code,
        )
        return response
