"""Checks de repositório GitHub usados na validação por nome."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.source_location import GitHubRepoRef
    from app.protocols.http_client import UpstreamFetcherProtocol


class GitHubChecks:
    """README na raiz do repo e existência da conta (org/usuário)."""

    def __init__(self, fetcher: UpstreamFetcherProtocol, api_base_url: str) -> None:
        self._fetcher = fetcher
        self._api_base_url = api_base_url.rstrip("/")

    async def readme_exists(self, ref: GitHubRepoRef) -> bool:
        response = await self._fetcher.fetch(
            f"{self._api_base_url}/repos/{ref.org}/{ref.repo}/contents/README.md"
        )
        return response.status_code == 200

    async def owner_exists(self, org: str) -> bool:
        response = await self._fetcher.fetch(f"{self._api_base_url}/users/{org}")
        return response.status_code == 200
