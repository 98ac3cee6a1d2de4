"""Protocolos HTTP usados pelo app.

Evita dependência direta dos clientes concretos em app/infra.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import httpx

    from app.domain.source_location import GitHubRepoRef


class UpstreamFetcherProtocol(Protocol):
    """Mesma forma de um GET HTTP simples."""

    async def fetch(self, url: str, **options: Any) -> httpx.Response: ...


class CatalogClientProtocol(Protocol):
    """Contrato mínimo do cliente de catálogo."""

    async def get_template_entity(self, template_name: str) -> Any: ...


class GitHubChecksProtocol(Protocol):
    """Contrato dos checks GitHub (README e conta do owner)."""

    async def readme_exists(self, ref: GitHubRepoRef) -> bool: ...

    async def owner_exists(self, org: str) -> bool: ...
