"""Protocolos e contratos do core da aplicação."""

from .audit_store import AuditResultStoreProtocol, ResultFilter
from .http_client import CatalogClientProtocol, GitHubChecksProtocol, UpstreamFetcherProtocol
from .notifier import AuditNotifierProtocol

__all__ = [
    "AuditNotifierProtocol",
    "AuditResultStoreProtocol",
    "CatalogClientProtocol",
    "GitHubChecksProtocol",
    "ResultFilter",
    "UpstreamFetcherProtocol",
]
