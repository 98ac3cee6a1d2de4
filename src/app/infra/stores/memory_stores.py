"""Store de resultados em memória.

Sem persistência entre reinícios: o histórico vive apenas no processo.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from app.protocols.audit_store import AuditResultStoreProtocol, ResultFilter

if TYPE_CHECKING:
    from app.domain.audit_result import AuditResult


class MemoryAuditResultStore(AuditResultStoreProtocol):
    """Lista append-only de AuditResult protegida por lock."""

    def __init__(self) -> None:
        self._records: list[AuditResult] = []
        self._lock = threading.Lock()

    def append(self, result: AuditResult) -> None:
        with self._lock:
            self._records.append(result)

    def query(self, result_filter: ResultFilter | None = None) -> list[AuditResult]:
        with self._lock:
            snapshot = list(self._records)
        if result_filter is None:
            return snapshot
        return [record for record in snapshot if result_filter.matches(record)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
