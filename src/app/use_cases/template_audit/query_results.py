"""Caso de uso: consultar histórico de resultados."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.audit_store import ResultFilter

if TYPE_CHECKING:
    from app.domain.audit_result import AuditResult
    from app.protocols import AuditResultStoreProtocol


class QueryResultsUseCase:
    def __init__(self, *, store: AuditResultStoreProtocol) -> None:
        self._store = store

    def execute(
        self,
        *,
        template_name: str | None = None,
        status: str | None = None,
        owner: str | None = None,
        date: str | None = None,
    ) -> list[AuditResult]:
        return self._store.query(
            ResultFilter(template_name=template_name, status=status, owner=owner, date=date)
        )
