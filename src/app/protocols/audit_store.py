"""Protocolo do store de resultados de auditoria."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.audit_result import AuditResult


@dataclass(frozen=True, slots=True)
class ResultFilter:
    """Filtros da consulta de resultados.

    template_name, status e owner são igualdade exata; date é prefixo do
    timestamp ISO (ex: "2024-01" pega o mês inteiro). Vazio = sem filtro.
    """

    template_name: str | None = None
    status: str | None = None
    owner: str | None = None
    date: str | None = None

    def matches(self, result: AuditResult) -> bool:
        if self.template_name and result.template_name != self.template_name:
            return False
        if self.status and result.status != self.status:
            return False
        if self.owner and result.owner != self.owner:
            return False
        return not (self.date and not result.date.startswith(self.date))


class AuditResultStoreProtocol(ABC):
    """Contrato do store de resultados (append-only + consulta filtrada)."""

    @abstractmethod
    def append(self, result: AuditResult) -> None:
        """Adiciona resultado ao final do histórico."""

    @abstractmethod
    def query(self, result_filter: ResultFilter | None = None) -> list[AuditResult]:
        """Retorna resultados que casam com o filtro, em ordem de inserção."""
