"""Protocolo de notificação de resultados."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.audit_result import AuditResult


class AuditNotifierProtocol(ABC):
    """Entrega best-effort de resultados; nunca levanta para o chamador."""

    @abstractmethod
    def notify(self, result: AuditResult) -> None:
        """Agenda a entrega do resultado (fire-and-forget)."""
