"""Stores: implementações concretas de armazenamento de resultados.

Módulos disponíveis:
    - memory_stores: histórico de auditoria em memória do processo
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryAuditResultStore

__all__ = ["MemoryAuditResultStore"]
