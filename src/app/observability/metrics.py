"""Registro de métricas via structured logging.

As métricas saem como logs JSON e são agregadas fora do processo.

Métricas suportadas:
- Latência de chamadas externas (catálogo, GitHub, webhook)
- Resultado de auditoria (PASS/FAIL por origem)
- Rodízio de token GitHub após 403/429
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    status_code: int | None = None,
) -> None:
    """Registra latência de chamada externa.

    Args:
        component: Nome do componente (ex: "catalog", "github")
        operation: Nome da operação (ex: "get_entity", "readme_exists")
        latency_ms: Latência em milissegundos
        status_code: Status HTTP recebido, quando houve resposta
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "status_code": status_code,
        },
    )


def record_audit_outcome(source: str, status: str) -> None:
    """Registra resultado de auditoria (source: "template_name" | "yaml")."""
    logger.info(
        "metric_audit_outcome",
        extra={
            "metric_type": "audit_outcome",
            "component": "template_audit",
            "source": source,
            "status": status,
        },
    )


def record_token_rotation(status_code: int, attempt: int, pool_size: int) -> None:
    """Registra troca de token GitHub após resposta 403/429."""
    logger.info(
        "metric_token_rotation",
        extra={
            "metric_type": "token_rotation",
            "component": "github",
            "status_code": status_code,
            "attempt": attempt,
            "pool_size": pool_size,
        },
    )
