"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    detail: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="template-audit",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: catálogo é crítico; GitHub e webhook apenas degradam."""
    services = getattr(request.app.state, "audit_services", None)
    if services is None:
        return JSONResponse(
            content={"status": "not_ready", "checks": {}, "timestamp": _now()},
            status_code=503,
        )

    settings = services.settings
    catalog_check = (
        DependencyCheck(status="ok")
        if settings.catalog_url
        else DependencyCheck(status="failed", detail="not_configured")
    )
    github_check = (
        DependencyCheck(status="ok", detail=f"{len(services.rotator)} tokens")
        if len(services.rotator)
        else DependencyCheck(status="degraded", detail="no_tokens")
    )
    webhook_check = (
        DependencyCheck(status="ok")
        if services.notifier.enabled
        else DependencyCheck(status="degraded", detail="not_configured")
    )

    ready = catalog_check.status == "ok"
    if not ready:
        logger.warning("readiness_catalog_not_configured")

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "catalog": catalog_check.as_dict(),
            "github": github_check.as_dict(),
            "webhook": webhook_check.as_dict(),
        },
        "timestamp": _now(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _now() -> str:
    return datetime.now(UTC).isoformat()
