"""Entrypoint da aplicação de auditoria de templates.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.routes import create_api_router
from app.bootstrap import (
    AuditServices,
    create_audit_services,
    initialize_app,
    validate_runtime_settings,
)
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_template_audit_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings e monta o container (se não injetado).
    Shutdown: drena webhooks pendentes e fecha o cliente HTTP.
    """
    logger.info("app_starting", extra={"service": "template-audit"})
    if getattr(app.state, "audit_services", None) is None:
        validate_runtime_settings()
        app.state.audit_services = create_audit_services(get_template_audit_settings())

    yield

    logger.info("app_shutting_down", extra={"service": "template-audit"})
    services: AuditServices = app.state.audit_services
    await services.aclose()


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga x-correlation-id (ou gera um) para logs e resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app(services: AuditServices | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        services: Container pronto (testes). Se None, é criado no startup
            a partir das settings.
    """
    fastapi_app = FastAPI(
        title="Template Audit",
        description="Auditoria de metadados de software templates",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.audit_services = services

    fastapi_app.middleware("http")(correlation_middleware)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "template-audit"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta; DEBUG=true liga o reload."""
    import uvicorn

    base = get_base_settings()
    logger.info(
        "app_direct_run",
        extra={"environment": base.environment, "reload": base.debug},
    )
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=base.debug,
    )


if __name__ == "__main__":
    main()
