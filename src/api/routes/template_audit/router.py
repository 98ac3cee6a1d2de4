"""Endpoints da auditoria de templates.

Endpoints:
- POST /validate/templateName: valida template registrado no catálogo
- POST /validate/yaml: valida template colado como YAML
- GET /results: histórico filtrável (templateName, status, owner, date)

Erros de domínio viram JSON `{error}` ou `{error, details}` com o status
HTTP da exceção.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from utils.errors import InputValidationError, TemplateAuditError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import AuditServices

logger = logging.getLogger(__name__)

router = APIRouter()


def get_audit_services(request: Request) -> AuditServices:
    """Container criado no startup (app.state.audit_services)."""
    return request.app.state.audit_services


async def _read_json_body(request: Request) -> dict[str, Any]:
    raw_body = await request.body()
    if not raw_body.strip():
        return {}
    try:
        payload = json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InputValidationError("Malformed JSON body", details=str(exc)) from exc
    return payload if isinstance(payload, dict) else {}


def _string_field(body: dict[str, Any], name: str) -> str | None:
    """Escalares viram texto (123 -> "123"); listas e objetos contam como ausentes."""
    value = body.get(name)
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)) and value:
        return str(value)
    return None


def _error_response(exc: TemplateAuditError, endpoint: str) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "template_audit_request_failed",
        extra={
            "endpoint": endpoint,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(content=exc.as_dict(), status_code=exc.status_code)


@router.post("/validate/templateName")
async def validate_template_name(request: Request) -> JSONResponse:
    """Valida template por nome (catálogo + checks GitHub)."""
    services = get_audit_services(request)
    try:
        body = await _read_json_body(request)
        result = await services.validate_by_name.execute(_string_field(body, "templateName"))
    except TemplateAuditError as exc:
        return _error_response(exc, "validate_template_name")
    return JSONResponse(content=result.to_response())


@router.post("/validate/yaml")
async def validate_yaml(request: Request) -> JSONResponse:
    """Valida template a partir do texto YAML."""
    services = get_audit_services(request)
    try:
        body = await _read_json_body(request)
        result = services.validate_by_document.execute(_string_field(body, "yamlText"))
    except TemplateAuditError as exc:
        return _error_response(exc, "validate_yaml")
    return JSONResponse(content=result.to_response())


@router.get("/results")
async def list_results(
    request: Request,
    template_name: str | None = Query(default=None, alias="templateName"),
    status: str | None = Query(default=None),
    owner: str | None = Query(default=None),
    date: str | None = Query(default=None),
) -> JSONResponse:
    """Histórico de resultados; date é prefixo do timestamp ISO."""
    services = get_audit_services(request)
    results = services.query_results.execute(
        template_name=template_name,
        status=status,
        owner=owner,
        date=date,
    )
    return JSONResponse(content=[result.to_response() for result in results])
