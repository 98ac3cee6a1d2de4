"""Cliente do painel de auditoria.

Reproduz a lógica de requisições do painel web: entrada dupla (nome do
template OU YAML, mutuamente exclusivos), validação e tabela de resultados
com filtros. A renderização fica fora deste módulo.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from utils.errors import InputValidationError

logger = logging.getLogger(__name__)

# Vazio quando o serviço está na raiz; "/api/template-audit" atrás do portal.
DEFAULT_BASE_PATH = ""
MISSING_INPUT_ERROR = "Please provide either a template name or YAML."
DEFAULT_FAILURE_MESSAGE = "Validation failed"

RESULT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Template Name", "templateName"),
    ("Status", "status"),
    ("Owner", "owner"),
    ("Date", "date"),
)


class PanelRequestError(Exception):
    """Backend respondeu com erro; message vem do campo `error` do corpo."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def result_rows(results: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Projeta resultados nas colunas da tabela."""
    return [{field: row.get(field) for _, field in RESULT_COLUMNS} for row in results]


class TemplateAuditPanelClient:
    """Fala com o backend de auditoria como o painel faz."""

    def __init__(self, client: httpx.AsyncClient, base_path: str = DEFAULT_BASE_PATH) -> None:
        self._client = client
        self._base_path = base_path.rstrip("/")

    async def validate(
        self,
        *,
        template_name: str | None = None,
        yaml_text: str | None = None,
    ) -> dict[str, Any]:
        """Valida por nome ou por YAML (exatamente um dos dois).

        Raises:
            InputValidationError: Nenhuma ou ambas as entradas informadas.
            PanelRequestError: Backend respondeu status de erro.
        """
        if bool(template_name) == bool(yaml_text):
            raise InputValidationError(MISSING_INPUT_ERROR)

        if template_name:
            path, body = "/validate/templateName", {"templateName": template_name}
        else:
            path, body = "/validate/yaml", {"yamlText": yaml_text}

        response = await self._client.post(f"{self._base_path}{path}", json=body)
        data = _json_or_empty(response)
        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            logger.info(
                "panel_validation_failed",
                extra={"status_code": response.status_code, "path": path},
            )
            raise PanelRequestError(message or DEFAULT_FAILURE_MESSAGE, response.status_code)
        return data

    async def fetch_results(
        self,
        *,
        template_name: str = "",
        status: str = "",
        owner: str = "",
        date: str = "",
    ) -> list[dict[str, Any]]:
        """Busca o histórico; filtros vazios não são enviados."""
        candidates = {
            "templateName": template_name,
            "status": status,
            "owner": owner,
            "date": date,
        }
        params = {key: value for key, value in candidates.items() if value}
        response = await self._client.get(f"{self._base_path}/results", params=params)
        if not response.is_success:
            raise PanelRequestError(DEFAULT_FAILURE_MESSAGE, response.status_code)
        data = response.json()
        return data if isinstance(data, list) else []


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}
