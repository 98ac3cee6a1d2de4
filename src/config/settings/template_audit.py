"""Settings da auditoria de templates.

Lidas uma única vez do arquivo app-config.yaml (chaves `templateAudit.*`)
com override por variáveis de ambiente.

Exemplo de arquivo:
    templateAudit:
      github:
        tokens: [ghp_a, ghp_b]
      webhook:
        powerAutomateUrl: https://prod.example/workflows/123
      backstage:
        catalogUrl: https://portal.example/api/catalog
        token: s3cr3t
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "app-config.yaml"
GITHUB_API_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class TemplateAuditSettings:
    """Configurações da auditoria de templates.

    Attributes:
        github_tokens: Tokens GitHub usados em rodízio
        github_api_base_url: URL base da API GitHub (Enterprise opcional)
        webhook_url: Webhook (Power Automate) que recebe cada resultado
        catalog_url: URL base da API de catálogo
        catalog_token: Bearer token para o catálogo
        request_timeout_seconds: Deadline de cada chamada externa
    """

    github_tokens: tuple[str, ...] = ()
    github_api_base_url: str = GITHUB_API_BASE_URL
    webhook_url: str = ""
    catalog_url: str = ""
    catalog_token: str = ""
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.webhook_url)

    def catalog_entity_url(self, template_name: str) -> str:
        """URL da entidade template no catálogo."""
        return f"{self.catalog_url.rstrip('/')}/entities/by-name/template/{template_name}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.catalog_url:
            errors.append("templateAudit.backstage.catalogUrl não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("templateAudit.http.timeoutSeconds deve ser > 0")

        return errors


def _dig(tree: dict[str, Any], *keys: str) -> Any:
    node: Any = tree
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _parse_tokens(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return ()
    return tuple(token.strip() for token in value if isinstance(token, str) and token.strip())


def _parse_timeout(value: Any) -> float:
    if value is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            "templateAudit.http.timeoutSeconds deve ser numérico",
            details=repr(value),
        ) from exc


def resolve_config_path() -> Path:
    """Caminho do arquivo de configuração (env ou cwd)."""
    override = os.getenv("TEMPLATE_AUDIT_CONFIG_PATH")
    if override:
        return Path(override)
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_config_file(path: Path) -> dict[str, Any]:
    """Lê o YAML de configuração.

    Arquivo ausente retorna dict vazio (todos os defaults).

    Raises:
        ConfigurationError: Se o YAML for inválido ou a raiz não for um mapa.
    """
    if not path.exists():
        logger.info("config_file_not_found", extra={"path": str(path)})
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"YAML inválido em {path}", details=str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Raiz de {path} deve ser um mapa")
    return data


def settings_from_mapping(tree: dict[str, Any]) -> TemplateAuditSettings:
    """Monta settings a partir do mapa carregado + overrides de env."""
    section = _dig(tree, "templateAudit") or {}

    tokens = _parse_tokens(_dig(section, "github", "tokens"))
    env_tokens = os.getenv("TEMPLATE_AUDIT_GITHUB_TOKENS")
    if env_tokens is not None:
        tokens = _parse_tokens(env_tokens)

    timeout_raw = os.getenv("TEMPLATE_AUDIT_HTTP_TIMEOUT_SECONDS")
    if timeout_raw is None:
        timeout_raw = _dig(section, "http", "timeoutSeconds")

    return TemplateAuditSettings(
        github_tokens=tokens,
        github_api_base_url=os.getenv(
            "TEMPLATE_AUDIT_GITHUB_API_URL",
            _as_str(_dig(section, "github", "apiBaseUrl")) or GITHUB_API_BASE_URL,
        ),
        webhook_url=os.getenv(
            "TEMPLATE_AUDIT_WEBHOOK_URL",
            _as_str(_dig(section, "webhook", "powerAutomateUrl")),
        ),
        catalog_url=os.getenv(
            "TEMPLATE_AUDIT_CATALOG_URL",
            _as_str(_dig(section, "backstage", "catalogUrl")),
        ),
        catalog_token=os.getenv(
            "TEMPLATE_AUDIT_CATALOG_TOKEN",
            _as_str(_dig(section, "backstage", "token")),
        ),
        request_timeout_seconds=_parse_timeout(timeout_raw),
    )


def _load_template_audit_settings() -> TemplateAuditSettings:
    """Carrega TemplateAuditSettings do arquivo + variáveis de ambiente."""
    return settings_from_mapping(load_config_file(resolve_config_path()))


@lru_cache(maxsize=1)
def get_template_audit_settings() -> TemplateAuditSettings:
    """Retorna instância cacheada de TemplateAuditSettings."""
    return _load_template_audit_settings()
