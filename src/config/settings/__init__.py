"""Agregador de settings do serviço de auditoria de templates.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Template audit settings
from config.settings.template_audit import (
    DEFAULT_CONFIG_FILENAME,
    GITHUB_API_BASE_URL,
    TemplateAuditSettings,
    get_template_audit_settings,
    load_config_file,
    resolve_config_path,
    settings_from_mapping,
)

__all__ = [
    # Constants
    "DEFAULT_CONFIG_FILENAME",
    "GITHUB_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Template audit
    "TemplateAuditSettings",
    "get_base_settings",
    "get_template_audit_settings",
    "load_config_file",
    "resolve_config_path",
    "settings_from_mapping",
]
