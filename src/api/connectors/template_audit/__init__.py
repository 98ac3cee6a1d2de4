"""Cliente HTTP do painel de auditoria de templates."""

from api.connectors.template_audit.panel_client import (
    MISSING_INPUT_ERROR,
    RESULT_COLUMNS,
    PanelRequestError,
    TemplateAuditPanelClient,
    result_rows,
)

__all__ = [
    "MISSING_INPUT_ERROR",
    "RESULT_COLUMNS",
    "PanelRequestError",
    "TemplateAuditPanelClient",
    "result_rows",
]
