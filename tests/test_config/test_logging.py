"""Testes de config.logging (configure_logging, filter, formatter, fallback)."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_handler_carries_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "cid-1")

        handler = logging.getLogger().handlers[0]

        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "template_audit"


class TestCorrelationIdFilter:
    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_injects_service_and_correlation_id(self) -> None:
        record = self._record()

        assert CorrelationIdFilter("svc", lambda: "cid-9").filter(record) is True
        assert record.correlation_id == "cid-9"  # type: ignore[attr-defined]
        assert record.service == "svc"  # type: ignore[attr-defined]

    def test_explicit_correlation_id_wins(self) -> None:
        record = self._record(correlation_id="explicit")

        CorrelationIdFilter("svc", lambda: "from-context").filter(record)

        assert record.correlation_id == "explicit"  # type: ignore[attr-defined]

    def test_without_getter_uses_empty_string(self) -> None:
        record = self._record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""  # type: ignore[attr-defined]


class TestJsonFormatter:
    def test_renames_fields(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
        assert "correlation_id" in REQUIRED_LOG_FIELDS

    def test_formats_record_as_json(self) -> None:
        record = logging.LogRecord(
            "app.use_cases", logging.INFO, __file__, 1, "audit_result_stored", None, None
        )
        record.correlation_id = "cid"
        record.service = "template_audit"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.use_cases"
        assert payload["message"] == "audit_result_stored"
        assert payload["correlation_id"] == "cid"
        assert payload["service"] == "template_audit"


class TestLogFallback:
    def test_logs_component_and_reason(self) -> None:
        logger = MagicMock()

        log_fallback(logger, "github_readme_check", reason="no_tokens", elapsed_ms=1.5)

        logger.warning.assert_called_once()
        extra = logger.warning.call_args.kwargs["extra"]
        assert extra == {
            "fallback_used": True,
            "component": "github_readme_check",
            "reason": "no_tokens",
            "elapsed_ms": 1.5,
        }

    def test_optional_fields_are_omitted(self) -> None:
        logger = MagicMock()

        log_fallback(logger, "github_owner_check")

        extra = logger.warning.call_args.kwargs["extra"]
        assert extra == {"fallback_used": True, "component": "github_owner_check"}
