"""Testes do composition root da auditoria."""

from __future__ import annotations

import httpx
import pytest

from app.bootstrap import create_audit_services, validate_runtime_settings
from config.settings import TemplateAuditSettings, get_base_settings, get_template_audit_settings


def _settings(**overrides: object) -> TemplateAuditSettings:
    values: dict[str, object] = {
        "github_tokens": ("t1", "t2"),
        "catalog_url": "https://portal.example/api/catalog",
        "webhook_url": "https://hooks.example/flow",
        "request_timeout_seconds": 3.0,
    }
    values.update(overrides)
    return TemplateAuditSettings(**values)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_container_shares_store_between_use_cases() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    services = create_audit_services(_settings(), transport=transport)

    result = services.validate_by_document.execute(
        "spec:\n  description: d\n  tags: [x]\n  owner: team\n"
    )

    assert len(services.rotator) == 2
    assert services.notifier.enabled is True
    assert services.query_results.execute() == [result]
    assert services.http_client.timeout.read == 3.0

    await services.aclose()
    assert services.http_client.is_closed


@pytest.mark.asyncio
async def test_container_without_tokens_or_webhook() -> None:
    services = create_audit_services(
        _settings(github_tokens=(), webhook_url=""),
        transport=httpx.MockTransport(lambda request: httpx.Response(200)),
    )

    assert len(services.rotator) == 0
    assert services.notifier.enabled is False
    await services.aclose()


def test_runtime_validation_is_strict_in_production(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("TEMPLATE_AUDIT_CONFIG_PATH", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("TEMPLATE_AUDIT_CATALOG_URL", raising=False)
    get_base_settings.cache_clear()
    get_template_audit_settings.cache_clear()
    try:
        with pytest.raises(RuntimeError, match="catalogUrl"):
            validate_runtime_settings()
    finally:
        get_base_settings.cache_clear()
        get_template_audit_settings.cache_clear()


def test_runtime_validation_only_warns_in_development(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("TEMPLATE_AUDIT_CONFIG_PATH", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("TEMPLATE_AUDIT_CATALOG_URL", raising=False)
    get_base_settings.cache_clear()
    get_template_audit_settings.cache_clear()
    try:
        validate_runtime_settings()
    finally:
        get_base_settings.cache_clear()
        get_template_audit_settings.cache_clear()
