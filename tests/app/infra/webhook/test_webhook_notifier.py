"""Testes do WebhookNotifier (entrega best-effort)."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import UTC, datetime

import httpx
import pytest

from app.domain.audit_result import AuditResult
from app.domain.template_document import TemplateSpec
from app.infra.webhook import WebhookNotifier

_RESULT = AuditResult.create(
    template_name="svc",
    spec=TemplateSpec(description="d", tags=("t",), owner="team"),
    payload={"k": "v"},
    now=datetime(2024, 1, 1, tzinfo=UTC),
)


def _notifier(handler, url: str = "https://hooks.example/flow") -> WebhookNotifier:
    return WebhookNotifier(httpx.AsyncClient(transport=httpx.MockTransport(handler)), url)


@pytest.mark.asyncio
async def test_notify_posts_result_json() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(202)

    notifier = _notifier(handler)
    notifier.notify(_RESULT)
    await notifier.drain()

    assert bodies == [_RESULT.to_response()]
    assert notifier.pending == 0


@pytest.mark.asyncio
async def test_notify_without_url_is_noop() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(200)

    notifier = _notifier(handler, url="")
    notifier.notify(_RESULT)
    await notifier.drain()

    assert notifier.enabled is False
    assert calls == []


@pytest.mark.asyncio
async def test_delivery_failures_are_swallowed() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    assert await _notifier(refuse).deliver(_RESULT.to_response()) is False
    assert await _notifier(lambda r: httpx.Response(500)).deliver({}) is False
    assert await _notifier(lambda r: httpx.Response(200)).deliver({}) is True


@pytest.mark.asyncio
async def test_unexpected_delivery_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    def explode(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("boom")

    caplog.set_level(logging.ERROR, logger="app.infra.webhook.notifier")
    notifier = _notifier(explode)

    notifier.notify(_RESULT)
    await notifier.drain()

    assert notifier.pending == 0
    failures = [r for r in caplog.records if r.getMessage() == "webhook_delivery_task_failed"]
    assert len(failures) == 1
    assert failures[0].error_type == "RuntimeError"


@pytest.mark.asyncio
async def test_concurrent_deliveries_are_capped() -> None:
    in_flight = 0
    peak = 0

    async def slow(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return httpx.Response(200)

    notifier = WebhookNotifier(
        httpx.AsyncClient(transport=httpx.MockTransport(slow)),
        "https://hooks.example/flow",
        max_concurrent_deliveries=2,
    )
    for _ in range(5):
        notifier.notify(_RESULT)
    await notifier.drain()

    assert peak == 2
    assert notifier.pending == 0
