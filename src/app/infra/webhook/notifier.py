"""Encaminhamento best-effort de resultados para webhook (Power Automate).

A entrega roda em task de background: a requisição de validação nunca
espera pelo webhook nem vê suas falhas.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

import httpx

from app.protocols.notifier import AuditNotifierProtocol

if TYPE_CHECKING:
    from app.domain.audit_result import AuditResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT_DELIVERIES = 100


class WebhookNotifier(AuditNotifierProtocol):
    """POST JSON de cada resultado para a URL configurada."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        webhook_url: str,
        max_concurrent_deliveries: int = DEFAULT_MAX_CONCURRENT_DELIVERIES,
    ) -> None:
        self._client = client
        self._webhook_url = webhook_url
        self._semaphore = asyncio.Semaphore(max_concurrent_deliveries)
        self._active_tasks: set[asyncio.Task[Any]] = set()

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    @property
    def pending(self) -> int:
        return len(self._active_tasks)

    def notify(self, result: AuditResult) -> None:
        if not self.enabled:
            return
        task = asyncio.create_task(self._deliver_with_limit(result.to_response()))
        self._active_tasks.add(task)
        task.add_done_callback(self._on_delivery_done)

    async def _deliver_with_limit(self, payload: dict[str, Any]) -> None:
        async with self._semaphore:
            await self.deliver(payload)

    def _on_delivery_done(self, task: asyncio.Task[Any]) -> None:
        self._active_tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "webhook_delivery_task_failed",
                    extra={
                        "component": "webhook",
                        "error_type": type(exc).__name__,
                        "active_tasks": len(self._active_tasks),
                    },
                )

    async def deliver(self, payload: dict[str, Any]) -> bool:
        """Envia o payload; retorna True em 2xx.

        Erros de transporte httpx viram False; o resto sobe para a task.
        """
        try:
            response = await self._client.post(
                self._webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "webhook_delivery_failed",
                extra={"component": "webhook", "error_type": type(exc).__name__},
            )
            return False

        if not response.is_success:
            logger.warning(
                "webhook_delivery_rejected",
                extra={"component": "webhook", "status_code": response.status_code},
            )
            return False

        logger.debug("webhook_delivered", extra={"component": "webhook"})
        return True

    async def drain(self, timeout_seconds: float = 10.0) -> None:
        """Aguarda entregas pendentes no shutdown, cancelando as que passarem do prazo."""
        if not self._active_tasks:
            return

        pending_now = list(self._active_tasks)
        logger.info(
            "webhook_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning("webhook_shutdown_cancelled", extra={"cancelled_tasks": len(pending)})
