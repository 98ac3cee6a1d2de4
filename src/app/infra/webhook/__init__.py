"""Notificação de resultados via webhook."""

from app.infra.webhook.notifier import WebhookNotifier

__all__ = ["WebhookNotifier"]
