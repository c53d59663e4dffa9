from __future__ import annotations

import boto3
import httpx
from botocore.config import Config

from healthcheck.alerts.base import AlertSender
from healthcheck.alerts.sns import SnsNotifier
from healthcheck.alerts.telegram import TelegramNotifier
from healthcheck.core.config import Settings


def build_notifier(settings: Settings, client: httpx.AsyncClient) -> AlertSender:
    """Build the alert sender selected by ``notifier_backend``."""
    if settings.notifier_backend == "sns":
        sns_client = boto3.client(
            "sns",
            region_name=settings.aws_region,
            config=Config(
                connect_timeout=settings.notifier_timeout_sec,
                read_timeout=settings.notifier_timeout_sec,
                retries={"total_max_attempts": 1},
            ),
        )
        return SnsNotifier(settings.sns_topic_arn or "", sns_client)
    if settings.notifier_backend == "telegram":
        return TelegramNotifier(
            settings.telegram_bot_token,
            settings.telegram_chat_id,
            client,
            parse_mode=settings.telegram_parse_mode,
            timeout=settings.notifier_timeout_sec,
        )
    raise RuntimeError(f"Unknown notifier backend: {settings.notifier_backend}")
