from __future__ import annotations

import asyncio
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from healthcheck.alerts.base import Alert, AlertSender, DeliveryResult

# SNS rejects subjects longer than this
MAX_SUBJECT_LENGTH = 100


class SnsNotifier(AlertSender):
    """Publishes alerts to an SNS topic.

    boto3 clients are blocking, so the publish call runs in a worker thread.
    """

    def __init__(self, topic_arn: str, client: Any) -> None:
        if not topic_arn:
            raise RuntimeError("SNS topic ARN is not configured")
        self._topic_arn = topic_arn
        self._client = client

    async def send(self, alert: Alert) -> DeliveryResult:
        try:
            response = await asyncio.to_thread(
                self._client.publish,
                TopicArn=self._topic_arn,
                Subject=_subject(alert.subject),
                Message=alert.body,
            )
        except (BotoCoreError, ClientError) as exc:
            return DeliveryResult(ok=False, detail=str(exc))

        status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        if status != 200:
            return DeliveryResult(ok=False, detail=f"SNS publish returned HTTP {status}: {response}")
        return DeliveryResult(ok=True, detail=response.get("MessageId", ""))


def _subject(subject: str) -> str:
    # single line, no longer than the SNS limit
    flat = " ".join(subject.split())
    if len(flat) <= MAX_SUBJECT_LENGTH:
        return flat
    return flat[: MAX_SUBJECT_LENGTH - 3] + "..."
