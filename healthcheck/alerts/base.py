from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Alert:
    endpoint: str
    subject: str
    body: str


@dataclass(frozen=True)
class DeliveryResult:
    ok: bool
    detail: str = ""


class AlertSender(Protocol):
    async def send(self, alert: Alert) -> DeliveryResult:  # pragma: no cover - interface
        ...
