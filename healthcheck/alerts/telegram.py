from __future__ import annotations

import httpx

from healthcheck.alerts.base import Alert, AlertSender, DeliveryResult


class TelegramNotifier(AlertSender):
    def __init__(
        self,
        token: str | None,
        chat_id: str | None,
        client: httpx.AsyncClient,
        parse_mode: str | None = None,
        timeout: float = 5.0,
    ) -> None:
        if not token:
            raise RuntimeError("Telegram bot token is not configured")
        if not chat_id:
            raise RuntimeError("Telegram chat id is not configured")
        self._client = client
        self._token = token
        self._chat_id = chat_id
        self._parse_mode = parse_mode
        self._timeout = timeout

    async def send(self, alert: Alert) -> DeliveryResult:
        url = f"https://api.telegram.org/bot{self._token}/sendMessage"
        payload = {
            "chat_id": self._chat_id,
            "text": self._format_message(alert),
            "disable_web_page_preview": True,
        }
        # alert text carries raw URLs and error strings, so markup is opt-in
        if self._parse_mode:
            payload["parse_mode"] = self._parse_mode

        try:
            resp = await self._client.post(url, json=payload, timeout=self._timeout)
        except httpx.HTTPError as exc:
            return DeliveryResult(ok=False, detail=f"{exc.__class__.__name__}: {exc}")

        if not resp.is_success:
            return DeliveryResult(ok=False, detail=f"Telegram returned HTTP {resp.status_code}: {resp.text}")
        return DeliveryResult(ok=True, detail=str(resp.status_code))

    def _format_message(self, alert: Alert) -> str:
        return f"{alert.subject}\n\n{alert.body}"
