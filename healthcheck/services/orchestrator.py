from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from healthcheck.alerts.base import Alert, AlertSender, DeliveryResult
from healthcheck.alerts.formatter import format_alert
from healthcheck.services.prober import (
    DEFAULT_TIMEOUT_MS,
    ProbeOutcome,
    ProbeSuccess,
    Prober,
    TransportFailure,
)
from healthcheck.stores.base import ConfigStore, ConfigStoreError

logger = logging.getLogger(__name__)

AlertFormatter = Callable[[str, ProbeOutcome, datetime], Alert]


@dataclass(frozen=True)
class EndpointResult:
    endpoint: str
    outcome: ProbeOutcome | None
    alert: Alert | None = None
    delivery: DeliveryResult | None = None

    @property
    def healthy(self) -> bool:
        return isinstance(self.outcome, ProbeSuccess)


@dataclass(frozen=True)
class RunReport:
    results: list[EndpointResult]

    @property
    def failures(self) -> list[EndpointResult]:
        return [r for r in self.results if not r.healthy]

    @property
    def undelivered(self) -> list[EndpointResult]:
        return [r for r in self.failures if r.delivery is None or not r.delivery.ok]


class HealthCheckOrchestrator:
    """Runs one health-check pass over every configured endpoint.

    Only a configuration store failure aborts the pass. Each endpoint's probe
    and alert run in their own task, and anything that goes wrong there is
    logged and kept out of the sibling tasks.
    """

    def __init__(
        self,
        store: ConfigStore,
        prober: Prober,
        notifier: AlertSender,
        *,
        endpoints_key: str = "endpoints",
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        formatter: AlertFormatter = format_alert,
    ) -> None:
        self._store = store
        self._prober = prober
        self._notifier = notifier
        self._endpoints_key = endpoints_key
        self._timeout_ms = timeout_ms
        self._format = formatter

    async def run(self) -> RunReport:
        endpoints = await self._load_endpoints()
        logger.info("starting health checks for %d endpoint(s)", len(endpoints))

        tasks = [asyncio.create_task(self._check_endpoint(endpoint)) for endpoint in endpoints]
        results = await asyncio.gather(*tasks)

        report = RunReport(results=list(results))
        logger.info(
            "health check complete",
            extra={
                "endpoints": len(report.results),
                "failures": len(report.failures),
                "undelivered": len(report.undelivered),
            },
        )
        return report

    async def _load_endpoints(self) -> list[str]:
        try:
            return await self._store.get(self._endpoints_key)
        except ConfigStoreError:
            logger.exception("failed to read endpoint list", extra={"key": self._endpoints_key})
            raise

    async def _check_endpoint(self, endpoint: str) -> EndpointResult:
        try:
            logger.info("checking endpoint %s", endpoint, extra={"endpoint": endpoint})
            outcome = await self._probe(endpoint)
            if isinstance(outcome, ProbeSuccess):
                logger.info(
                    "health check successful for %s in %sms",
                    endpoint,
                    f"{outcome.elapsed_ms:,}",
                    extra={"endpoint": endpoint, "status_code": outcome.status_code},
                )
                return EndpointResult(endpoint=endpoint, outcome=outcome)

            alert = self._format(endpoint, outcome, outcome.started_at)
            delivery = await self._dispatch(alert)
            return EndpointResult(endpoint=endpoint, outcome=outcome, alert=alert, delivery=delivery)
        except Exception:
            logger.exception("health check pipeline failed", extra={"endpoint": endpoint})
            return EndpointResult(endpoint=endpoint, outcome=None)

    async def _probe(self, endpoint: str) -> ProbeOutcome:
        try:
            return await self._prober.probe(endpoint, self._timeout_ms)
        except ValueError as exc:
            # a rejected endpoint is reported like any other unreachable one
            return TransportFailure(
                endpoint=endpoint,
                error_kind="invalid_url",
                error=str(exc),
                elapsed_ms=0,
                started_at=datetime.now(timezone.utc),
            )

    async def _dispatch(self, alert: Alert) -> DeliveryResult:
        logger.info("publishing health check failure for %s", alert.endpoint, extra={"endpoint": alert.endpoint})
        try:
            delivery = await self._notifier.send(alert)
        except Exception as exc:
            logger.exception("notifier raised while sending alert", extra={"endpoint": alert.endpoint})
            return DeliveryResult(ok=False, detail=f"{exc.__class__.__name__}: {exc}")

        if not delivery.ok:
            logger.error(
                "error publishing alert for %s: %s",
                alert.endpoint,
                delivery.detail,
                extra={"endpoint": alert.endpoint},
            )
        return delivery
