from __future__ import annotations

import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

import httpx

from healthcheck.alerts.base import AlertSender
from healthcheck.alerts.factory import build_notifier
from healthcheck.core.config import Settings, settings
from healthcheck.services.orchestrator import HealthCheckOrchestrator, RunReport
from healthcheck.services.prober import Prober
from healthcheck.stores.base import ConfigStore, ConfigStoreError
from healthcheck.stores.factory import build_config_store

logger = logging.getLogger(__name__)


def package_version() -> str:
    try:
        return version("endpoint-healthcheck")
    except PackageNotFoundError:
        return "unknown"


def build_orchestrator(
    config: Settings,
    client: httpx.AsyncClient,
    *,
    store: ConfigStore | None = None,
    notifier: AlertSender | None = None,
) -> HealthCheckOrchestrator:
    return HealthCheckOrchestrator(
        store=store or build_config_store(config),
        prober=Prober(client),
        notifier=notifier or build_notifier(config, client),
        endpoints_key=config.endpoints_key,
        timeout_ms=config.probe_timeout_ms,
    )


async def run_once(config: Settings = settings) -> RunReport:
    async with httpx.AsyncClient() as client:
        orchestrator = build_orchestrator(config, client)
        return await orchestrator.run()


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("starting health checks using v%s", package_version())
    try:
        report = asyncio.run(run_once())
    except ConfigStoreError:
        # already logged by the orchestrator
        sys.exit(1)
    logger.info(
        "checked %d endpoint(s), %d failing",
        len(report.results),
        len(report.failures),
    )


if __name__ == "__main__":
    main()
