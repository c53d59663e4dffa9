from __future__ import annotations

from fastapi import Request

from healthcheck.core.config import settings
from healthcheck.services.orchestrator import HealthCheckOrchestrator
from healthcheck.stores.base import ConfigStore


def get_orchestrator(request: Request) -> HealthCheckOrchestrator:
    return request.app.state.orchestrator


def get_config_store(request: Request) -> ConfigStore:
    return request.app.state.config_store


def get_endpoints_key() -> str:
    return settings.endpoints_key
