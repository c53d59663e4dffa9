from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import uvicorn
from fastapi import FastAPI

from healthcheck.api.routers import endpoints, health, runs
from healthcheck.core.config import settings
from healthcheck.stores.factory import build_config_store
from healthcheck.workers.runner import build_orchestrator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # one pooled client and one set of collaborators for the process lifetime
    async with httpx.AsyncClient() as client:
        store = build_config_store(settings)
        app.state.config_store = store
        app.state.orchestrator = build_orchestrator(settings, client, store=store)
        yield


app = FastAPI(title="Endpoint Health Check API", lifespan=lifespan)

app.include_router(health.router)
app.include_router(runs.router)
app.include_router(endpoints.router)


def run() -> None:
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
