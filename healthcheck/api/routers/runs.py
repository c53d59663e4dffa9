from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from healthcheck.api.dependencies import get_orchestrator
from healthcheck.api.schemas.runs import RunSummary
from healthcheck.services.orchestrator import HealthCheckOrchestrator
from healthcheck.stores.base import ConfigStoreError

router = APIRouter(prefix="/runs", tags=["runs"])


@router.post("", response_model=RunSummary)
async def run_health_checks(
    orchestrator: HealthCheckOrchestrator = Depends(get_orchestrator),
) -> RunSummary:
    try:
        report = await orchestrator.run()
    except ConfigStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return RunSummary.from_report(report)
