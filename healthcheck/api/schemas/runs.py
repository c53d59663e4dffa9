from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from healthcheck.services.orchestrator import EndpointResult, RunReport
from healthcheck.services.prober import HttpFailure, ProbeSuccess, TransportFailure


class EndpointCheck(BaseModel):
    endpoint: str
    outcome: Literal["success", "http_failure", "transport_failure", "error"]
    status_code: int | None = None
    error: str | None = None
    elapsed_ms: int | None = None
    started_at: datetime | None = None
    alerted: bool = False
    delivered: bool | None = None

    @classmethod
    def from_result(cls, result: EndpointResult) -> "EndpointCheck":
        outcome = result.outcome
        check = cls(
            endpoint=result.endpoint,
            outcome="error",
            alerted=result.alert is not None,
            delivered=result.delivery.ok if result.delivery is not None else None,
        )
        if isinstance(outcome, ProbeSuccess):
            check.outcome = "success"
            check.status_code = outcome.status_code
        elif isinstance(outcome, HttpFailure):
            check.outcome = "http_failure"
            check.status_code = outcome.status_code
        elif isinstance(outcome, TransportFailure):
            check.outcome = "transport_failure"
            check.error = f"{outcome.error_kind}: {outcome.error}"
        if outcome is not None:
            check.elapsed_ms = outcome.elapsed_ms
            check.started_at = outcome.started_at
        return check


class RunSummary(BaseModel):
    endpoints_checked: int
    failures: int
    undelivered: int
    results: list[EndpointCheck]

    @classmethod
    def from_report(cls, report: RunReport) -> "RunSummary":
        return cls(
            endpoints_checked=len(report.results),
            failures=len(report.failures),
            undelivered=len(report.undelivered),
            results=[EndpointCheck.from_result(r) for r in report.results],
        )
