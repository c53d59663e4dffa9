from __future__ import annotations

from datetime import datetime

import httpx

from healthcheck.alerts.base import Alert
from healthcheck.services.prober import HttpFailure, ProbeOutcome, ProbeSuccess, TransportFailure


def format_alert(endpoint: str, outcome: ProbeOutcome, observed_at: datetime) -> Alert:
    """Render the subject/body pair for a failed probe.

    Output depends only on the arguments, so repeated calls with the same
    outcome and timestamp produce identical text.
    """
    if isinstance(outcome, ProbeSuccess):
        raise ValueError("cannot format an alert for a successful probe")

    checked = observed_at.isoformat()
    elapsed = f"{outcome.elapsed_ms:,}ms"

    if isinstance(outcome, TransportFailure):
        subject = f"Health Check Failed for {endpoint}: Exception"
        body = (
            f"The health check for endpoint {endpoint} failed at {checked} "
            f"with an exception after {elapsed}:\n\n"
            f"{outcome.error_kind}: {outcome.error}."
        )
    elif isinstance(outcome, HttpFailure):
        code = outcome.status_code
        reason = httpx.codes.get_reason_phrase(code) or "Unknown"
        subject = f"Health Check Failed for {endpoint}: {code}"
        body = (
            f"The health check for endpoint {endpoint} failed at {checked} "
            f"with an HTTP status code of {code} ({reason}) after {elapsed}."
        )
    else:
        subject = f"Health Check Failed for {endpoint}"
        body = f"The health check for endpoint {endpoint} failed at {checked} after {elapsed}."

    return Alert(endpoint=endpoint, subject=subject, body=body)
