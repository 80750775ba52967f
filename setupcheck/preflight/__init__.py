"""
Setup Check Module

Verifies the local development environment and collects the results.
The orchestrator lives in ``setupcheck.preflight.checker``.
"""

from .models import CheckResult, CheckSeverity, CheckStatus, ProbeReport, SetupResults, SummaryVerdict

__all__ = [
    "CheckResult",
    "CheckSeverity",
    "CheckStatus",
    "ProbeReport",
    "SetupResults",
    "SummaryVerdict",
]
