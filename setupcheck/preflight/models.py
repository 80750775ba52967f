"""
Setup Check Models

Shared data types for environment verification.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CheckStatus(str, Enum):
    """Outcome of a single check."""
    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"


class CheckSeverity(str, Enum):
    """Severity levels for failures and actionable warnings."""
    CRITICAL = "critical"
    IMPORTANT = "important"
    OPTIONAL = "optional"


class SummaryVerdict(str, Enum):
    """Overall verdict printed at the end of a run."""
    ALL_CLEAR = "all_clear"
    OPTIONAL_ONLY = "optional_only"
    MUST_FIX = "must_fix"
    NEEDS_ATTENTION = "needs_attention"


@dataclass
class CheckResult:
    """Result of a single check."""
    status: CheckStatus
    message: str
    label: str
    details: str = ""
    severity: Optional[CheckSeverity] = None
    fix: List[str] = field(default_factory=list)
    link: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.SUCCESS

    def __str__(self) -> str:
        status = {
            CheckStatus.SUCCESS: "PASS",
            CheckStatus.FAILURE: "FAIL",
            CheckStatus.WARNING: "WARN",
        }[self.status]
        return f"[{status}] {self.label}: {self.message}"


@dataclass
class ProbeReport:
    """Everything a single probe produced, in display order."""
    title: str
    results: List[CheckResult] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def add(self, result: CheckResult) -> CheckResult:
        self.results.append(result)
        return result

    def success(self, message: str, label: str, details: str = "") -> CheckResult:
        return self.add(CheckResult(
            status=CheckStatus.SUCCESS,
            message=message,
            label=label,
            details=details,
        ))

    def failure(
        self,
        message: str,
        label: str,
        details: str = "",
        severity: Optional[CheckSeverity] = None,
        fix: Optional[List[str]] = None,
        link: Optional[str] = None,
    ) -> CheckResult:
        return self.add(CheckResult(
            status=CheckStatus.FAILURE,
            message=message,
            label=label,
            details=details,
            severity=severity,
            fix=fix or [],
            link=link,
        ))

    def warning(
        self,
        message: str,
        label: str,
        details: str = "",
        severity: Optional[CheckSeverity] = None,
        fix: Optional[List[str]] = None,
        link: Optional[str] = None,
    ) -> CheckResult:
        return self.add(CheckResult(
            status=CheckStatus.WARNING,
            message=message,
            label=label,
            details=details,
            severity=severity,
            fix=fix or [],
            link=link,
        ))

    def note(self, text: str) -> None:
        self.notes.append(text)


@dataclass
class SetupResults:
    """
    Accumulated outcome of every probe in a run.

    Successes land only in ``passed``. Failures land in ``failed`` and
    warnings in ``warnings``; either one additionally lands in exactly one
    severity bucket when it carries a severity.
    """
    passed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    critical: List[str] = field(default_factory=list)
    important: List[str] = field(default_factory=list)
    optional: List[str] = field(default_factory=list)

    def record(self, result: CheckResult) -> None:
        """Add a single check result to the matching lists."""
        if result.status == CheckStatus.SUCCESS:
            self.passed.append(result.label)
            return

        if result.status == CheckStatus.FAILURE:
            self.failed.append(result.label)
        else:
            self.warnings.append(result.label)

        if result.severity is not None:
            self._bucket(result.severity).append(result.label)

    def merge(self, report: ProbeReport) -> "SetupResults":
        """Record every result of a probe report. Notes are not counted."""
        for result in report.results:
            self.record(result)
        return self

    def _bucket(self, severity: CheckSeverity) -> List[str]:
        return {
            CheckSeverity.CRITICAL: self.critical,
            CheckSeverity.IMPORTANT: self.important,
            CheckSeverity.OPTIONAL: self.optional,
        }[severity]

    @property
    def total(self) -> int:
        return len(self.passed) + len(self.failed) + len(self.warnings)

    @property
    def completion_rate(self) -> int:
        """Percentage of passed checks rounded half up, 0 when nothing was checked."""
        if self.total == 0:
            return 0
        return math.floor(len(self.passed) / self.total * 100 + 0.5)

    def verdict(self) -> SummaryVerdict:
        """Pick the summary message; the branches are checked in order."""
        if not self.failed and not self.warnings:
            return SummaryVerdict.ALL_CLEAR
        if not self.critical and not self.important:
            return SummaryVerdict.OPTIONAL_ONLY
        if self.critical:
            return SummaryVerdict.MUST_FIX
        return SummaryVerdict.NEEDS_ATTENTION
