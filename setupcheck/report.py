"""
Console Report

Renders probe results, the manual checklist and the final summary with rich.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .config.defaults import PACKAGE_COMMAND
from .preflight.models import (
    CheckResult,
    CheckSeverity,
    CheckStatus,
    ProbeReport,
    SetupResults,
    SummaryVerdict,
)

SYMBOLS: Dict[CheckStatus, str] = {
    CheckStatus.SUCCESS: "✓",
    CheckStatus.FAILURE: "✗",
    CheckStatus.WARNING: "⚠",
}

STATUS_COLORS: Dict[CheckStatus, str] = {
    CheckStatus.SUCCESS: "green",
    CheckStatus.FAILURE: "red",
    CheckStatus.WARNING: "yellow",
}

SEVERITY_STYLES: Dict[CheckSeverity, tuple] = {
    CheckSeverity.CRITICAL: ("🔴", "red"),
    CheckSeverity.IMPORTANT: ("🟡", "yellow"),
    CheckSeverity.OPTIONAL: ("🟢", "green"),
}

VERDICT_MESSAGES: Dict[SummaryVerdict, List[tuple]] = {
    SummaryVerdict.ALL_CLEAR: [
        ("🎉 Perfect! All automated checks passed!", "green"),
        ("Please complete the manual verification checklist above.", "cyan"),
    ],
    SummaryVerdict.OPTIONAL_ONLY: [
        ("✅ Your system is working correctly!", "green"),
        ("The failed/warning items are OPTIONAL and don't affect functionality.", "cyan"),
        ("You can safely proceed with development.", "cyan"),
    ],
    SummaryVerdict.MUST_FIX: [
        ("🔴 CRITICAL issues found - these must be fixed!", "red"),
        ("Review the fix instructions above for each critical item.", "yellow"),
    ],
    SummaryVerdict.NEEDS_ATTENTION: [
        ("⚠️  Some recommended items need attention.", "yellow"),
        ("Your system may work, but fixing these will improve functionality.", "cyan"),
    ],
}


class Reporter:
    """Prints everything the user sees during a run."""

    def __init__(self, guide_url: str, console: Optional[Console] = None):
        self.guide_url = guide_url
        self.console = console or Console(highlight=False)

    def _print(self, text: str, style: Optional[str] = None) -> None:
        if style:
            self.console.print(f"[{style}]{escape(text)}[/{style}]", emoji=False, soft_wrap=True)
        else:
            self.console.print(escape(text), emoji=False, soft_wrap=True)

    def banner(self) -> None:
        self.console.print(Panel.fit(
            "VS Code Mobile Development Setup Verification Script",
            border_style="cyan",
        ))

    def header(self, title: str) -> None:
        self.console.print()
        self.console.print("=" * 60)
        self._print(title, "bold")
        self.console.print("=" * 60)
        self.console.print()

    def result(self, result: CheckResult) -> None:
        """Print one check with its severity, fix steps and guide link."""
        self._print(f"{SYMBOLS[result.status]} {result.message}", STATUS_COLORS[result.status])

        if result.details:
            self._print(f"  {result.details}")

        if result.passed:
            return

        if result.severity is not None:
            symbol, color = SEVERITY_STYLES[result.severity]
            self._print(f"  {symbol} Criticality: {result.severity.value.upper()}", color)

        if result.fix:
            self._print("  💡 How to fix:", "cyan")
            for index, step in enumerate(result.fix, start=1):
                self._print(f"     {index}. {step}")

        if result.link:
            self._print(f"  📖 Guide: {result.link}", "blue")

        if result.status == CheckStatus.FAILURE or result.fix:
            self.console.print()

    def probe(self, report: ProbeReport) -> None:
        """Print a probe's section."""
        self.header(report.title)
        for result in report.results:
            self.result(result)
        for index, note in enumerate(report.notes):
            if index == 0:
                self._print(f"⊘ {note}", "yellow")
            else:
                self._print(f"  {note}")

    def manual_checklist(self, items: List[str]) -> None:
        """Print the items that cannot be verified automatically."""
        self.header("Manual Verification Checklist")
        self._print("The following items require manual verification:", "cyan")
        self.console.print()
        for item in items:
            self._print(f"☐ {item}")
        self.console.print()
        self._print("📚 Refer to the setup guides at:", "cyan")
        self._print(f"   {self.guide_url}")

    def summary(self, results: SetupResults) -> SummaryVerdict:
        """Print the tally and the verdict for the run."""
        self.header("Setup Verification Summary")

        self._print(f"✓ Passed: {len(results.passed)}", "green")
        self._print(f"✗ Failed: {len(results.failed)}", "red")
        self._print(f"⚠ Warnings: {len(results.warnings)}", "yellow")
        self.console.print()
        self._print(f"Completion Rate: {results.completion_rate}%")

        if results.critical or results.important or results.optional:
            self.console.print()
            self._print("Failed Items by Criticality:")
            if results.critical:
                self._print(f"  🔴 Critical: {len(results.critical)} - Must fix for development to work", "red")
            if results.important:
                self._print(f"  🟡 Important: {len(results.important)} - Recommended for full functionality", "yellow")
            if results.optional:
                self._print(f"  🟢 Optional: {len(results.optional)} - Nice to have, not required", "green")

        self.console.print()

        verdict = results.verdict()
        for text, style in VERDICT_MESSAGES[verdict]:
            self._print(text, style)

        self.console.print()
        self._print("📚 For detailed guides, visit:")
        self._print(f"   {self.guide_url}")
        self._print(f"❓ For help, run: {PACKAGE_COMMAND} --help")
        self.console.print()

        return verdict
