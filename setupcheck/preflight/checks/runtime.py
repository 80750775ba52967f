"""
Node.js Runtime Validation

Checks that Node.js and npm are available.
"""

from ...executor import CommandRunner
from ..models import CheckSeverity, ProbeReport


def check_runtime(runner: CommandRunner, guide_url: str) -> ProbeReport:
    """
    Check Node.js and npm installation.

    Args:
        runner: Command runner
        guide_url: Setup guide link for fix instructions

    Returns:
        Probe report for the runtime section
    """
    report = ProbeReport(title="Checking Node.js Installation")

    node_version = runner.run(["node", "--version"])
    npm_version = runner.run(["npm", "--version"])

    if node_version:
        report.success("Node.js is installed", "Node.js installed", node_version)
    else:
        report.failure(
            "Node.js is NOT installed",
            "Node.js not found",
            "Required to run this verification script",
            severity=CheckSeverity.IMPORTANT,
            fix=[
                "Download Node.js LTS version from: https://nodejs.org/",
                "Run the installer (includes npm)",
                "Use default installation settings",
                "Restart terminal after installation",
            ],
            link=guide_url,
        )

    if npm_version:
        report.success("npm is installed", "npm installed", f"Version: {npm_version}")
    else:
        report.warning(
            "npm is NOT installed",
            "npm not found",
            "Useful for managing packages",
            severity=CheckSeverity.OPTIONAL,
            fix=[
                "npm usually comes with Node.js",
                "Try reinstalling Node.js from: https://nodejs.org/",
                "",
                "Note: Not required for basic P5.js development",
            ],
        )

    return report
