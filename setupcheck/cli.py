"""
Command-line interface for the VS Code setup checker.

Runs every environment check and prints a report. Failures are reported,
never signalled through the exit status.
"""

import logging

import click
from rich.console import Console
from rich.markup import escape

from .config import ConfigError, ConfigLoader, SetupConfig
from .log import configure_logging
from .preflight.checker import SetupChecker
from .report import Reporter

console = Console(highlight=False)
logger = logging.getLogger(__name__)


def _load_config() -> SetupConfig:
    """Load the configuration, falling back to defaults if it is broken."""
    try:
        return ConfigLoader().load()
    except ConfigError as e:
        logger.warning("Ignoring configuration: %s", e)
        console.print(f"[yellow]⚠ {escape(str(e))}[/yellow]")
        console.print("[yellow]  Continuing with the default configuration.[/yellow]")
        return SetupConfig()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main():
    """
    VS Code Mobile Development Setup Verification Script

    \b
    WHAT THIS SCRIPT DOES:
      Automatically verifies your development environment setup including:
      - Software installation (Node.js, VS Code, Git)
      - VS Code extensions (GitLens, p5js, Live Server, etc.)
      - Git configuration (username, email)
      - Repository status and structure (if run from a repo)

    \b
    OUTPUT:
      ✓ Green checkmarks = Passed
      ✗ Red X marks = Failed (with fix instructions)
      ⚠ Yellow warnings = Attention needed

    \b
    CRITICALITY LEVELS:
      🔴 CRITICAL   - Must be fixed for development to work
      🟡 IMPORTANT  - Recommended for full functionality
      🟢 OPTIONAL   - Nice to have, but not required

    \b
    TROUBLESHOOTING:
      Each failed check includes:
      - Why it's important (criticality level)
      - How to fix it (automated script or manual steps)
      - Links to relevant documentation

    \b
    For detailed setup instructions, see:
    https://github.com/DigitalFuturesOCADU/atelier1-fall2025/tree/main/guide
    """
    configure_logging()

    config = _load_config()
    checker = SetupChecker(
        config=config,
        reporter=Reporter(guide_url=config.guide_url, console=console),
    )
    checker.run_all()


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    main()
