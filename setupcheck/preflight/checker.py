"""
Setup Checker

Main orchestrator for environment verification.
"""

import logging
from typing import Callable, List, Mapping, Optional

from ..config import SetupConfig
from ..executor import CommandRunner
from ..platforms import Platform, detect_platform
from ..report import Reporter
from .models import ProbeReport, SetupResults
from .checks.runtime import check_runtime
from .checks.editor import check_editor
from .checks.extensions import check_extensions
from .checks.git import check_git
from .checks.repository import check_repository

logger = logging.getLogger(__name__)


class SetupChecker:
    """
    Orchestrates the environment checks.

    Runs every probe in a fixed order and never stops early:
    - Node.js and npm
    - VS Code installation and PATH
    - Required VS Code extensions
    - Git installation and identity
    - Local repository state
    """

    def __init__(
        self,
        config: Optional[SetupConfig] = None,
        runner: Optional[CommandRunner] = None,
        reporter: Optional[Reporter] = None,
        platform: Optional[Platform] = None,
        env: Optional[Mapping[str, str]] = None,
        home: Optional[str] = None,
    ):
        """
        Initialize the checker.

        Args:
            config: SetupConfig to check against (defaults when omitted)
            runner: Command runner (a real one honouring the config timeout when omitted)
            reporter: Console reporter
            platform: Platform family (detected when omitted)
            env: Environment used to expand editor installation paths
            home: Home directory used to expand editor installation paths
        """
        self.config = config or SetupConfig()
        self.runner = runner or CommandRunner(timeout=self.config.command_timeout)
        self.reporter = reporter or Reporter(guide_url=self.config.guide_url)
        self.platform = platform or detect_platform()
        self.env = env
        self.home = home
        self.editor_path: Optional[str] = None

    def probes(self) -> List[Callable[[], ProbeReport]]:
        """Probes in run order. The extension probe reads the editor path."""
        return [
            self.check_runtime,
            self.check_editor,
            self.check_extensions,
            self.check_git,
            self.check_repository,
        ]

    def check_runtime(self) -> ProbeReport:
        return check_runtime(self.runner, self.config.guide_url)

    def check_editor(self) -> ProbeReport:
        report, self.editor_path = check_editor(
            self.runner,
            self.platform,
            self.config.guide_url,
            env=self.env,
            home=self.home,
        )
        return report

    def check_extensions(self) -> ProbeReport:
        return check_extensions(
            self.runner,
            self.editor_path,
            self.config.extensions,
            self.platform,
            self.config.guide_url,
        )

    def check_git(self) -> ProbeReport:
        return check_git(
            self.runner,
            self.platform,
            self.config.institutional_domains,
            self.config.guide_url,
        )

    def check_repository(self) -> ProbeReport:
        return check_repository(
            self.runner,
            self.config.hosting_domain,
            self.config.guide_url,
        )

    def run_checks(self) -> SetupResults:
        """
        Run every probe, printing each section as it completes.

        Returns:
            Accumulated results of all probes
        """
        results = SetupResults()

        for probe in self.probes():
            report = probe()
            for result in report.results:
                logger.debug("%s", result)
            self.reporter.probe(report)
            results.merge(report)

        return results

    def run_all(self) -> SetupResults:
        """
        Run the full verification: banner, probes, checklist and summary.

        Returns:
            Accumulated results of all probes
        """
        self.reporter.banner()
        results = self.run_checks()
        self.reporter.manual_checklist(self.config.manual_checklist)
        self.reporter.summary(results)
        return results

