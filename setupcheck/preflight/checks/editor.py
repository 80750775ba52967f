"""
VS Code Installation Validation

Locates the VS Code command line launcher, on the search path or in one of
the standard installation folders.
"""

import logging
from typing import List, Mapping, Optional, Tuple

from ...executor import CommandRunner
from ...platforms import (
    EDITOR_COMMANDS,
    LOCATE_COMMANDS,
    Platform,
    candidate_editor_paths,
    find_first_existing,
)
from ..models import CheckSeverity, ProbeReport

logger = logging.getLogger(__name__)


def is_editor_in_path(runner: CommandRunner, platform: Platform) -> bool:
    """Check whether the bare ``code`` command resolves on the search path."""
    return bool(runner.run(LOCATE_COMMANDS[platform]))


def find_editor(
    runner: CommandRunner,
    platform: Platform,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[str] = None,
) -> Optional[str]:
    """
    Find the VS Code launcher.

    Args:
        runner: Command runner
        platform: Platform family
        env: Environment used to expand installation paths
        home: Home directory used to expand installation paths

    Returns:
        The bare command name if it is on the search path, otherwise the
        first existing installation path, or None
    """
    if is_editor_in_path(runner, platform):
        return EDITOR_COMMANDS[platform]

    candidates = candidate_editor_paths(platform, env=env, home=home)
    found = find_first_existing(candidates, runner.exists)
    logger.debug("Editor not on PATH, installation lookup returned %s", found)
    return found


def _add_to_path_steps(platform: Platform) -> List[str]:
    if platform == Platform.MACOS:
        return [
            "To add VS Code to PATH:",
            "  1. Open VS Code",
            "  2. Press Cmd+Shift+P to open Command Palette",
            '  3. Type "shell command"',
            "  4. Select \"Shell Command: Install 'code' command in PATH\"",
            "  5. Restart terminal",
            "",
            "Note: This is OPTIONAL. Extensions check will still work.",
        ]
    if platform == Platform.WINDOWS:
        return [
            "To add VS Code to PATH:",
            "  1. Reinstall VS Code from: https://code.visualstudio.com/download",
            '  2. During installation, check "Add to PATH" option',
            "  3. Restart your computer",
            "",
            "Note: This is OPTIONAL. Extensions check will still work.",
        ]
    return [
        "Add VS Code to your PATH manually or reinstall from:",
        "https://code.visualstudio.com/download",
    ]


def _install_steps(platform: Platform) -> List[str]:
    if platform == Platform.MACOS:
        os_step = "For Mac: Download the .dmg file and drag to Applications"
    elif platform == Platform.WINDOWS:
        os_step = 'For Windows: Download the installer and check "Add to PATH"'
    else:
        os_step = "Follow the installation instructions for your OS"

    return [
        "Download and install VS Code from: https://code.visualstudio.com/download",
        os_step,
        "Restart your terminal after installation",
    ]


def check_editor(
    runner: CommandRunner,
    platform: Platform,
    guide_url: str,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[str] = None,
) -> Tuple[ProbeReport, Optional[str]]:
    """
    Check VS Code installation and PATH configuration.

    Args:
        runner: Command runner
        platform: Platform family
        guide_url: Setup guide link for fix instructions
        env: Environment used to expand installation paths
        home: Home directory used to expand installation paths

    Returns:
        The probe report and the launcher to use for later commands
        (None when VS Code was not found)
    """
    report = ProbeReport(title="Checking VS Code Installation")

    editor_path = find_editor(runner, platform, env=env, home=home)

    if editor_path:
        version = runner.run([editor_path, "--version"])

        if version:
            version_number = version.splitlines()[0]

            if is_editor_in_path(runner, platform):
                report.success(
                    "VS Code is installed and in PATH",
                    "VS Code in PATH",
                    f"Version: {version_number}",
                )
            else:
                report.success("VS Code is installed", "VS Code installed", f"Version: {version_number}")
                report.warning(
                    "VS Code is NOT in PATH",
                    "VS Code not in PATH",
                    "Recommended for better terminal integration",
                    severity=CheckSeverity.OPTIONAL,
                    fix=_add_to_path_steps(platform),
                )

            return report, editor_path

    report.failure(
        "VS Code is NOT installed",
        "VS Code not found",
        "Required for development",
        severity=CheckSeverity.CRITICAL,
        fix=_install_steps(platform),
        link=guide_url,
    )
    return report, None
