"""
VS Code Extension Validation

Compares the installed extension list against the required extensions.
"""

from typing import Iterable, Optional, Set

from ...config.models import ExtensionRequirement
from ...executor import CommandRunner
from ...platforms import Platform
from ..models import ProbeReport
from .editor import is_editor_in_path


def parse_extension_list(output: str) -> Set[str]:
    """Turn ``code --list-extensions`` output into lowercase identifiers."""
    return {line.strip().lower() for line in output.splitlines() if line.strip()}


def install_command(extension_id: str, editor_path: str, in_path: bool) -> str:
    """Ready-to-run command that installs an extension."""
    if in_path:
        return f"code --install-extension {extension_id}"
    return f'"{editor_path}" --install-extension {extension_id}'


def check_extensions(
    runner: CommandRunner,
    editor_path: Optional[str],
    extensions: Iterable[ExtensionRequirement],
    platform: Platform,
    guide_url: str,
) -> ProbeReport:
    """
    Check required VS Code extensions.

    Args:
        runner: Command runner
        editor_path: Launcher found by the editor check, or None
        extensions: ExtensionRequirement entries, in report order
        platform: Platform family
        guide_url: Setup guide link for fix instructions

    Returns:
        Probe report; only notes when the list cannot be obtained
    """
    report = ProbeReport(title="Checking VS Code Extensions")

    if not editor_path:
        report.note("Skipping extensions check - VS Code not found. Install VS Code first, then run this script again")
        return report

    output = runner.run([editor_path, "--list-extensions"])

    if not output:
        report.note("Could not retrieve extensions list")
        report.note("This might be a temporary issue. Try running the script again.")
        report.note("Or manually verify extensions in VS Code (Cmd/Ctrl+Shift+X)")
        return report

    installed = parse_extension_list(output)
    in_path: Optional[bool] = None

    for extension in extensions:
        if extension.id.lower() in installed:
            report.success(f"{extension.name} is installed", f"Extension: {extension.name}")
            continue

        if in_path is None:
            in_path = is_editor_in_path(runner, platform)

        report.failure(
            f"{extension.name} is NOT installed",
            f"Extension: {extension.name}",
            extension.reason,
            severity=extension.severity,
            fix=[
                "Quick install: Run this command in terminal:",
                f"  {install_command(extension.id, editor_path, in_path)}",
                "",
                "Or install manually:",
                "  1. Open VS Code",
                "  2. Press Cmd+Shift+X (Mac) or Ctrl+Shift+X (Windows)",
                f'  3. Search for "{extension.name}"',
                "  4. Click Install",
            ],
            link=guide_url,
        )

    return report
