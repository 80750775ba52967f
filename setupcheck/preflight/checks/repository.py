"""
Local Repository Validation

Inspects the Git repository in the current working directory, if any.
"""

import os

from ...config.defaults import PACKAGE_COMMAND
from ...executor import CommandRunner
from ..models import CheckSeverity, ProbeReport


def count_changes(status_output: str) -> int:
    """Count the changed paths in ``git status --porcelain`` output."""
    return len([line for line in status_output.splitlines() if line.strip()])


def check_repository(
    runner: CommandRunner,
    hosting_domain: str,
    guide_url: str,
) -> ProbeReport:
    """
    Check the local repository's remote, branch and working tree.

    Args:
        runner: Command runner
        hosting_domain: Host the remote is expected to live on
        guide_url: Setup guide link for fix instructions

    Returns:
        Probe report for the repository section
    """
    report = ProbeReport(title="Checking Local Repository")

    current_dir = runner.cwd()

    if not runner.exists(os.path.join(current_dir, ".git")):
        report.warning(
            "Current directory is NOT a Git repository",
            "Not in Git repository",
            "Run from your project folder for repository checks",
            severity=CheckSeverity.OPTIONAL,
            fix=[
                "This is OPTIONAL - you can run this script from anywhere.",
                "For repository-specific checks, navigate to your project first:",
                "  cd path/to/your/repository",
                f"  {PACKAGE_COMMAND}",
                "",
                "Or if you don't have a repository yet, see the setup guide.",
                "",
                f"Current directory: {current_dir}",
            ],
            link=guide_url,
        )
        return report

    report.success("Current directory is a Git repository", "Git repository found")

    remote_url = runner.run(["git", "remote", "get-url", "origin"])
    if remote_url:
        report.success("Remote repository configured", "Remote configured", remote_url)
        if hosting_domain in remote_url:
            report.success(f"Repository is hosted on {hosting_domain}", f"Hosted on {hosting_domain}")
    else:
        report.warning(
            "No remote repository configured",
            "No remote configured",
            "Needed for GitHub Pages deployment",
            severity=CheckSeverity.IMPORTANT,
            fix=[
                "Create a GitHub repository first (if you haven't):",
                "  1. Go to https://github.com/new",
                "  2. Create a new repository",
                "",
                "Then connect it to this local repository:",
                "  git remote add origin https://github.com/USERNAME/REPO-NAME.git",
                "  git branch -M main",
                "  git push -u origin main",
                "",
                "Replace USERNAME and REPO-NAME with your details",
            ],
            link=guide_url,
        )

    branch = runner.run(["git", "branch", "--show-current"])
    if branch:
        report.success(f"Current branch: {branch}", f"Branch: {branch}")

    changes = count_changes(runner.run(["git", "status", "--porcelain"]) or "")
    if changes:
        report.warning(
            f"You have {changes} uncommitted change(s)",
            "Uncommitted changes",
            "Not critical, but good practice to commit regularly",
            severity=CheckSeverity.OPTIONAL,
            fix=[
                "To see what files changed:",
                "  git status",
                "",
                "To commit your changes:",
                "  git add .",
                '  git commit -m "Describe your changes"',
                "  git push",
                "",
                "Note: This is OPTIONAL. Uncommitted changes don't break anything.",
            ],
        )
    else:
        report.success("Working directory is clean", "Clean working directory")

    return report
