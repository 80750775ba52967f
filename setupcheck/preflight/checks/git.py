"""
Git Installation & Identity Validation

Checks that Git is installed and that commits will carry a name and email.
"""

from typing import Iterable, List

from ...executor import CommandRunner
from ...platforms import Platform
from ..models import CheckSeverity, ProbeReport


def is_institutional_email(email: str, domains: Iterable[str]) -> bool:
    """Check whether an email contains one of the institutional domains."""
    email = email.lower()
    return any(domain.lower() in email for domain in domains)


def _install_steps(platform: Platform) -> List[str]:
    if platform == Platform.MACOS:
        return [
            "Install Xcode Command Line Tools:",
            "  Run: xcode-select --install",
            "Follow the installation prompts",
            "Or download Git from: https://git-scm.com/downloads",
        ]
    return [
        "Download Git from: https://git-scm.com/downloads",
        "Run the installer",
        "Use default settings",
        "Restart your terminal after installation",
    ]


def check_git(
    runner: CommandRunner,
    platform: Platform,
    institutional_domains: Iterable[str],
    guide_url: str,
) -> ProbeReport:
    """
    Check Git installation and global identity.

    Identity is only queried once Git itself is known to work.

    Args:
        runner: Command runner
        platform: Platform family
        institutional_domains: Email fragments that count as institutional
        guide_url: Setup guide link for fix instructions

    Returns:
        Probe report for the Git section
    """
    report = ProbeReport(title="Checking Git Installation & Configuration")

    git_version = runner.run(["git", "--version"])

    if not git_version:
        report.failure(
            "Git is NOT installed",
            "Git not found",
            "Required for version control",
            severity=CheckSeverity.CRITICAL,
            fix=_install_steps(platform),
            link=guide_url,
        )
        return report

    report.success("Git is installed", "Git installed", git_version)

    user_name = runner.run(["git", "config", "--global", "user.name"])
    user_email = runner.run(["git", "config", "--global", "user.email"])

    if user_name:
        report.success("Git user.name is configured", "Git user.name set", f"Name: {user_name}")
    else:
        report.failure(
            "Git user.name is NOT configured",
            "Git user.name not set",
            "Required for Git commits",
            severity=CheckSeverity.CRITICAL,
            fix=[
                "Run this command in terminal:",
                '  git config --global user.name "Your Full Name"',
                "",
                "Example:",
                '  git config --global user.name "Jane Smith"',
            ],
        )

    if not user_email:
        report.failure(
            "Git user.email is NOT configured",
            "Git user.email not set",
            "Required for Git commits",
            severity=CheckSeverity.CRITICAL,
            fix=[
                "Run this command in terminal:",
                '  git config --global user.email "your.email@ocadu.ca"',
                "",
                "Example:",
                '  git config --global user.email "jane.smith@ocadu.ca"',
            ],
        )
        return report

    report.success("Git user.email is configured", "Git user.email set", f"Email: {user_email}")

    if is_institutional_email(user_email, institutional_domains):
        report.success("Using OCADU email address", "OCADU email configured")
    else:
        report.warning(
            "Not using OCADU email address",
            "Non-OCADU email",
            "Recommended for GitHub Education benefits",
            severity=CheckSeverity.OPTIONAL,
            fix=[
                "To use your OCADU email:",
                '  git config --global user.email "your.email@ocadu.ca"',
                "",
                f"Current email: {user_email}",
                "",
                "Note: This is OPTIONAL. Your current setup works fine.",
                "OCADU email only needed for GitHub Education benefits.",
            ],
        )

    return report
