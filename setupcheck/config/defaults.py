"""
Default values for a verification run.

The course setup this tool checks against: the required extensions,
the institutional email domains, and the manual checklist.
"""

from typing import Any, Dict, List

DEFAULT_GUIDE_URL = "https://github.com/DigitalFuturesOCADU/atelier1-fall2025/tree/main/guide"

DEFAULT_HOSTING_DOMAIN = "github.com"

DEFAULT_INSTITUTIONAL_DOMAINS = ["@ocadu.ca", "@ocad.ca"]

PACKAGE_COMMAND = "setup-check"


DEFAULT_EXTENSIONS: List[Dict[str, Any]] = [
    {
        "id": "eamodio.gitlens",
        "name": "GitLens",
        "severity": "important",
        "reason": "Enhances Git workflow and visualization",
    },
    {
        "id": "acidic9.p5js-snippets",
        "name": "p5js Snippets",
        "severity": "important",
        "reason": "Provides code snippets for P5.js development",
    },
    {
        "id": "ultamatum.p5-project-creator",
        "name": "P5 Project Creator",
        "severity": "critical",
        "reason": "Required to create P5.js projects in VS Code",
    },
    {
        "id": "ritwickdey.liveserver",
        "name": "Live Server",
        "severity": "critical",
        "reason": "Required to run local development server",
    },
    {
        "id": "github.vscode-github-actions",
        "name": "GitHub Actions",
        "severity": "optional",
        "reason": "Helpful for managing GitHub deployments",
    },
]


MANUAL_CHECKLIST: List[str] = [
    "GitHub account created with @ocadu.ca email",
    "Signed into VS Code with GitHub account",
    "GitHub Desktop installed and signed in",
    "GitHub Mobile app installed on phone",
    "GitLens extension authorized in VS Code",
    "GitHub Actions extension authorized in VS Code",
    "GitHub Copilot Pro subscription activated",
    "Two-factor authentication enabled on GitHub",
    "GitHub repository created with Pages enabled",
    "GitHub Actions workflow configured",
    "Repository cloned locally",
    "Can create P5.js project using Command Palette",
    "Live Server can launch local development server",
    "VS Code Tunnel can be created and accessed",
    "Chrome DevTools accessible (F12 or Cmd+Option+I)",
]
