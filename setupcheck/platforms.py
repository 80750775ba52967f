"""
Platform Detection

Maps the host operating system to the commands and installation paths
used to locate VS Code.
"""

import ntpath
import os
import posixpath
import sys
from enum import Enum
from string import Formatter
from typing import Callable, Dict, List, Mapping, Optional


class Platform(str, Enum):
    """Operating system families with distinct editor layouts."""
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


def detect_platform(name: Optional[str] = None) -> Platform:
    """
    Detect the platform family.

    Args:
        name: A ``sys.platform`` style value; the running interpreter's when omitted
    """
    name = name or sys.platform
    if name.startswith("win"):
        return Platform.WINDOWS
    if name == "darwin":
        return Platform.MACOS
    return Platform.LINUX


# Commands that resolve the bare editor command on the search path
LOCATE_COMMANDS: Dict[Platform, List[str]] = {
    Platform.LINUX: ["which", "code"],
    Platform.MACOS: ["which", "code"],
    Platform.WINDOWS: ["where", "code.cmd"],
}

EDITOR_COMMANDS: Dict[Platform, str] = {
    Platform.LINUX: "code",
    Platform.MACOS: "code",
    Platform.WINDOWS: "code.cmd",
}

# Conventional installation paths, tried in order. Placeholders are filled
# from the environment; the fallbacks apply when a variable is unset.
EDITOR_PATH_TEMPLATES: Dict[Platform, List[str]] = {
    Platform.LINUX: [
        "/usr/bin/code",
        "/usr/local/bin/code",
        "{home}/.vscode-server/bin/code",
    ],
    Platform.MACOS: [
        "/Applications/Visual Studio Code.app/Contents/Resources/app/bin/code",
        "{home}/Applications/Visual Studio Code.app/Contents/Resources/app/bin/code",
    ],
    Platform.WINDOWS: [
        "{localappdata}\\Programs\\Microsoft VS Code\\bin\\code.cmd",
        "{programfiles}\\Microsoft VS Code\\bin\\code.cmd",
        "{programfiles_x86}\\Microsoft VS Code\\bin\\code.cmd",
    ],
}


def _path_variables(env: Mapping[str, str], home: str) -> Dict[str, str]:
    return {
        "home": home,
        "localappdata": env.get("LOCALAPPDATA", ""),
        "programfiles": env.get("PROGRAMFILES") or "C:\\Program Files",
        "programfiles_x86": env.get("PROGRAMFILES(X86)") or "C:\\Program Files (x86)",
    }


def candidate_editor_paths(
    platform: Platform,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[str] = None,
) -> List[str]:
    """
    Expand the installation path table for a platform.

    Args:
        platform: Platform family
        env: Environment variables (defaults to os.environ)
        home: Home directory (defaults to the current user's)

    Returns:
        Candidate paths in lookup order; templates whose variables are
        unset are left out
    """
    env = os.environ if env is None else env
    home = home if home is not None else os.path.expanduser("~")
    variables = _path_variables(env, home)
    pathmod = ntpath if platform == Platform.WINDOWS else posixpath

    candidates = []
    for template in EDITOR_PATH_TEMPLATES[platform]:
        fields = [name for _, name, _, _ in Formatter().parse(template) if name]
        if any(not variables[name] for name in fields):
            continue
        candidates.append(pathmod.normpath(template.format(**variables)))
    return candidates


def find_first_existing(
    candidates: List[str],
    exists: Callable[[str], bool],
) -> Optional[str]:
    """Return the first candidate the predicate accepts, or None."""
    for candidate in candidates:
        if exists(candidate):
            return candidate
    return None
