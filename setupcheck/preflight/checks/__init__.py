"""
Setup Check Implementations

Individual probes, one per concern.
"""

from .runtime import check_runtime
from .editor import check_editor, find_editor
from .extensions import check_extensions
from .git import check_git
from .repository import check_repository

__all__ = [
    "check_runtime",
    "check_editor",
    "find_editor",
    "check_extensions",
    "check_git",
    "check_repository",
]
