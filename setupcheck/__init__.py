"""VS Code mobile development setup checker."""

__version__ = "1.0.0"
