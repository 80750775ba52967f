"""Shared fixtures: a fake command runner and a captured console."""

import io
from typing import Dict, List, Optional, Sequence, Set, Tuple

import pytest
from rich.console import Console

from setupcheck.config import SetupConfig
from setupcheck.report import Reporter


class FakeRunner:
    """Returns canned output per command and records every call."""

    def __init__(
        self,
        outputs: Optional[Dict[Tuple[str, ...], str]] = None,
        paths: Optional[Set[str]] = None,
        cwd: str = "/work/project",
    ):
        self.outputs = dict(outputs or {})
        self.paths = set(paths or ())
        self._cwd = cwd
        self.calls: List[Tuple[str, ...]] = []

    def run(self, command: Sequence[str]) -> Optional[str]:
        self.calls.append(tuple(command))
        output = self.outputs.get(tuple(command))
        return output.strip() if output is not None else None

    def exists(self, path: str) -> bool:
        return path in self.paths

    def cwd(self) -> str:
        return self._cwd

    def called(self, *command: str) -> bool:
        return tuple(command) in self.calls


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def config():
    return SetupConfig()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output, config):
    console = Console(file=output, width=200, color_system=None, highlight=False)
    return Reporter(guide_url=config.guide_url, console=console)


ALL_EXTENSIONS = "\n".join([
    "eamodio.gitlens",
    "acidic9.p5js-snippets",
    "ultamatum.p5-project-creator",
    "ritwickdey.liveserver",
    "github.vscode-github-actions",
])


@pytest.fixture
def all_extensions():
    return ALL_EXTENSIONS
