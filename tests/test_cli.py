"""Tests for the command-line entry point."""

import pytest
from click.testing import CliRunner

from setupcheck import cli as cli_module
from setupcheck.config.loader import CONFIG_ENV
from setupcheck.preflight.models import SetupResults


class RecordingChecker:
    """Stands in for SetupChecker and records how it was used."""

    instances = []

    def __init__(self, config=None, reporter=None, **kwargs):
        self.config = config
        self.reporter = reporter
        self.ran = False
        RecordingChecker.instances.append(self)

    def run_all(self):
        self.ran = True
        self.reporter.summary(SetupResults(failed=["Git not found"], critical=["Git not found"]))
        return SetupResults()


@pytest.fixture(autouse=True)
def recording_checker(monkeypatch):
    RecordingChecker.instances = []
    monkeypatch.setattr(cli_module, "SetupChecker", RecordingChecker)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    return RecordingChecker


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_exits_before_any_probe(flag):
    result = CliRunner().invoke(cli_module.main, [flag])

    assert result.exit_code == 0
    assert "WHAT THIS SCRIPT DOES" in result.output
    assert RecordingChecker.instances == []


def test_unknown_flag_rejected():
    result = CliRunner().invoke(cli_module.main, ["--json"])
    assert result.exit_code != 0
    assert RecordingChecker.instances == []


def test_run_exits_zero_even_with_failures():
    result = CliRunner().invoke(cli_module.main, [])

    assert result.exit_code == 0
    assert RecordingChecker.instances[0].ran
    assert "CRITICAL issues found" in result.output


def test_broken_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("command_timeout: -5\n")

    result = CliRunner().invoke(cli_module.main, [], env={CONFIG_ENV: str(path)})

    assert result.exit_code == 0
    assert "Continuing with the default configuration" in result.output
    assert RecordingChecker.instances[0].config.command_timeout is None


def test_config_file_is_used(tmp_path):
    path = tmp_path / "setup.yaml"
    path.write_text("command_timeout: 20\n")

    result = CliRunner().invoke(cli_module.main, [], env={CONFIG_ENV: str(path)})

    assert result.exit_code == 0
    assert RecordingChecker.instances[0].config.command_timeout == 20
