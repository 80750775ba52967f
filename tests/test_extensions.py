"""Tests for the VS Code extension probe."""

from conftest import FakeRunner

from setupcheck.platforms import Platform
from setupcheck.preflight.checks.extensions import check_extensions, install_command, parse_extension_list
from setupcheck.preflight.models import CheckSeverity, CheckStatus, SetupResults

GUIDE = "https://example.test/guide"
LINUX_PATH = "/usr/local/bin/code"


def test_skips_when_editor_unknown(config):
    runner = FakeRunner()

    report = check_extensions(runner, None, config.extensions, Platform.LINUX, GUIDE)

    assert len(report.notes) == 1
    assert report.results == []
    assert runner.calls == []
    assert SetupResults().merge(report).total == 0


def test_list_failure_is_soft(config):
    runner = FakeRunner()

    report = check_extensions(runner, "code", config.extensions, Platform.LINUX, GUIDE)

    assert report.results == []
    assert report.notes[0] == "Could not retrieve extensions list"


def test_all_installed_any_case(config, all_extensions):
    runner = FakeRunner({("code", "--list-extensions"): all_extensions.upper()})

    report = check_extensions(runner, "code", config.extensions, Platform.LINUX, GUIDE)
    results = SetupResults().merge(report)

    assert len(results.passed) == 5
    assert results.failed == []
    assert results.critical == results.important == results.optional == []


def test_mixed_case_identifier_counts_as_installed(config):
    runner = FakeRunner({("code", "--list-extensions"): "RitwickDey.LiveServer"})

    report = check_extensions(runner, "code", config.extensions, Platform.LINUX, GUIDE)
    live_server = [r for r in report.results if r.label == "Extension: Live Server"][0]

    assert live_server.status == CheckStatus.SUCCESS


def test_missing_extensions_use_table_severity(config):
    runner = FakeRunner({
        ("code", "--list-extensions"): "eamodio.gitlens\nms-python.python",
        ("which", "code"): "/usr/bin/code",
    })

    report = check_extensions(runner, "code", config.extensions, Platform.LINUX, GUIDE)
    results = SetupResults().merge(report)

    assert results.passed == ["Extension: GitLens"]
    assert len(results.failed) == 4
    assert results.critical == ["Extension: P5 Project Creator", "Extension: Live Server"]
    assert results.important == ["Extension: p5js Snippets"]
    assert results.optional == ["Extension: GitHub Actions"]

    creator = report.results[2]
    assert creator.severity == CheckSeverity.CRITICAL
    assert creator.details == "Required to create P5.js projects in VS Code"
    assert creator.fix[1] == "  code --install-extension ultamatum.p5-project-creator"


def test_install_command_uses_full_path_outside_path(config):
    runner = FakeRunner({(LINUX_PATH, "--list-extensions"): "eamodio.gitlens"})

    report = check_extensions(runner, LINUX_PATH, config.extensions, Platform.LINUX, GUIDE)
    failure = report.results[1]

    assert failure.fix[1] == f'  "{LINUX_PATH}" --install-extension acidic9.p5js-snippets'
    assert runner.calls.count(("which", "code")) == 1


def test_parse_extension_list():
    assert parse_extension_list("A.B\n\n  c.d  \n") == {"a.b", "c.d"}


def test_install_command():
    assert install_command("x.y", "/opt/code", True) == "code --install-extension x.y"
    assert install_command("x.y", "/opt/code", False) == '"/opt/code" --install-extension x.y'
