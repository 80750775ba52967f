"""Tests for the local repository probe."""

import os

from conftest import FakeRunner

from setupcheck.preflight.checks.repository import check_repository, count_changes
from setupcheck.preflight.models import CheckSeverity, CheckStatus, SetupResults

GUIDE = "https://example.test/guide"
CWD = "/work/project"
GIT_DIR = os.path.join(CWD, ".git")


def test_outside_repository_single_optional_warning():
    runner = FakeRunner(cwd=CWD)

    report = check_repository(runner, "github.com", GUIDE)

    assert len(report.results) == 1
    warning = report.results[0]
    assert warning.status == CheckStatus.WARNING
    assert warning.severity == CheckSeverity.OPTIONAL
    assert f"Current directory: {CWD}" in warning.fix
    assert runner.calls == []


def test_clean_github_repository():
    runner = FakeRunner({
        ("git", "remote", "get-url", "origin"): "https://github.com/student/sketches.git",
        ("git", "branch", "--show-current"): "main",
        ("git", "status", "--porcelain"): "\n",
    }, paths={GIT_DIR}, cwd=CWD)

    report = check_repository(runner, "github.com", GUIDE)
    results = SetupResults().merge(report)

    assert results.passed == [
        "Git repository found",
        "Remote configured",
        "Hosted on github.com",
        "Branch: main",
        "Clean working directory",
    ]
    assert results.total == 5


def test_missing_remote_is_important_warning():
    runner = FakeRunner({("git", "status", "--porcelain"): ""}, paths={GIT_DIR}, cwd=CWD)

    report = check_repository(runner, "github.com", GUIDE)
    results = SetupResults().merge(report)

    assert results.important == ["No remote configured"]
    assert "Branch: main" not in results.passed
    assert "Clean working directory" in results.passed


def test_remote_on_other_host_has_no_hosting_success():
    runner = FakeRunner({
        ("git", "remote", "get-url", "origin"): "git@gitlab.com:student/sketches.git",
    }, paths={GIT_DIR}, cwd=CWD)

    report = check_repository(runner, "github.com", GUIDE)
    labels = [r.label for r in report.results]

    assert "Remote configured" in labels
    assert "Hosted on github.com" not in labels


def test_uncommitted_changes_counted():
    runner = FakeRunner({
        ("git", "remote", "get-url", "origin"): "https://github.com/student/sketches.git",
        ("git", "status", "--porcelain"): " M sketch.js\n?? assets/\nA  index.html\n",
    }, paths={GIT_DIR}, cwd=CWD)

    report = check_repository(runner, "github.com", GUIDE)
    warning = report.results[-1]

    assert warning.status == CheckStatus.WARNING
    assert warning.severity == CheckSeverity.OPTIONAL
    assert warning.message == "You have 3 uncommitted change(s)"


def test_count_changes():
    assert count_changes("\n") == 0
    assert count_changes("") == 0
    assert count_changes(" M a.js\n M b.js") == 2


def test_hosting_message_follows_configured_domain():
    runner = FakeRunner({
        ("git", "remote", "get-url", "origin"): "git@gitlab.com:student/sketches.git",
    }, paths={GIT_DIR}, cwd=CWD)

    report = check_repository(runner, "gitlab.com", GUIDE)
    hosted = report.results[2]

    assert hosted.message == "Repository is hosted on gitlab.com"
    assert hosted.label == "Hosted on gitlab.com"
    assert "GitHub" not in hosted.message
