"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
import subprocess
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that run the git CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    return cmd_func(*args, **kwargs).run()


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture(autouse=True)
def gdiffs_home(tmp_path: Path, monkeypatch) -> Path:
    """Point GDIFFS_HOME at an empty per-test directory.

    Returns:
        Path to the gdiffs home directory
    """
    home = tmp_path / "gdiffs_home"
    home.mkdir()
    monkeypatch.setenv("GDIFFS_HOME", str(home))
    return home


@pytest.fixture
def write_config(gdiffs_home: Path):
    """Return a helper that writes a config dict to $GDIFFS_HOME/config.json."""

    def _write(config: dict) -> Path:
        path = gdiffs_home / "config.json"
        path.write_text(json.dumps(config))
        return path

    return _write


# =============================================================================
# Git Helpers
# =============================================================================


def git(repo: Path, *args: str) -> str:
    """Run git in repo and return stdout."""
    result = subprocess.run(
        ["git", "-C", str(repo), *args],
        capture_output=True,
        text=True,
        check=True,
        timeout=30,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A repository on `main` with one commit and a `feature` branch checked out.

    Base commit: src/app.py, src/util.py, README.md, old.txt
    Feature commit: edits src/app.py, deletes old.txt, adds docs/guide.md,
    renames src/util.py to src/helpers.py
    """
    if not shutil.which("git"):
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q", "-b", "main")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test")
    git(repo, "config", "commit.gpgsign", "false")

    (repo / "src").mkdir()
    (repo / "src" / "app.py").write_text("def main():\n    print('hello')\n    return 0\n")
    (repo / "src" / "util.py").write_text("".join(f"line {i}\n" for i in range(20)))
    (repo / "README.md").write_text("# Demo\n")
    (repo / "old.txt").write_text("obsolete\n")
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "base")

    git(repo, "checkout", "-q", "-b", "feature")
    (repo / "src" / "app.py").write_text("def main():\n    print('hello, world')\n    log('done')\n    return 0\n")
    (repo / "old.txt").unlink()
    (repo / "docs").mkdir()
    (repo / "docs" / "guide.md").write_text("Guide\n")
    git(repo, "mv", "src/util.py", "src/helpers.py")
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "feature")
    return repo
