"""Unit tests for gdiffs.api.git.GitRepo with git calls faked."""

import importlib
import subprocess
from types import SimpleNamespace

import pytest

from gdiffs.api.git.DiffUnavailableError import DiffUnavailableError
from gdiffs.api.git.FileStatus import FileStatus
from gdiffs.api.git.GitError import GitError
from gdiffs.api.git.GitRepo import GitRepo

pytestmark = pytest.mark.unit

# The package re-exports the GitRepo class over its module name.
GIT_REPO_MODULE = importlib.import_module("gdiffs.api.git.GitRepo")


class FakeGit:
    """Stand-in for subprocess.run answering by git arguments."""

    def __init__(self, responses: dict[tuple[str, ...], tuple[int, str]]):
        self.responses = responses
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, cmd, **kwargs):
        args = tuple(cmd[3:])  # drop `git -C <path>`
        self.calls.append(args)
        code, stdout = self.responses.get(args, (1, ""))
        return SimpleNamespace(returncode=code, stdout=stdout, stderr="" if code == 0 else "fatal: bad revision")


@pytest.fixture
def fake_git(monkeypatch):
    def install(responses: dict[tuple[str, ...], tuple[int, str]]) -> FakeGit:
        fake = FakeGit({("rev-parse", "--git-dir"): (0, ".git\n"), **responses})
        monkeypatch.setattr(GIT_REPO_MODULE.subprocess, "run", fake)
        return fake

    return install


class TestGitRepo:
    def test_not_a_repository(self, fake_git, tmp_path):
        fake_git({("rev-parse", "--git-dir"): (128, "")})
        with pytest.raises(GitError, match="Not a git repository"):
            GitRepo(tmp_path)

    def test_git_missing(self, monkeypatch, tmp_path):
        def missing(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(GIT_REPO_MODULE.subprocess, "run", missing)
        with pytest.raises(GitError):
            GitRepo(tmp_path)

    def test_timeout_is_git_error(self, fake_git, monkeypatch, tmp_path):
        fake_git({})
        repo = GitRepo(tmp_path, timeout_seconds=1)

        def slow(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(GIT_REPO_MODULE.subprocess, "run", slow)
        with pytest.raises(GitError, match="failed"):
            repo.current_branch()

    def test_current_branch(self, fake_git, tmp_path):
        fake_git({("rev-parse", "--abbrev-ref", "HEAD"): (0, "feature\n")})
        assert GitRepo(tmp_path).current_branch() == "feature"

    def test_default_branch_prefers_main(self, fake_git, tmp_path):
        fake_git(
            {
                ("rev-parse", "--verify", "--quiet", "main"): (0, "abc\n"),
                ("rev-parse", "--verify", "--quiet", "master"): (0, "def\n"),
            }
        )
        assert GitRepo(tmp_path).default_branch() == "main"

    def test_default_branch_falls_back_to_origin(self, fake_git, tmp_path):
        fake_git({("rev-parse", "--verify", "--quiet", "origin/master"): (0, "abc\n")})
        assert GitRepo(tmp_path).default_branch() == "origin/master"

    def test_default_branch_missing(self, fake_git, tmp_path):
        fake_git({})
        repo = GitRepo(tmp_path)
        with pytest.raises(GitError, match="default branch"):
            repo.default_branch()
        assert repo.resolve_base(None) == "HEAD"
        assert repo.resolve_base("develop") == "develop"

    def test_changed_files_merges_counts(self, fake_git, tmp_path):
        fake_git(
            {
                ("diff", "--name-status", "main...HEAD"): (0, "M\tsrc/app.py\nR100\tsrc/util.py\tsrc/helpers.py\n"),
                ("diff", "--numstat", "main...HEAD"): (0, "2\t1\tsrc/app.py\n0\t0\tsrc/{util.py => helpers.py}\n"),
            }
        )
        files = GitRepo(tmp_path).changed_files("main", "HEAD")

        assert [(f.status, f.path, f.additions, f.deletions) for f in files] == [
            (FileStatus.MODIFIED, "src/app.py", 2, 1),
            (FileStatus.RENAMED, "src/helpers.py", 0, 0),
        ]
        assert files[1].old_path == "src/util.py"

    def test_changed_files_falls_back_to_base_only(self, fake_git, tmp_path):
        fake = fake_git(
            {
                ("diff", "--name-status", "main"): (0, "M\tdirty.py\n"),
                ("diff", "--numstat", "main"): (0, "1\t1\tdirty.py\n"),
            }
        )
        files = GitRepo(tmp_path).changed_files("main", "HEAD")

        assert [(f.path, f.additions) for f in files] == [("dirty.py", 1)]
        assert ("diff", "--name-status", "main...HEAD") in fake.calls

    def test_working_tree_head_skips_range(self, fake_git, tmp_path):
        fake = fake_git({("diff", "--name-status", "main"): (0, "A\tnew.py\n")})
        files = GitRepo(tmp_path).changed_files("main", "")

        assert [f.path for f in files] == ["new.py"]
        assert not any("main..." in arg for call in fake.calls for arg in call)

    def test_numstat_failure_keeps_zero_counts(self, fake_git, tmp_path):
        fake_git({("diff", "--name-status", "main...HEAD"): (0, "M\ta.py\n")})
        [changed] = GitRepo(tmp_path).changed_files("main", "HEAD")
        assert (changed.additions, changed.deletions) == (0, 0)

    def test_changed_files_error(self, fake_git, tmp_path):
        fake_git({})
        with pytest.raises(GitError):
            GitRepo(tmp_path).changed_files("nope", "HEAD")

    def test_file_diff(self, fake_git, tmp_path, sample_diff):
        fake_git({("diff", "main...HEAD", "--", "foo.go"): (0, sample_diff)})
        diff = GitRepo(tmp_path).file_diff("main", "HEAD", "foo.go")
        assert diff.new_path == "foo.go"
        assert len(diff.hunks) == 1

    def test_file_diff_unavailable(self, fake_git, tmp_path):
        fake_git({})
        with pytest.raises(DiffUnavailableError) as excinfo:
            GitRepo(tmp_path).file_diff_text("main", "HEAD", "gone.py")
        assert excinfo.value.path == "gone.py"
        assert str(excinfo.value).startswith("No diff available for gone.py")
        assert isinstance(excinfo.value, GitError)
