"""Git repository access (UNO: single class)."""

import logging
import subprocess
from pathlib import Path

from ..diff.FileDiff import FileDiff
from ..diff.UnifiedDiffParser import UnifiedDiffParser
from .ChangedFile import ChangedFile
from .DiffUnavailableError import DiffUnavailableError
from .GitError import GitError
from .merge_file_stats import merge_file_stats
from .parse_name_status import parse_name_status
from .parse_numstat import parse_numstat

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_CANDIDATES = ("main", "master", "origin/main", "origin/master")


class GitRepo:
    """Read changed files and per-file diffs from a git working tree."""

    def __init__(self, path: Path | str = ".", timeout_seconds: int = 30):
        """
        Open a repository.

        Args:
            path: Any directory inside the working tree
            timeout_seconds: Limit for every git invocation

        Raises:
            GitError: If path is not inside a git repository
        """
        self.path = Path(path).expanduser().resolve()
        self.timeout_seconds = timeout_seconds

        try:
            self._run("rev-parse", "--git-dir")
        except GitError as exc:
            raise GitError(f"Not a git repository: {self.path}") from exc

    def current_branch(self) -> str:
        """Name of the checked-out branch (`HEAD` when detached)."""
        return self._run("rev-parse", "--abbrev-ref", "HEAD").strip()

    def default_branch(self) -> str:
        """First existing branch among main, master and their origin copies.

        Raises:
            GitError: If none of them exists
        """
        for candidate in DEFAULT_BRANCH_CANDIDATES:
            if self._succeeds("rev-parse", "--verify", "--quiet", candidate):
                return candidate
        raise GitError("Could not determine default branch")

    def resolve_base(self, base: str | None) -> str:
        """Explicit base, else the default branch, else HEAD."""
        if base:
            return base
        try:
            return self.default_branch()
        except GitError:
            logger.info("No default branch found, comparing against HEAD")
            return "HEAD"

    def changed_files(self, base: str, head: str | None = "HEAD") -> list[ChangedFile]:
        """Files changed between base and head, with line counts.

        Uses the merge-base range `base...head`; when git rejects it (for
        example against uncommitted work) compares the working tree to base.

        Raises:
            GitError: If git cannot list the changes
        """
        status_text = self._run_with_fallback("--name-status", base=base, head=head)
        try:
            numstat_text = self._run_with_fallback("--numstat", base=base, head=head)
        except GitError as exc:
            logger.warning(f"numstat failed, counts left at zero: {exc}")
            numstat_text = ""

        files = parse_name_status(status_text)
        return merge_file_stats(files, parse_numstat(numstat_text))

    def file_diff_text(self, base: str, head: str | None, path: str) -> str:
        """Raw unified diff of one file.

        Raises:
            DiffUnavailableError: If git produces no diff for the path
        """
        try:
            return self._run_with_fallback(base=base, head=head, path=path)
        except GitError as exc:
            raise DiffUnavailableError(path, str(exc)) from exc

    def file_diff(self, base: str, head: str | None, path: str) -> FileDiff:
        """Parsed diff of one file."""
        return UnifiedDiffParser().parse(self.file_diff_text(base, head, path))

    def _run_with_fallback(self, *flags: str, base: str, head: str | None, path: str | None = None) -> str:
        suffix = ["--", path] if path else []
        if head:
            try:
                return self._run("diff", *flags, f"{base}...{head}", *suffix)
            except GitError as exc:
                logger.debug(f"Range diff failed, retrying against {base}: {exc}")
        return self._run("diff", *flags, base, *suffix)

    def _succeeds(self, *args: str) -> bool:
        try:
            self._run(*args)
        except GitError:
            return False
        return True

    def _run(self, *args: str) -> str:
        cmd = ["git", "-C", str(self.path), *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise GitError(f"git {' '.join(args)} failed: {exc}") from exc

        if result.returncode != 0:
            raise GitError(f"git {' '.join(args)} failed: {result.stderr.strip()}")
        return result.stdout
