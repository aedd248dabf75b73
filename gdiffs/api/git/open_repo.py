"""Open the repository and resolve the revisions a command compares."""

from pathlib import Path

from ..config.GdiffsConfig import GdiffsConfig
from .GitRepo import GitRepo


def open_repo(
    config: GdiffsConfig,
    repo_path: Path | str = ".",
    base: str | None = None,
    head: str | None = None,
) -> tuple[GitRepo, str, str]:
    """Open repo_path and resolve base/head against the config.

    Explicit arguments win over the config. A base that is neither given
    nor configured falls back to main/master, then HEAD. An empty head
    compares against the working tree.

    Raises:
        GitError: If repo_path is not a git repository
    """
    repo = GitRepo(repo_path, timeout_seconds=config.git.timeout_seconds)
    resolved_base = repo.resolve_base(base or config.git.base)
    resolved_head = config.git.head if head is None else head
    return repo, resolved_base, resolved_head
