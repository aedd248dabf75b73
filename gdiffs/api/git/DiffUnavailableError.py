"""Missing diff error."""

from .GitError import GitError


class DiffUnavailableError(GitError):
    """Raised when git produces no diff text for a path.

    Typical causes are a revision that does not exist or a path git
    refuses to diff.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"No diff available for {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
