"""Git collaborator error."""


class GitError(RuntimeError):
    """Raised when git cannot be run or reports a failure."""
