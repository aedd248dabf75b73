"""Parse `git diff --name-status` output."""

from .ChangedFile import ChangedFile
from .FileStatus import FileStatus


def parse_name_status(text: str) -> list[ChangedFile]:
    """Parse name-status lines into ChangedFile records.

    Lines look like `M\\tpath` or `R100\\told\\tnew`. Blank and malformed
    lines are skipped. Counts are left at 0; see parse_numstat.

    Args:
        text: Raw git output

    Returns:
        Files in git's output order
    """
    files: list[ChangedFile] = []
    for line in text.splitlines():
        if not line.strip():
            continue

        parts = line.split("\t")
        if len(parts) < 2:
            parts = line.split()
        if len(parts) < 2:
            continue

        status = FileStatus.from_letter(parts[0])
        if status is FileStatus.RENAMED and len(parts) >= 3:
            files.append(ChangedFile(status=status, path=parts[2], old_path=parts[1]))
        else:
            files.append(ChangedFile(status=status, path=parts[-1]))
    return files
