"""Unit test fixtures.

Most helpers are in tests/conftest.py. This file holds sample diff data
shared by the engine tests.
"""

import pytest

from gdiffs.api.git.ChangedFile import ChangedFile
from gdiffs.api.git.FileStatus import FileStatus
from tests.conftest import run_cmd

__all__ = ["SAMPLE_DIFF", "run_cmd"]

SAMPLE_DIFF = """diff --git a/foo.go b/foo.go
index 1111111..2222222 100644
--- a/foo.go
+++ b/foo.go
@@ -10,3 +10,4 @@ func main() {
 a
-b
+B
+C
 d
"""


@pytest.fixture
def sample_diff() -> str:
    return SAMPLE_DIFF


@pytest.fixture
def changed_files() -> list[ChangedFile]:
    """Changed files in git order across nested folders and every status."""
    return [
        ChangedFile(status=FileStatus.MODIFIED, path="src/app.py", additions=2, deletions=1),
        ChangedFile(status=FileStatus.ADDED, path="docs/guide.md", additions=1),
        ChangedFile(status=FileStatus.DELETED, path="old.txt", deletions=1),
        ChangedFile(status=FileStatus.RENAMED, path="src/helpers.py", old_path="src/util.py"),
        ChangedFile(status=FileStatus.MODIFIED, path="src/api/routes.py", additions=5, deletions=5),
        ChangedFile(status=FileStatus.ADDED, path="README.md", additions=3),
    ]
