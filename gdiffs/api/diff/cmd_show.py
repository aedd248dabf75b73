"""Diff show command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.diff import DiffShowOutput
from ..config.ConfigError import ConfigError
from ..config.GdiffsConfig import GdiffsConfig
from ..git.DiffUnavailableError import DiffUnavailableError
from ..git.GitError import GitError
from ..git.open_repo import open_repo
from ..StageResult import StageResult
from .ChangeSetAligner import ChangeSetAligner
from .ViewMode import ViewMode
from .ViewProjector import ViewProjector


def cmd_show(
    path: str,
    base: str | None = None,
    head: str | None = None,
    view_mode: str | None = None,
    repo_path: str = ".",
) -> StageResult:
    """Show the diff of one file as aligned rows and projected lines.

    Args:
        path: File path relative to the repository root
        base: Base revision, defaults to config or main/master
        head: Head revision, defaults to config; empty for the working tree
        view_mode: both, new or old; defaults to config
        repo_path: Directory inside the repository
    """

    def build_output(**fields: Any) -> dict[str, Any]:
        values: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "path": path,
            "base": base or "",
            "head": head or "",
            "view_mode": view_mode or "",
            "old_path": "",
            "new_path": "",
            "binary": False,
            "hunk_count": 0,
            "rows": [],
            "lines": [],
        }
        values.update(fields)
        return DiffShowOutput(**values).model_dump(mode="python")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration")
        try:
            config = GdiffsConfig.load()
        except ConfigError as exc:
            result_obj.result = "Diff failed: invalid configuration."
            result_obj.output = build_output(errors=exc.errors)
            result_obj.success = False
            yield (1.0, "Failed")
            return

        try:
            mode = ViewMode(view_mode or config.view.diff_view_mode)
        except ValueError:
            result_obj.result = "Diff failed: invalid view mode."
            result_obj.output = build_output(
                errors=[f"view_mode must be one of both,new,old (found: {view_mode!r})"]
            )
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.3, "Reading diff from git")
        try:
            repo, resolved_base, resolved_head = open_repo(config, repo_path, base, head)
            file_diff = repo.file_diff(resolved_base, resolved_head, path)
        except DiffUnavailableError as exc:
            result_obj.result = f"No diff available for {path}"
            result_obj.output = build_output(view_mode=mode.value, errors=[str(exc)])
            result_obj.success = False
            yield (1.0, "Failed")
            return
        except GitError as exc:
            result_obj.result = f"Diff failed: {exc}"
            result_obj.output = build_output(view_mode=mode.value, errors=[str(exc)])
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.7, "Aligning hunks")
        rows = ChangeSetAligner().align(file_diff.hunks)
        lines = ViewProjector().project(rows, mode)

        warnings = []
        if file_diff.binary:
            warnings.append(f"{path} is a binary file")
        elif file_diff.is_empty:
            warnings.append(f"{path} has no changes between {resolved_base} and {resolved_head or 'working tree'}")

        result_obj.result = f"{path}: {len(file_diff.hunks)} hunk(s), {len(rows)} row(s)"
        result_obj.output = build_output(
            warnings=warnings,
            base=resolved_base,
            head=resolved_head,
            view_mode=mode.value,
            old_path=file_diff.old_path,
            new_path=file_diff.new_path,
            binary=file_diff.binary,
            hunk_count=len(file_diff.hunks),
            rows=[row.to_dict() for row in rows],
            lines=[line.to_dict() for line in lines],
        )
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Diffing {path}...",
        progress_callback=do_work,
    )
