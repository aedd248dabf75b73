"""Files list command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.files import FilesListOutput
from ..config.ConfigError import ConfigError
from ..config.GdiffsConfig import GdiffsConfig
from ..git.GitError import GitError
from ..git.open_repo import open_repo
from ..StageResult import StageResult
from .ChangedFileIndex import ChangedFileIndex
from .ExpandedPaths import ExpandedPaths
from .FileCursor import FileCursor
from .FileViewMode import FileViewMode


def cmd_list(
    base: str | None = None,
    head: str | None = None,
    mode: str | None = None,
    query: str = "",
    repo_path: str = ".",
) -> StageResult:
    """List changed files grouped by folder, by change type or flat.

    Args:
        base: Base revision, defaults to config or main/master
        head: Head revision, defaults to config; empty for the working tree
        mode: folder, type or raw; defaults to config
        query: Fuzzy filter on file paths
        repo_path: Directory inside the repository
    """

    def build_output(**fields: Any) -> dict[str, Any]:
        values: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "base": base or "",
            "head": head or "",
            "mode": mode or "",
            "query": query,
            "file_count": 0,
            "items": [],
            "selected": -1,
        }
        values.update(fields)
        return FilesListOutput(**values).model_dump(mode="python")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration")
        try:
            config = GdiffsConfig.load()
        except ConfigError as exc:
            result_obj.result = "Listing failed: invalid configuration."
            result_obj.output = build_output(errors=exc.errors)
            result_obj.success = False
            yield (1.0, "Failed")
            return

        try:
            view_mode = FileViewMode(mode or config.view.file_view_mode)
        except ValueError:
            result_obj.result = "Listing failed: invalid view mode."
            result_obj.output = build_output(errors=[f"mode must be one of folder,type,raw (found: {mode!r})"])
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.3, "Reading changed files from git")
        try:
            repo, resolved_base, resolved_head = open_repo(config, repo_path, base, head)
            files = repo.changed_files(resolved_base, resolved_head)
        except GitError as exc:
            result_obj.result = f"Listing failed: {exc}"
            result_obj.output = build_output(mode=view_mode.value, errors=[str(exc)])
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.7, "Grouping files")
        expanded = ExpandedPaths()
        if config.view.expand_all:
            expanded.expand_all(files)
        items = ChangedFileIndex().build(files, view_mode, expanded, query)
        cursor = FileCursor(items)

        shown = sum(1 for item in items if not item.is_header)
        warnings = []
        if query and not shown:
            warnings.append(f"No files match {query!r}")

        result_obj.result = f"{len(files)} changed file(s) between {resolved_base} and {resolved_head or 'working tree'}"
        result_obj.output = build_output(
            warnings=warnings,
            base=resolved_base,
            head=resolved_head,
            mode=view_mode.value,
            file_count=len(files),
            items=[item.to_dict() for item in items],
            selected=cursor.index,
        )
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Listing changed files...",
        progress_callback=do_work,
    )
