"""Diff content search command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.diff import DiffSearchOutput
from ..config.ConfigError import ConfigError
from ..config.GdiffsConfig import GdiffsConfig
from ..git.DiffUnavailableError import DiffUnavailableError
from ..git.GitError import GitError
from ..git.open_repo import open_repo
from ..StageResult import StageResult
from .ChangeSetAligner import ChangeSetAligner
from .search_lines import search_lines
from .ViewMode import ViewMode
from .ViewProjector import ViewProjector


def cmd_search(
    path: str,
    query: str,
    base: str | None = None,
    head: str | None = None,
    view_mode: str | None = None,
    repo_path: str = ".",
    limit: int = 50,
) -> StageResult:
    """Fuzzy-search the lines of one file's diff.

    Each hit carries `source_row_index`, the aligned row to jump to.
    """

    def build_output(**fields: Any) -> dict[str, Any]:
        values: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "path": path,
            "query": query,
            "view_mode": view_mode or "",
            "hits": [],
        }
        values.update(fields)
        return DiffSearchOutput(**values).model_dump(mode="python")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration")
        errors: list[str] = []
        mode: ViewMode | None = None
        try:
            config = GdiffsConfig.load()
            mode = ViewMode(view_mode or config.view.diff_view_mode)
        except ConfigError as exc:
            errors.extend(exc.errors)
        except ValueError:
            errors.append(f"view_mode must be one of both,new,old (found: {view_mode!r})")
        if limit <= 0:
            errors.append("limit must be a positive int")

        if errors or mode is None:
            result_obj.result = "Search failed due to invalid inputs."
            result_obj.output = build_output(errors=errors)
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
            result_obj.result = f"Search failed: {exc}"
            result_obj.output = build_output(view_mode=mode.value, errors=[str(exc)])
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.6, "Searching lines")
        lines = ViewProjector().project(ChangeSetAligner().align(file_diff.hunks), mode)
        hits = search_lines(lines, query)

        warnings = []
        if len(hits) > limit:
            warnings.append(f"Showing {limit} of {len(hits)} matches")

        result_obj.result = f"{len(hits)} match(es) in {path}"
        result_obj.output = build_output(
            warnings=warnings,
            view_mode=mode.value,
            hits=[hit.to_dict() for hit in hits[:limit]],
        )
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Searching {path} for {query!r}...",
        progress_callback=do_work,
    )
