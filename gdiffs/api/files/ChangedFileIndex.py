"""Changed file grouping (UNO: single class)."""

from collections.abc import Container, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from ..fuzzy.fuzzy_match import fuzzy_match
from ..git.ChangedFile import ChangedFile
from ..git.FileStatus import FileStatus
from .DisplayItem import DisplayItem
from .FileViewMode import FileViewMode

TYPE_GROUPS = (
    (FileStatus.MODIFIED, "Modified"),
    (FileStatus.ADDED, "Added"),
    (FileStatus.DELETED, "Deleted"),
)


@dataclass
class _Folder:
    path: str
    folders: dict[str, "_Folder"] = field(default_factory=dict)
    files: list[ChangedFile] = field(default_factory=list)


class ChangedFileIndex:
    """Build the navigable item list for a changed file list."""

    def build(
        self,
        files: Sequence[ChangedFile],
        mode: FileViewMode,
        expanded_paths: Container[str] | None = None,
        query: str = "",
    ) -> list[DisplayItem]:
        """Group files for display.

        Args:
            files: Changed files in git order
            mode: Folder, Type or Raw grouping
            expanded_paths: Directories whose children are shown in Folder mode
            query: Optional fuzzy filter applied to paths before grouping

        Returns:
            Items in display order
        """
        files = self.filter(files, query)
        mode = FileViewMode(mode)
        if mode is FileViewMode.FOLDER:
            return self._folder_items(files, expanded_paths if expanded_paths is not None else ())
        if mode is FileViewMode.TYPE:
            return self._type_items(files)
        return [DisplayItem.file_entry(changed) for changed in files]

    @staticmethod
    def filter(files: Sequence[ChangedFile], query: str) -> list[ChangedFile]:
        """Files whose path matches the query, best match first."""
        query = query.replace(" ", "")
        if not query:
            return list(files)
        return [files[match.index] for match in fuzzy_match(query, [changed.path for changed in files])]

    def _folder_items(self, files: Sequence[ChangedFile], expanded: Container[str]) -> list[DisplayItem]:
        root = _Folder(path="")
        for changed in files:
            node = root
            for name in PurePosixPath(changed.path).parts[:-1]:
                if name not in node.folders:
                    node.folders[name] = _Folder(path=f"{node.path}/{name}" if node.path else name)
                node = node.folders[name]
            node.files.append(changed)

        items: list[DisplayItem] = []
        self._walk(root, 0, expanded, items)
        return items

    def _walk(self, node: _Folder, depth: int, expanded: Container[str], items: list[DisplayItem]) -> None:
        for name in sorted(node.folders):
            folder = node.folders[name]
            is_open = folder.path in expanded
            items.append(DisplayItem.folder_header(folder.path, is_open, depth))
            if is_open:
                self._walk(folder, depth + 1, expanded, items)

        for changed in sorted(node.files, key=lambda f: (PurePosixPath(f.path).name, f.path)):
            items.append(DisplayItem.file_entry(changed, depth))

    @staticmethod
    def _type_items(files: Sequence[ChangedFile]) -> list[DisplayItem]:
        groups: dict[FileStatus, list[ChangedFile]] = {status: [] for status, _ in TYPE_GROUPS}
        for changed in files:
            status = changed.status if changed.status in groups else FileStatus.MODIFIED
            groups[status].append(changed)

        items: list[DisplayItem] = []
        for status, label in TYPE_GROUPS:
            members = sorted(groups[status], key=lambda f: f.path)
            if not members:
                continue
            items.append(DisplayItem.type_header(label, len(members)))
            items.extend(DisplayItem.file_entry(changed, depth=1) for changed in members)
        return items
