"""Display item kind enum."""

from enum import Enum


class DisplayItemKind(str, Enum):
    FOLDER_HEADER = "folder_header"
    TYPE_HEADER = "type_header"
    FILE_ENTRY = "file_entry"
