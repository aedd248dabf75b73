"""API module for gdiffs.

Commands here (`cmd_*`) are shared by the CLI and by tests; the engine
itself lives in the diff, files, fuzzy and git subpackages.
"""

__all__: list[str] = []
