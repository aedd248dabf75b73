"""Pydantic output schemas, registered on import."""

from . import config, diff, files

__all__ = ["config", "diff", "files"]
