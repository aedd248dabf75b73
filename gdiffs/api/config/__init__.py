"""Config module - gdiffs settings loaded from $GDIFFS_HOME/config.json."""

from .ConfigError import ConfigError
from .GdiffsConfig import GdiffsConfig
from .GitConfig import GitConfig
from .LogConfig import LogConfig
from .ViewConfig import ViewConfig

__all__ = ["ConfigError", "GdiffsConfig", "GitConfig", "LogConfig", "ViewConfig"]
