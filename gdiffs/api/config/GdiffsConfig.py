"""Top-level gdiffs configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ConfigError import ConfigError
from .GitConfig import GitConfig
from .LogConfig import LogConfig
from .ViewConfig import ViewConfig


class GdiffsConfig(BaseModel):
    """Configuration for every gdiffs section.

    Every section has defaults, so a missing config file is not an error.
    """

    model_config = ConfigDict(extra="forbid")

    git: GitConfig = Field(default_factory=GitConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get gdiffs home directory based on GDIFFS_HOME or default to ~/.gdiffs."""
        home_env = os.environ.get("GDIFFS_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".gdiffs"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "GdiffsConfig":
        """Load and validate config from file.

        Raises:
            ConfigError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(part) for part in error.get("loc", ()))
                message = error.get("msg", "invalid value")
                errors.append(f"{field}: {message}" if field else message)
            raise ConfigError(errors) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
