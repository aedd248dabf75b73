import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARN": logging.WARNING, "ERROR": logging.ERROR}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure gdiffs logging to a rotating file in the gdiffs home.

    Args:
        home: gdiffs home directory. If None, derived from GDIFFS_HOME.
        level: DEBUG, INFO, WARN or ERROR
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from gdiffs.api.config.GdiffsConfig import GdiffsConfig

        home = GdiffsConfig.get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "gdiffs.log"

    root_logger = logging.getLogger("gdiffs")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the gdiffs namespace."""
    return logging.getLogger(f"gdiffs.{name}")
