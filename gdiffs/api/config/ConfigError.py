"""Configuration error."""


class ConfigError(ValueError):
    """Raised when the gdiffs configuration file is unreadable or invalid."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
