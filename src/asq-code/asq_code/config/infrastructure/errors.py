"""Error types raised by config infrastructure."""

from pathlib import Path

from asq_code.core.errors import AsqCodeError


class ConfigValidationError(AsqCodeError):
    """Raised when the loaded config fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(AsqCodeError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
