"""Base exception class for all asq-code-specific errors."""


class AsqCodeError(Exception):
    """Base class for all asq-code errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
