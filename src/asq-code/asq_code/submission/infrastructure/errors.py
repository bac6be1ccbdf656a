"""Error types raised by submission infrastructure."""

from asq_code.core.errors import AsqCodeError


class SubmissionLoadError(AsqCodeError):
    """Raised when a JSONL submission file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load submissions: {reason}")
