"""Error types raised while recording submissions."""

from asq_code.core.errors import AsqCodeError


class QuestionNotFoundError(AsqCodeError):
    """Raised when a submission references a question uid that does not exist."""

    def __init__(self, question_uid: str) -> None:
        self.question_uid = question_uid
        super().__init__(
            f"Failed to record submission: question '{question_uid}' not found"
        )


class MalformedSubmissionError(AsqCodeError):
    """Raised when a submission payload is not the expected string shape."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to record submission: {reason}")
