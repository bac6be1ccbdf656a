"""Error types raised by question infrastructure."""

from asq_code.core.errors import AsqCodeError


class DuplicateQuestionError(AsqCodeError):
    """Raised when a question uid is created twice."""

    def __init__(self, question_uid: str) -> None:
        self.question_uid = question_uid
        super().__init__(
            f"Failed to create question: uid '{question_uid}' already exists"
        )
