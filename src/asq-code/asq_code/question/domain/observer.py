"""Observer port for the question domain — defines events in domain language."""

from typing import Protocol


class QuestionObserver(Protocol):
    def questions_ingested(
        self, presentation_id: str, question_type: str, question_uids: list[str]
    ) -> None: ...
