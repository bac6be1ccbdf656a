"""Structlog implementation of the QuestionObserver port."""

import structlog


class StructlogQuestionObserver:
    """Delegates question domain events to structlog.

    Satisfies the QuestionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def questions_ingested(
        self, presentation_id: str, question_type: str, question_uids: list[str]
    ) -> None:
        self._log.info(
            "question.ingested",
            presentation_id=presentation_id,
            question_type=question_type,
            total_questions=len(question_uids),
            question_uids=question_uids,
        )
