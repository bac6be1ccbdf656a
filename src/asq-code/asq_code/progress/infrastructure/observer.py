"""Structlog implementation of the ProgressObserver port."""

import structlog


class StructlogProgressObserver:
    """Delegates progress domain events to structlog.

    Satisfies the ProgressObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def progress_published(
        self, session_id: str, question_uid: str, total_answerees: int
    ) -> None:
        self._log.info(
            "progress.published",
            session_id=session_id,
            question_uid=question_uid,
            total_answerees=total_answerees,
        )

    def presenter_restored(
        self,
        session_id: str,
        presentation_id: str,
        total_questions: int,
        total_submissions: int,
    ) -> None:
        self._log.info(
            "restoration.presenter",
            session_id=session_id,
            presentation_id=presentation_id,
            total_questions=total_questions,
            total_submissions=total_submissions,
        )

    def viewer_restored(
        self,
        session_id: str,
        presentation_id: str,
        answeree: str,
        total_answers: int,
    ) -> None:
        self._log.info(
            "restoration.viewer",
            session_id=session_id,
            presentation_id=presentation_id,
            answeree=answeree,
            total_answers=total_answers,
        )

    def restoration_failed(
        self, session_id: str, presentation_id: str, role: str, reason: str
    ) -> None:
        self._log.error(
            "restoration.failed",
            session_id=session_id,
            presentation_id=presentation_id,
            role=role,
            reason=reason,
        )
