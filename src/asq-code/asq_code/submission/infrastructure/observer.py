"""Structlog implementation of the SubmissionObserver port."""

import structlog


class StructlogSubmissionObserver:
    """Delegates submission domain events to structlog.

    Satisfies the SubmissionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def submission_recorded(
        self,
        session_id: str,
        question_uid: str,
        answeree: str,
        submit_date: int,
        sequence: int,
    ) -> None:
        self._log.info(
            "submission.recorded",
            session_id=session_id,
            question_uid=question_uid,
            answeree=answeree,
            submit_date=submit_date,
            sequence=sequence,
        )

    def submission_rejected(
        self, session_id: str, question_uid: str, answeree: str, reason: str
    ) -> None:
        self._log.error(
            "submission.rejected",
            session_id=session_id,
            question_uid=question_uid,
            answeree=answeree,
            reason=reason,
        )

    def submission_passed_through(
        self, session_id: str, question_uid: str, question_type: str
    ) -> None:
        self._log.debug(
            "submission.passed_through",
            session_id=session_id,
            question_uid=question_uid,
            question_type=question_type,
        )
