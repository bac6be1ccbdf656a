"""Observer port for the submission domain — defines events in domain language."""

from typing import Protocol


class SubmissionObserver(Protocol):
    """Observer port emitting structured events while recording submissions."""

    def submission_recorded(
        self,
        session_id: str,
        question_uid: str,
        answeree: str,
        submit_date: int,
        sequence: int,
    ) -> None: ...

    def submission_rejected(
        self, session_id: str, question_uid: str, answeree: str, reason: str
    ) -> None: ...

    def submission_passed_through(
        self, session_id: str, question_uid: str, question_type: str
    ) -> None: ...
