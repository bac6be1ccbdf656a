"""Observer port for the progress domain — defines events in domain language."""

from typing import Protocol


class ProgressObserver(Protocol):
    """Observer port emitting structured events for aggregation and restoration."""

    def progress_published(
        self, session_id: str, question_uid: str, total_answerees: int
    ) -> None: ...

    def presenter_restored(
        self,
        session_id: str,
        presentation_id: str,
        total_questions: int,
        total_submissions: int,
    ) -> None: ...

    def viewer_restored(
        self,
        session_id: str,
        presentation_id: str,
        answeree: str,
        total_answers: int,
    ) -> None: ...

    def restoration_failed(
        self, session_id: str, presentation_id: str, role: str, reason: str
    ) -> None: ...
