"""LiveProgressAggregator — latest answer per learner for one (session, question)."""

from asq_code.config.domain.config import PluginConfig
from asq_code.notification.domain.notifier import Notifier
from asq_code.progress.domain.events import ProgressEvent, QuestionProgress
from asq_code.progress.domain.observer import ProgressObserver
from asq_code.submission.domain.aggregation import latest_per_answeree
from asq_code.submission.domain.log import SubmissionLog


class LiveProgressAggregator:
    """Computes live progress and pushes it to every controller connection."""

    def __init__(
        self,
        config: PluginConfig,
        submission_log: SubmissionLog,
        notifier: Notifier,
        observer: ProgressObserver,
    ) -> None:
        self._config = config
        self._submission_log = submission_log
        self._notifier = notifier
        self._observer = observer

    async def compute(self, session_id: str, question_uid: str) -> QuestionProgress:
        """Return each learner's most recent submission, most recent learner first."""
        rows = await self._submission_log.find(
            session_id=session_id, question_uids=[question_uid]
        )
        return QuestionProgress(uid=question_uid, answers=latest_per_answeree(rows))

    async def publish(self, session_id: str, question_uid: str) -> ProgressEvent:
        """Compute progress and emit it once to the controller role of the session."""
        progress = await self.compute(session_id=session_id, question_uid=question_uid)
        event = ProgressEvent(question_type=self._config.tag_name, question=progress)

        self._notifier.emit_to_role(
            event_name=self._config.event_name,
            payload=event.to_payload(),
            session_id=session_id,
            role=self._config.controller_role,
        )
        self._observer.progress_published(
            session_id=session_id,
            question_uid=question_uid,
            total_answerees=len(progress.answers),
        )
        return event
