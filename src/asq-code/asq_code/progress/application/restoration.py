"""Presenter and viewer state restoration for (re)connecting clients."""

from asq_code.config.domain.config import PluginConfig
from asq_code.progress.domain.events import PresenterQuestionState, ViewerAnswer
from asq_code.question.domain.store import QuestionStore
from asq_code.submission.domain.aggregation import (
    latest_per_question,
    latest_per_question_and_answeree,
)
from asq_code.submission.domain.log import SubmissionLog


class PresenterRestorer:
    """Restores every learner's current answer for every question of the presentation."""

    def __init__(
        self,
        config: PluginConfig,
        question_store: QuestionStore,
        submission_log: SubmissionLog,
    ) -> None:
        self._config = config
        self._question_store = question_store
        self._submission_log = submission_log

    async def restore(
        self, session_id: str, presentation_id: str
    ) -> list[PresenterQuestionState]:
        """
        Return one entry per question of this plugin's type, in presentation order.

        The question list comes from the question store; aggregated submissions are
        joined onto it, so unanswered questions appear with an empty list.
        """
        questions = await self._question_store.get_all_by_presentation_and_type(
            presentation_id, self._config.tag_name
        )
        if not questions:
            return []

        rows = await self._submission_log.find(
            session_id=session_id,
            question_uids=[q.uid for q in questions],
        )
        by_question = latest_per_question_and_answeree(rows)

        return [
            PresenterQuestionState(
                uid=q.uid,
                stem=q.stem,
                code=q.code,
                submissions=by_question.get(q.uid, []),
            )
            for q in questions
        ]


class ViewerRestorer:
    """Restores one learner's own current answers for the presentation."""

    def __init__(
        self,
        config: PluginConfig,
        question_store: QuestionStore,
        submission_log: SubmissionLog,
    ) -> None:
        self._config = config
        self._question_store = question_store
        self._submission_log = submission_log

    async def restore(
        self, session_id: str, presentation_id: str, answeree: str
    ) -> list[ViewerAnswer]:
        """Return the learner's latest answer per question, in presentation order.

        Questions the learner never answered are omitted.
        """
        questions = await self._question_store.get_all_by_presentation_and_type(
            presentation_id, self._config.tag_name
        )
        if not questions:
            return []

        rows = await self._submission_log.find(
            session_id=session_id,
            question_uids=[q.uid for q in questions],
            answeree=answeree,
        )
        latest = latest_per_question(
            row for row in rows if row.answeree == answeree
        )

        return [
            ViewerAnswer(
                uid=q.uid,
                submit_date=latest[q.uid].submit_date,
                submission=latest[q.uid].submission,
            )
            for q in questions
            if q.uid in latest
        ]
