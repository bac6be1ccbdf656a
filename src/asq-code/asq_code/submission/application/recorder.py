"""SubmissionRecorder — validates and appends learner answers, then publishes progress."""

import time
from collections.abc import Callable

from pydantic import ValidationError

from asq_code.config.domain.config import PluginConfig
from asq_code.progress.application.live_progress import LiveProgressAggregator
from asq_code.question.domain.store import QuestionStore
from asq_code.submission.application.errors import (
    MalformedSubmissionError,
    QuestionNotFoundError,
)
from asq_code.submission.domain.answer import AnswerSubmission
from asq_code.submission.domain.log import SubmissionLog
from asq_code.submission.domain.observer import SubmissionObserver
from asq_code.submission.domain.submission import (
    EpochMillis,
    Submission,
    SubmissionRecord,
)

type Clock = Callable[[], EpochMillis]


def epoch_millis() -> EpochMillis:
    return time.time_ns() // 1_000_000


class SubmissionRecorder:
    """Records one answer per call.

    The recorder holds no state between calls; concurrent calls only meet in the
    submission log, which assigns the ordering sequence.
    """

    def __init__(
        self,
        config: PluginConfig,
        question_store: QuestionStore,
        submission_log: SubmissionLog,
        live_progress: LiveProgressAggregator,
        observer: SubmissionObserver,
        clock: Clock = epoch_millis,
    ) -> None:
        self._config = config
        self._question_store = question_store
        self._submission_log = submission_log
        self._live_progress = live_progress
        self._observer = observer
        self._clock = clock

    async def record(self, answer: AnswerSubmission) -> Submission | None:
        """Append the answer to the log and push live progress to controllers.

        Returns the stored row, or None when the question belongs to another
        plugin type (the answer is left for the next handler).

        Raises:
            QuestionNotFoundError: if the referenced question does not exist.
            MalformedSubmissionError: if the submission is not a string or an
                identifier field is empty.
        """
        question = await self._question_store.get_by_id(answer.question_uid)
        if question is None:
            error = QuestionNotFoundError(question_uid=answer.question_uid)
            self._reject(answer=answer, reason=str(error))
            raise error

        if question.type != self._config.tag_name:
            self._observer.submission_passed_through(
                session_id=answer.session_id,
                question_uid=answer.question_uid,
                question_type=question.type,
            )
            return None

        if not isinstance(answer.submission, str):
            error = MalformedSubmissionError(
                reason=(
                    "submission must be a string, got"
                    f" {type(answer.submission).__name__}"
                )
            )
            self._reject(answer=answer, reason=str(error))
            raise error

        try:
            record = SubmissionRecord(
                question_uid=answer.question_uid,
                session_id=answer.session_id,
                answeree=answer.answeree,
                type=question.type,
                submit_date=self._clock(),
                submission=answer.submission,
                confidence=answer.confidence,
                exercise_id=answer.exercise_id,
            )
        except ValidationError as exc:
            fields = ", ".join(
                f"'{'.'.join(str(part) for part in err['loc'])}'" for err in exc.errors()
            )
            error = MalformedSubmissionError(reason=f"invalid field(s) {fields}")
            self._reject(answer=answer, reason=str(error))
            raise error from exc

        stored = await self._submission_log.append(record)
        self._observer.submission_recorded(
            session_id=stored.session_id,
            question_uid=stored.question_uid,
            answeree=stored.answeree,
            submit_date=stored.submit_date,
            sequence=stored.sequence,
        )

        await self._live_progress.publish(
            session_id=stored.session_id, question_uid=stored.question_uid
        )
        return stored

    def _reject(self, answer: AnswerSubmission, reason: str) -> None:
        self._observer.submission_rejected(
            session_id=answer.session_id,
            question_uid=answer.question_uid,
            answeree=answer.answeree,
            reason=reason,
        )
