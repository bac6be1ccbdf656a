"""Tests for PresenterRestorer and ViewerRestorer."""

import pytest

from asq_code.config.domain.config import PluginConfig
from asq_code.progress.application.restoration import PresenterRestorer, ViewerRestorer
from asq_code.submission.domain.submission import SubmissionRecord
from asq_code.submission.infrastructure.memory_log import InMemorySubmissionLog
from tests.question.seed import seeded_store
from tests.submission.failing_log import FailingSubmissionLog, StoreUnavailableError


def _record(
    answeree: str,
    submit_date: int,
    submission: str,
    question_uid: str = "Q1",
    session_id: str = "S1",
) -> SubmissionRecord:
    return SubmissionRecord(
        question_uid=question_uid,
        session_id=session_id,
        answeree=answeree,
        type="asq-code-q",
        submit_date=submit_date,
        submission=submission,
    )


async def _log_with(*records: SubmissionRecord) -> InMemorySubmissionLog:
    log = InMemorySubmissionLog()
    for record in records:
        await log.append(record)
    return log


class TestPresenterRestorer:
    async def test_unanswered_question_present_with_empty_list(self) -> None:
        store = await seeded_store(code_uids=("Q1", "Q2"))
        log = await _log_with(_record("L1", 100, "a", question_uid="Q1"))
        restorer = PresenterRestorer(
            config=PluginConfig(), question_store=store, submission_log=log
        )

        questions = await restorer.restore(session_id="S1", presentation_id="P1")

        assert [q.uid for q in questions] == ["Q1", "Q2"]
        assert len(questions[0].submissions) == 1
        assert questions[1].submissions == []

    async def test_one_entry_per_question_with_no_submissions_at_all(self) -> None:
        store = await seeded_store(code_uids=("Q1", "Q2", "Q3"))
        restorer = PresenterRestorer(
            config=PluginConfig(),
            question_store=store,
            submission_log=InMemorySubmissionLog(),
        )

        questions = await restorer.restore(session_id="S1", presentation_id="P1")

        assert len(questions) == 3
        assert all(q.submissions == [] for q in questions)

    async def test_latest_per_learner_for_each_question(self) -> None:
        store = await seeded_store(code_uids=("Q1", "Q2"))
        log = await _log_with(
            _record("L1", 100, "q1-old", question_uid="Q1"),
            _record("L1", 200, "q1-new", question_uid="Q1"),
            _record("L2", 150, "q1-l2", question_uid="Q1"),
            _record("L2", 120, "q2-l2", question_uid="Q2"),
            _record("L1", 999, "other session", question_uid="Q2", session_id="S2"),
        )
        restorer = PresenterRestorer(
            config=PluginConfig(), question_store=store, submission_log=log
        )

        questions = await restorer.restore(session_id="S1", presentation_id="P1")

        by_uid = {q.uid: q for q in questions}
        assert [(s.answeree, s.submission) for s in by_uid["Q1"].submissions] == [
            ("L1", "q1-new"),
            ("L2", "q1-l2"),
        ]
        assert [(s.answeree, s.submission) for s in by_uid["Q2"].submissions] == [
            ("L2", "q2-l2")
        ]

    async def test_ignores_questions_of_other_types(self) -> None:
        store = await seeded_store(code_uids=("Q1",), other_uids=("MC1",))
        restorer = PresenterRestorer(
            config=PluginConfig(),
            question_store=store,
            submission_log=InMemorySubmissionLog(),
        )

        questions = await restorer.restore(session_id="S1", presentation_id="P1")

        assert [q.uid for q in questions] == ["Q1"]

    async def test_does_not_expose_solution(self) -> None:
        store = await seeded_store(code_uids=("Q1",))
        restorer = PresenterRestorer(
            config=PluginConfig(),
            question_store=store,
            submission_log=InMemorySubmissionLog(),
        )

        questions = await restorer.restore(session_id="S1", presentation_id="P1")

        payload = questions[0].to_payload()
        assert "solution" not in payload
        assert payload["stem"] == "<h4>Implement Q1</h4>"

    async def test_store_failure_propagates(self) -> None:
        store = await seeded_store()
        restorer = PresenterRestorer(
            config=PluginConfig(),
            question_store=store,
            submission_log=FailingSubmissionLog(),
        )

        with pytest.raises(StoreUnavailableError):
            await restorer.restore(session_id="S1", presentation_id="P1")


class TestViewerRestorer:
    async def test_only_requested_learner_and_presentation_questions(self) -> None:
        store = await seeded_store(code_uids=("Q1", "Q2"))
        log = await _log_with(
            _record("L1", 100, "l1-q1-old", question_uid="Q1"),
            _record("L1", 200, "l1-q1-new", question_uid="Q1"),
            _record("L2", 300, "l2-q1", question_uid="Q1"),
            _record("L1", 150, "l1-qx", question_uid="QX"),
        )
        restorer = ViewerRestorer(
            config=PluginConfig(), question_store=store, submission_log=log
        )

        answers = await restorer.restore(
            session_id="S1", presentation_id="P1", answeree="L1"
        )

        assert [(a.uid, a.submission, a.submit_date) for a in answers] == [
            ("Q1", "l1-q1-new", 200)
        ]

    async def test_answers_follow_presentation_order(self) -> None:
        store = await seeded_store(code_uids=("Q1", "Q2"))
        log = await _log_with(
            _record("L1", 300, "q2", question_uid="Q2"),
            _record("L1", 100, "q1", question_uid="Q1"),
        )
        restorer = ViewerRestorer(
            config=PluginConfig(), question_store=store, submission_log=log
        )

        answers = await restorer.restore(
            session_id="S1", presentation_id="P1", answeree="L1"
        )

        assert [a.uid for a in answers] == ["Q1", "Q2"]

    async def test_learner_without_answers_gets_empty_list(self) -> None:
        store = await seeded_store()
        restorer = ViewerRestorer(
            config=PluginConfig(),
            question_store=store,
            submission_log=InMemorySubmissionLog(),
        )

        answers = await restorer.restore(
            session_id="S1", presentation_id="P1", answeree="L9"
        )

        assert answers == []

    async def test_presentation_without_code_questions_skips_log(self) -> None:
        store = await seeded_store(code_uids=(), other_uids=("MC1",))
        log = FailingSubmissionLog()
        restorer = ViewerRestorer(
            config=PluginConfig(), question_store=store, submission_log=log
        )

        answers = await restorer.restore(
            session_id="S1", presentation_id="P1", answeree="L1"
        )

        assert answers == []
        assert log.find_calls == 0
