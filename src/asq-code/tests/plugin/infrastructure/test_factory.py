"""Tests for create_plugin wiring."""

from asq_code.config.domain.config import PluginConfig
from asq_code.plugin.application.plugin import CodeQuestionPlugin
from asq_code.plugin.domain.payloads import ConnectionInfo
from asq_code.plugin.infrastructure.factory import create_plugin
from asq_code.question.domain.question import ExtractionResult
from asq_code.submission.domain.answer import AnswerSubmission
from asq_code.submission.infrastructure.memory_log import InMemorySubmissionLog
from tests.notification.fake_notifier import FakeNotifier
from tests.question.fake_extractor import FakeQuestionExtractor
from tests.question.seed import seeded_store


class TestCreatePlugin:
    async def test_returns_working_plugin(self) -> None:
        log = InMemorySubmissionLog()
        notifier = FakeNotifier()
        plugin = create_plugin(
            config=PluginConfig(),
            extractor=FakeQuestionExtractor(
                result=ExtractionResult(html="", questions=[])
            ),
            question_store=await seeded_store(),
            submission_log=log,
            notifier=notifier,
            clock=lambda: 1234,
        )

        assert isinstance(plugin, CodeQuestionPlugin)

        await plugin.answer_submission(
            AnswerSubmission(
                question_uid="Q1", session_id="S1", answeree="L1", submission="x"
            )
        )
        await plugin.viewer_connected(
            ConnectionInfo(
                socket_id="s", presentation_id="P1", session_id="S1", whitelist_id="L1"
            )
        )

        assert len(log) == 1
        assert notifier.to_role[0].payload["question"]["answers"][0]["submitDate"] == 1234
        assert notifier.to_connection[0].payload["questions"] == [
            {"uid": "Q1", "submitDate": 1234, "submission": "x"}
        ]
