"""CodeQuestionPlugin — the four lifecycle hooks of the code question type."""

from asq_code.config.domain.config import PluginConfig
from asq_code.notification.domain.notifier import Notifier
from asq_code.plugin.domain.hooks import HookRegistry
from asq_code.plugin.domain.payloads import ConnectionInfo, ParsedDocument
from asq_code.progress.application.restoration import PresenterRestorer, ViewerRestorer
from asq_code.progress.domain.events import RestorePresenterEvent, RestoreViewerEvent
from asq_code.progress.domain.observer import ProgressObserver
from asq_code.question.domain.extractor import QuestionExtractor
from asq_code.question.domain.observer import QuestionObserver
from asq_code.question.domain.store import QuestionStore
from asq_code.submission.application.recorder import SubmissionRecorder
from asq_code.submission.domain.answer import AnswerSubmission

# Hook name -> method name.
HOOKS: dict[str, str] = {
    "parse_html": "parse_html",
    "answer_submission": "answer_submission",
    "presenter_connected": "presenter_connected",
    "viewer_connected": "viewer_connected",
}


class CodeQuestionPlugin:
    """Entry points invoked by the host's hook dispatcher.

    Every hook awaits its store calls one after the other and returns the payload
    it was given (the parse hook returns a copy carrying the rewritten html).
    The plugin keeps no state of its own; every read re-derives current answers
    from the submission log.
    """

    def __init__(
        self,
        config: PluginConfig,
        extractor: QuestionExtractor,
        question_store: QuestionStore,
        recorder: SubmissionRecorder,
        presenter_restorer: PresenterRestorer,
        viewer_restorer: ViewerRestorer,
        notifier: Notifier,
        question_observer: QuestionObserver,
        progress_observer: ProgressObserver,
    ) -> None:
        self._config = config
        self._extractor = extractor
        self._question_store = question_store
        self._recorder = recorder
        self._presenter_restorer = presenter_restorer
        self._viewer_restorer = viewer_restorer
        self._notifier = notifier
        self._question_observer = question_observer
        self._progress_observer = progress_observer

    @property
    def tag_name(self) -> str:
        return self._config.tag_name

    def register(self, registry: HookRegistry) -> None:
        for hook_name, method_name in HOOKS.items():
            registry.register_hook(hook_name, getattr(self, method_name))

    async def parse_html(self, document: ParsedDocument) -> ParsedDocument:
        """Persist the document's questions and hand back the rewritten html."""
        result = self._extractor.extract(html=document.html, tag_name=self.tag_name)
        questions = [q.to_question(question_type=self.tag_name) for q in result.questions]

        await self._question_store.create_many(document.presentation_id, questions)

        self._question_observer.questions_ingested(
            presentation_id=document.presentation_id,
            question_type=self.tag_name,
            question_uids=[q.uid for q in questions],
        )
        return document.model_copy(update={"html": result.html})

    async def answer_submission(self, answer: AnswerSubmission) -> AnswerSubmission:
        """Record the answer if it targets a code question; pass it on either way.

        Raises:
            QuestionNotFoundError: if the referenced question does not exist.
            MalformedSubmissionError: if the submission is not a string.
        """
        await self._recorder.record(answer)
        return answer

    async def presenter_connected(self, info: ConnectionInfo) -> ConnectionInfo:
        if info.session_id is None:
            return info

        try:
            questions = await self._presenter_restorer.restore(
                session_id=info.session_id, presentation_id=info.presentation_id
            )
        except Exception as exc:
            self._progress_observer.restoration_failed(
                session_id=info.session_id,
                presentation_id=info.presentation_id,
                role="presenter",
                reason=str(exc),
            )
            raise

        event = RestorePresenterEvent(question_type=self.tag_name, questions=questions)
        self._notifier.emit_to_connection(
            event_name=self._config.event_name,
            payload=event.to_payload(),
            connection_id=info.socket_id,
        )
        self._progress_observer.presenter_restored(
            session_id=info.session_id,
            presentation_id=info.presentation_id,
            total_questions=len(questions),
            total_submissions=sum(len(q.submissions) for q in questions),
        )
        return info

    async def viewer_connected(self, info: ConnectionInfo) -> ConnectionInfo:
        # Without a learner identity there is nothing of theirs to restore.
        if info.session_id is None or info.whitelist_id is None:
            return info

        try:
            answers = await self._viewer_restorer.restore(
                session_id=info.session_id,
                presentation_id=info.presentation_id,
                answeree=info.whitelist_id,
            )
        except Exception as exc:
            self._progress_observer.restoration_failed(
                session_id=info.session_id,
                presentation_id=info.presentation_id,
                role="viewer",
                reason=str(exc),
            )
            raise

        event = RestoreViewerEvent(question_type=self.tag_name, questions=answers)
        self._notifier.emit_to_connection(
            event_name=self._config.event_name,
            payload=event.to_payload(),
            connection_id=info.socket_id,
        )
        self._progress_observer.viewer_restored(
            session_id=info.session_id,
            presentation_id=info.presentation_id,
            answeree=info.whitelist_id,
            total_answers=len(answers),
        )
        return info
