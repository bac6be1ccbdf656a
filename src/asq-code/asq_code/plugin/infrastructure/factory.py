"""create_plugin — wires a CodeQuestionPlugin with structlog observers."""

from asq_code.config.domain.config import PluginConfig
from asq_code.notification.domain.notifier import Notifier
from asq_code.plugin.application.plugin import CodeQuestionPlugin
from asq_code.progress.application.live_progress import LiveProgressAggregator
from asq_code.progress.application.restoration import PresenterRestorer, ViewerRestorer
from asq_code.progress.infrastructure.observer import StructlogProgressObserver
from asq_code.question.domain.extractor import QuestionExtractor
from asq_code.question.domain.store import QuestionStore
from asq_code.question.infrastructure.observer import StructlogQuestionObserver
from asq_code.submission.application.recorder import (
    Clock,
    SubmissionRecorder,
    epoch_millis,
)
from asq_code.submission.domain.log import SubmissionLog
from asq_code.submission.infrastructure.observer import StructlogSubmissionObserver


def create_plugin(
    config: PluginConfig,
    extractor: QuestionExtractor,
    question_store: QuestionStore,
    submission_log: SubmissionLog,
    notifier: Notifier,
    clock: Clock = epoch_millis,
) -> CodeQuestionPlugin:
    """Build a plugin over the host's collaborators, logging through structlog."""
    progress_observer = StructlogProgressObserver()
    live_progress = LiveProgressAggregator(
        config=config,
        submission_log=submission_log,
        notifier=notifier,
        observer=progress_observer,
    )
    recorder = SubmissionRecorder(
        config=config,
        question_store=question_store,
        submission_log=submission_log,
        live_progress=live_progress,
        observer=StructlogSubmissionObserver(),
        clock=clock,
    )
    return CodeQuestionPlugin(
        config=config,
        extractor=extractor,
        question_store=question_store,
        recorder=recorder,
        presenter_restorer=PresenterRestorer(
            config=config,
            question_store=question_store,
            submission_log=submission_log,
        ),
        viewer_restorer=ViewerRestorer(
            config=config,
            question_store=question_store,
            submission_log=submission_log,
        ),
        notifier=notifier,
        question_observer=StructlogQuestionObserver(),
        progress_observer=progress_observer,
    )
