"""Event payloads pushed through the notification channel.

Payloads serialise with camelCase keys (``questionType``, ``submitDate`` ...),
matching what the browser-side question components consume.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from asq_code.submission.domain.submission import EpochMillis, LatestSubmission


class _EventModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class QuestionProgress(_EventModel):
    """Every learner's current answer to one question in one session."""

    uid: str
    answers: list[LatestSubmission]


class PresenterQuestionState(_EventModel):
    """Restored presenter view of one question. The solution is not included."""

    uid: str
    stem: str
    code: str
    submissions: list[LatestSubmission]


class ViewerAnswer(_EventModel):
    """A single learner's current answer to one question."""

    uid: str
    submit_date: EpochMillis
    submission: str


class ProgressEvent(_EventModel):
    question_type: str
    type: Literal["progress"] = "progress"
    question: QuestionProgress


class RestorePresenterEvent(_EventModel):
    question_type: str
    type: Literal["restorePresenter"] = "restorePresenter"
    questions: list[PresenterQuestionState]


class RestoreViewerEvent(_EventModel):
    question_type: str
    type: Literal["restoreViewer"] = "restoreViewer"
    questions: list[ViewerAnswer]
