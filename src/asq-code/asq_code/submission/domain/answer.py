"""AnswerSubmission — the answer-submission hook payload."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnswerSubmission(BaseModel):
    """A learner's answer as delivered by the host's submission pipeline.

    ``submission`` is deliberately untyped: the pipeline fans the same payload out
    to every plugin, and only the plugin owning the question decides whether the
    shape is acceptable.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    question_uid: str
    session_id: str
    answeree: str
    submission: Any = None
    confidence: Any = None
    exercise_id: str | None = None
