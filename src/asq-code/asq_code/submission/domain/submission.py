"""Submission domain value objects — rows of the append-only submission log."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

type EpochMillis = int


class SubmissionRecord(BaseModel):
    """One learner answer, as appended to the log.

    Fields serialise with camelCase aliases (``questionUid``, ``submitDate`` ...)
    and accept either spelling on input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    question_uid: str = Field(min_length=1)
    session_id: str = Field(min_length=1)
    answeree: str = Field(min_length=1)
    type: str = Field(min_length=1)
    submit_date: EpochMillis = Field(ge=0)
    submission: str
    confidence: Any = None
    exercise_id: str | None = None


class Submission(SubmissionRecord):
    """A stored log row.

    ``sequence`` is assigned by the log at append time and strictly increases
    across appends. Together with ``submit_date`` it totally orders rows by
    recency, so two rows with the same timestamp still have a stable winner.
    """

    sequence: int = Field(ge=0)

    @property
    def recency(self) -> tuple[EpochMillis, int]:
        return (self.submit_date, self.sequence)


class LatestSubmission(BaseModel):
    """A learner's current answer: the most recent row for that learner."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    answeree: str
    submit_date: EpochMillis
    submission: str
