"""Question domain value objects."""

from pydantic import BaseModel, Field


class Question(BaseModel, frozen=True):
    """A persisted question definition.

    ``solution`` is the reference answer. It never leaves the server in any
    event payload.
    """

    uid: str = Field(min_length=1)
    type: str = Field(min_length=1)
    stem: str = ""
    code: str = ""
    solution: str = ""
    html: str = ""


class ExtractedQuestion(BaseModel, frozen=True):
    """A question definition as handed over by the document ingestion collaborator."""

    uid: str = Field(min_length=1)
    html: str = ""
    stem: str = ""
    code: str = ""
    solution: str = ""

    def to_question(self, question_type: str) -> Question:
        return Question(
            uid=self.uid,
            type=question_type,
            stem=self.stem,
            code=self.code,
            solution=self.solution,
            html=self.html,
        )


class ExtractionResult(BaseModel, frozen=True):
    """Rewritten document html plus every question found in it, in document order."""

    html: str
    questions: list[ExtractedQuestion]
