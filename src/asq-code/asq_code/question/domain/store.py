"""QuestionStore Protocol — structural interface to the host's question collection."""

from typing import Protocol

from asq_code.question.domain.question import Question


class QuestionStore(Protocol):
    """Reads and creates question definitions.

    Implementations propagate their own failures unchanged.
    """

    async def get_by_id(self, uid: str) -> Question | None: ...

    async def get_all_by_presentation_and_type(
        self, presentation_id: str, question_type: str
    ) -> list[Question]: ...

    async def create_many(
        self, presentation_id: str, questions: list[Question]
    ) -> None: ...
