"""InMemoryQuestionStore — dict-backed QuestionStore for embedding and tests."""

from asq_code.question.domain.question import Question
from asq_code.question.infrastructure.errors import DuplicateQuestionError


class InMemoryQuestionStore:
    """Satisfies the QuestionStore protocol structurally.

    Questions are kept per presentation in creation order, which is the order
    ``get_all_by_presentation_and_type`` returns them in.
    """

    def __init__(self) -> None:
        self._by_uid: dict[str, Question] = {}
        self._by_presentation: dict[str, list[str]] = {}

    async def get_by_id(self, uid: str) -> Question | None:
        return self._by_uid.get(uid)

    async def get_all_by_presentation_and_type(
        self, presentation_id: str, question_type: str
    ) -> list[Question]:
        uids = self._by_presentation.get(presentation_id, [])
        return [
            self._by_uid[uid] for uid in uids if self._by_uid[uid].type == question_type
        ]

    async def create_many(self, presentation_id: str, questions: list[Question]) -> None:
        """
        Insert all questions or none.

        Raises:
            DuplicateQuestionError: if any uid already exists or repeats in the batch.
        """
        seen: set[str] = set()
        for question in questions:
            if question.uid in self._by_uid or question.uid in seen:
                raise DuplicateQuestionError(question_uid=question.uid)
            seen.add(question.uid)

        uids = self._by_presentation.setdefault(presentation_id, [])
        for question in questions:
            self._by_uid[question.uid] = question
            uids.append(question.uid)
