"""InMemorySubmissionLog — list-backed SubmissionLog for embedding and tests."""

import itertools
from collections.abc import Sequence

from asq_code.submission.domain.submission import Submission, SubmissionRecord


class InMemorySubmissionLog:
    """Satisfies the SubmissionLog protocol structurally.

    Rows are never modified or removed. ``sequence`` comes from a counter owned
    by the log instance, so it also reflects insertion order.
    """

    def __init__(self) -> None:
        self._rows: list[Submission] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._rows)

    async def append(self, record: SubmissionRecord) -> Submission:
        row = Submission(**record.model_dump(), sequence=next(self._sequence))
        self._rows.append(row)
        return row

    async def find(
        self,
        session_id: str,
        question_uids: Sequence[str],
        answeree: str | None = None,
    ) -> list[Submission]:
        wanted = set(question_uids)
        return [
            row
            for row in self._rows
            if row.session_id == session_id
            and row.question_uid in wanted
            and (answeree is None or row.answeree == answeree)
        ]
