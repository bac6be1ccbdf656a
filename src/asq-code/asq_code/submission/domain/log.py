"""SubmissionLog Protocol — structural interface to the append-only submission log."""

from collections.abc import Sequence
from typing import Protocol

from asq_code.submission.domain.submission import Submission, SubmissionRecord


class SubmissionLog(Protocol):
    """Appends rows and filters them. Grouping is done by the aggregation functions.

    Each call is a single request to the store; failures propagate unchanged.
    """

    async def append(self, record: SubmissionRecord) -> Submission: ...

    async def find(
        self,
        session_id: str,
        question_uids: Sequence[str],
        answeree: str | None = None,
    ) -> list[Submission]: ...
