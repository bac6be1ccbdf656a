"""QuestionExtractor Protocol — the document ingestion collaborator."""

from typing import Protocol

from asq_code.question.domain.question import ExtractionResult


class QuestionExtractor(Protocol):
    """Finds every ``tag_name`` element in a presentation document.

    Returns the rewritten html (uids assigned, solutions removed) together with
    the extracted question definitions.
    """

    def extract(self, html: str, tag_name: str) -> ExtractionResult: ...
