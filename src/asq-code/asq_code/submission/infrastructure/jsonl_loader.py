"""JSONL submission loader — reads exported log rows into SubmissionRecord objects."""

import json
from pathlib import Path

from pydantic import ValidationError

from asq_code.submission.domain.submission import SubmissionRecord
from asq_code.submission.infrastructure.errors import SubmissionLoadError


def load_submission_records(path: Path) -> list[SubmissionRecord]:
    """
    Load every record from a JSONL file, in file order.

    Keys may be camelCase (``questionUid``) or snake_case (``question_uid``).
    Collects ALL per-line errors before raising a single SubmissionLoadError.

    Raises:
        SubmissionLoadError: if the file is not found, any line is invalid JSON,
            or any line fails record validation.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            lines = [line for line in fh if line.strip()]
    except FileNotFoundError as exc:
        raise SubmissionLoadError(reason=f"file not found: {path}") from exc

    records: list[SubmissionRecord] = []
    errors: list[str] = []
    for index, line in enumerate(lines):
        result = _parse_line(line=line, index=index)
        if isinstance(result, str):
            errors.append(result)
        else:
            records.append(result)

    if errors:
        raise SubmissionLoadError(reason="; ".join(errors))
    return records


def _parse_line(line: str, index: int) -> SubmissionRecord | str:
    """Return a SubmissionRecord on success, or an error string describing the problem."""
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        return f"line {index}: invalid JSON: {exc}"

    if not isinstance(data, dict):
        return f"line {index}: expected a JSON object"

    try:
        return SubmissionRecord.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(
            f"'{'.'.join(str(part) for part in err['loc'])}'" for err in exc.errors()
        )
        return f"line {index}: invalid field(s) {fields}"
