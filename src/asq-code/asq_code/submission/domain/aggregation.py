"""Latest-wins reductions over submission log rows.

Every function here is pure: the result depends only on the set of rows passed
in, never on their order, because recency is decided by
``(submit_date, sequence)`` and sequences are unique.
"""

from collections.abc import Iterable

from asq_code.submission.domain.submission import LatestSubmission, Submission


def _keep_latest[K](
    best: dict[K, Submission], key: K, row: Submission
) -> None:
    current = best.get(key)
    if current is None or row.recency > current.recency:
        best[key] = row


def _most_recent_first(rows: Iterable[Submission]) -> list[Submission]:
    return sorted(rows, key=lambda row: row.recency, reverse=True)


def _to_latest(row: Submission) -> LatestSubmission:
    return LatestSubmission(
        answeree=row.answeree,
        submit_date=row.submit_date,
        submission=row.submission,
    )


def latest_per_answeree(rows: Iterable[Submission]) -> list[LatestSubmission]:
    """Return each learner's most recent row, most recent learner first."""
    best: dict[str, Submission] = {}
    for row in rows:
        _keep_latest(best, row.answeree, row)
    return [_to_latest(row) for row in _most_recent_first(best.values())]


def latest_per_question_and_answeree(
    rows: Iterable[Submission],
) -> dict[str, list[LatestSubmission]]:
    """Two-stage grouping: latest per (question, learner), then grouped by question.

    Only questions that appear in ``rows`` are keys of the result; callers that
    need every question of a presentation must left-join onto their own list.
    """
    best: dict[tuple[str, str], Submission] = {}
    for row in rows:
        _keep_latest(best, (row.question_uid, row.answeree), row)

    grouped: dict[str, list[LatestSubmission]] = {}
    for row in _most_recent_first(best.values()):
        grouped.setdefault(row.question_uid, []).append(_to_latest(row))
    return grouped


def latest_per_question(rows: Iterable[Submission]) -> dict[str, Submission]:
    """Return the most recent row for each question uid."""
    best: dict[str, Submission] = {}
    for row in rows:
        _keep_latest(best, row.question_uid, row)
    return best
