"""
Apply a CompiledFilter to upstream submissions.

Every clause must hold for a submission to be kept (logical AND), and
evaluation of a submission stops at the first clause that fails.
Submissions are returned as-is, in their original order.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional

from .compare import compare_dates, compare_numbers, compare_strings
from .models import (
    CompiledClause,
    CompiledFilter,
    ConditionKind,
    InvalidFilterFormat,
    ValueKind,
)

Submission = Dict[str, Any]

_COMPARATORS: Dict[ValueKind, Callable[[Any, Any, ConditionKind], bool]] = {
    ValueKind.STRING: compare_strings,
    ValueKind.NUMBER: compare_numbers,
    ValueKind.DATE: compare_dates,
}

_MISSING = object()


def _answer_for(submission: Submission, question_id: str) -> Any:
    for question in submission.get("questions") or []:
        if question.get("id") == question_id:
            return question.get("value")
    return _MISSING


def _clause_holds(clause: CompiledClause, answer: Any) -> bool:
    if clause.value_kind == ValueKind.NULL:
        if clause.condition == ConditionKind.EQUALS:
            return answer is None
        if clause.condition == ConditionKind.DOES_NOT_EQUAL:
            return answer is not None
        raise InvalidFilterFormat(
            "If you'd like to filter on null values, please use equals or does_not_equal"
        )

    # a non-null filter never matches an unanswered question
    if answer is None:
        return False

    return _COMPARATORS[clause.value_kind](clause.value, answer, clause.condition)


def matches(submission: Submission, compiled: CompiledFilter) -> bool:
    for question_id, clause in compiled.items():
        answer = _answer_for(submission, question_id)
        # partial submissions may lack the question entirely
        if answer is _MISSING:
            return False
        if not _clause_holds(clause, answer):
            return False
    return True


def filter_submissions(
    submissions: Optional[Iterable[Submission]], compiled: CompiledFilter
) -> List[Submission]:
    return [s for s in submissions or [] if matches(s, compiled)]
