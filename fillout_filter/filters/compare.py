from __future__ import annotations
from numbers import Number
from typing import Any, Optional

from .classify import parse_date, to_timestamp
from .models import ConditionKind, InvalidFilterFormat


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def compare_strings(filter_value: str, question_value: Any, condition: ConditionKind) -> bool:
    """
    Case-insensitive containment: `equals` matches when the answer contains
    the filter text, `does_not_equal` when it does not.
    """
    needle = str(filter_value).lower()
    haystack = str(question_value).lower()

    if condition == ConditionKind.EQUALS:
        return needle in haystack
    if condition == ConditionKind.DOES_NOT_EQUAL:
        return needle not in haystack
    raise InvalidFilterFormat(
        "Cannot filter strings with greater_than or less_than. "
        "Please use equals or does_not_equal."
    )


def compare_numbers(filter_value: Any, question_value: Any, condition: ConditionKind) -> bool:
    answer = _as_number(question_value)

    if condition == ConditionKind.EQUALS:
        return answer is not None and answer == filter_value
    if condition == ConditionKind.DOES_NOT_EQUAL:
        return answer is None or answer != filter_value
    if answer is None:
        return False
    if condition == ConditionKind.GREATER_THAN:
        return answer > filter_value
    return answer < filter_value


def compare_dates(filter_value: str, question_value: Any, condition: ConditionKind) -> bool:
    """
    Compare as epoch timestamps. An answer that is not a date never
    matches; this is the one mismatch that does not raise.
    """
    answer = parse_date(question_value)
    if answer is None:
        return False

    target = parse_date(filter_value)
    if target is None:
        raise InvalidFilterFormat(f"Cannot read {filter_value!r} as a date.")

    return compare_numbers(to_timestamp(target), to_timestamp(answer), condition)
