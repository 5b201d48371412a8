from __future__ import annotations
from typing import Iterable, Optional

from .classify import classify_value
from .models import CompiledClause, CompiledFilter, FilterClause, InvalidFilterFormat


def compile_filters(clauses: Optional[Iterable[FilterClause]]) -> CompiledFilter:
    """
    Build the per-request lookup of question id -> CompiledClause.

    Only one condition per question id is supported; a second clause for
    the same id raises InvalidFilterFormat. Insertion order is kept.
    """
    compiled: CompiledFilter = {}

    for clause in clauses or []:
        if clause.id in compiled:
            raise InvalidFilterFormat("Too many conditions for a single Id")
        compiled[clause.id] = CompiledClause(
            condition=clause.condition,
            value_kind=classify_value(clause.value),
            value=clause.value,
        )

    return compiled
