"""
Filter engine for the filtered-responses service.

This module provides the filter models, value classification, per-type
comparators, and the compiler/evaluator applied to upstream submissions.
"""

from .models import (
    ConditionKind,
    ValueKind,
    InvalidFilterFormat,
    MISSING_VALUE,
    FilterClause,
    CompiledClause,
    CompiledFilter,
    FILTERS_SCHEMA,
    parse_filters_json,
)
from .classify import classify_value, parse_date, to_timestamp
from .compare import compare_strings, compare_numbers, compare_dates
from .compiler import compile_filters
from .evaluator import filter_submissions, matches

__all__ = [
    "ConditionKind",
    "ValueKind",
    "InvalidFilterFormat",
    "MISSING_VALUE",
    "FilterClause",
    "CompiledClause",
    "CompiledFilter",
    "FILTERS_SCHEMA",
    "parse_filters_json",
    "classify_value",
    "parse_date",
    "to_timestamp",
    "compare_strings",
    "compare_numbers",
    "compare_dates",
    "compile_filters",
    "filter_submissions",
    "matches",
]
