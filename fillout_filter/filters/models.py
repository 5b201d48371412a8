from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union
import json

import jsonschema

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ConditionKind(str, Enum):
    EQUALS = "equals"
    DOES_NOT_EQUAL = "does_not_equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    NULL = "null"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InvalidFilterFormat(ValueError):
    """
    Raised when a filter is well-formed JSON but cannot be applied:
    unsupported value type, duplicate question id, or a condition the
    value kind does not support.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Core filter models
# ---------------------------------------------------------------------------

# Stands in for a clause that carries no `value` key at all.
MISSING_VALUE = object()


@dataclass
class FilterClause:
    """
    One filter condition as supplied by the caller: a question id,
    a condition, and the raw value to compare answers against.
    """
    id: str
    condition: ConditionKind
    value: Any

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterClause":
        return cls(
            id=data["id"],
            condition=ConditionKind(data["condition"]),
            value=data.get("value", MISSING_VALUE),
        )


@dataclass(frozen=True)
class CompiledClause:
    """A clause after type inference, keyed by question id in a CompiledFilter."""
    condition: ConditionKind
    value_kind: ValueKind
    value: Any


CompiledFilter = Dict[str, CompiledClause]


# ---------------------------------------------------------------------------
# JSON Schema for the `filters` query parameter
# ---------------------------------------------------------------------------

# `value` is left unconstrained; its type is checked by the
# classifier so that unsupported values surface as InvalidFilterFormat.
FILTERS_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Response Filters",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "condition": {
                "type": "string",
                "enum": [c.value for c in ConditionKind],
            },
            "value": {},
        },
        "required": ["id", "condition"],
    },
}


def parse_filters_json(payload: Union[str, List[Dict[str, Any]]]) -> List[FilterClause]:
    """
    Accept a JSON string or an already decoded list and return FilterClauses.

    Raises json.JSONDecodeError or jsonschema.ValidationError when the
    payload is not a list of clause objects.
    """
    data = json.loads(payload) if isinstance(payload, str) else payload
    jsonschema.validate(instance=data, schema=FILTERS_SCHEMA)
    return [FilterClause.from_dict(item) for item in data]


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
]
