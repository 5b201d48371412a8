import json
import math
import logging
from typing import List, Optional

import jsonschema

from ..filters import FilterClause, parse_filters_json

log = logging.getLogger("fillout.validation")

MAX_LIMIT = 150


class InvalidQueryParameters(ValueError):
    """A query parameter failed validation before any filtering ran."""


def _parse_filters_param(raw: Optional[str]) -> List[FilterClause]:
    if raw is None or raw == "":
        return []
    try:
        return parse_filters_json(raw)
    except (json.JSONDecodeError, jsonschema.ValidationError) as e:
        log.warning("Rejected filters parameter %r: %s", raw, e)
        raise InvalidQueryParameters("Invalid Query Parameters") from e


def _page_count(total: int, limit: int) -> int:
    if limit <= 0:
        raise ValueError("limit must be positive")
    return math.ceil(total / limit)
