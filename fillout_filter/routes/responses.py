import logging
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Depends, Query, Request

from ..filters import FilterClause, compile_filters, filter_submissions
from ..upstream import FilloutClient, forwarded_params
from ..validation import MAX_LIMIT, _page_count, _parse_filters_param

log = logging.getLogger("fillout.routes")

router = APIRouter(tags=["responses"])


def get_fillout(request: Request) -> FilloutClient:
    return request.app.state.fillout


def get_filters(
    filters: Optional[str] = Query(None, description="JSON array of filter clauses"),
) -> List[FilterClause]:
    return _parse_filters_param(filters)


@router.get("/{form_id}/filteredResponses")
def filtered_responses(
    form_id: str,
    limit: int = Query(MAX_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0),
    status: Literal["in_progress", "finished"] = Query("finished"),
    sort: Literal["asc", "desc"] = Query("asc"),
    after_date: Optional[date] = Query(None, alias="afterDate"),
    before_date: Optional[date] = Query(None, alias="beforeDate"),
    include_edit_link: bool = Query(False, alias="includeEditLink"),
    clauses: List[FilterClause] = Depends(get_filters),
    fillout: FilloutClient = Depends(get_fillout),
) -> Dict[str, Any]:
    """
    Fetch one page of submissions from Fillout and keep only those that
    satisfy every clause in `filters`.

    - Non-filter parameters are forwarded to Fillout unchanged.
    - totalResponses and pageCount describe the filtered page.
    """
    params = forwarded_params(
        {
            "limit": limit,
            "offset": offset,
            "status": status,
            "sort": sort,
            "afterDate": after_date,
            "beforeDate": before_date,
            "includeEditLink": include_edit_link,
        }
    )

    data = fillout.get_submissions(form_id, params)

    compiled = compile_filters(clauses)
    responses = filter_submissions(data.get("responses"), compiled)
    log.debug(
        "form %s: %d of %d submissions kept by %d filters",
        form_id,
        len(responses),
        len(data.get("responses") or []),
        len(compiled),
    )

    return {
        "responses": responses,
        "totalResponses": len(responses),
        "pageCount": _page_count(len(responses), limit),
    }
