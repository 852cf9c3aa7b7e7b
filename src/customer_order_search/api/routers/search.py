from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Form, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ...config import load_config
from ...errors import FieldNotFound, InvalidArgument, UnrecognizedEntityKind
from ...index.milvus_index import MilvusIndexProvider
from ...search import SearchRequest, SearchService
from ..form_params import (
    clean_optional,
    parse_environment,
    parse_fields,
    parse_int,
    parse_sorting,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


class SearchResultsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Dict[str, Any]] = Field(
        default_factory=list,
        alias="Items",
        description="One flat record per matched customer or order.",
    )
    total_item_count: int = Field(
        0,
        ge=0,
        alias="TotalItemCount",
        description="Number of matches before paging.",
    )


@lru_cache(maxsize=1)
def get_search_service() -> SearchService:
    config = load_config()
    provider = MilvusIndexProvider(date_fields=config.date_fields_by_index())
    return SearchService(provider, config)


@router.post(
    "/results",
    summary="Search customers or orders",
    response_model=SearchResultsResponse,
)
def get_search_results(
    item_type: Optional[str] = Form(None, alias="itemType"),
    search_term: Optional[str] = Form(None, alias="searchTerm"),
    parent_id: Optional[str] = Form(None, alias="parentId"),
    sorting: Optional[str] = Form(None, alias="Sorting"),
    page_index: Optional[str] = Form(None, alias="PageIndex"),
    page_size: Optional[str] = Form(None, alias="PageSize"),
    fields: Optional[str] = Form(None),
    headers: Optional[str] = Form(None, alias="Headers"),
    language: Optional[str] = Form(None, alias="Language"),
    currency: Optional[str] = Form(None, alias="Currency"),
    service: SearchService = Depends(get_search_service),
) -> SearchResultsResponse:
    """Search the customer or order index with grid-style form fields.

    `Sorting` is the direction letter followed by the field name
    (e.g. "alast_name"); `fields` and `Headers` are pipe-delimited.
    """

    sort_direction, sort_field = parse_sorting(sorting)
    request = SearchRequest(
        entity_kind=item_type or "",
        term=search_term,
        scope_key=parse_environment(headers),
        sort_field=sort_field,
        sort_direction=sort_direction,
        page_index=parse_int(page_index),
        page_size=parse_int(page_size),
        requested_fields=parse_fields(fields),
    )
    logger.debug(
        "Search request parent=%r language=%r currency=%r",
        parent_id,
        clean_optional(language),
        clean_optional(currency),
    )

    try:
        outcome = service.get_search_results(request)
    except (InvalidArgument, UnrecognizedEntityKind) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FieldNotFound as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Search failed")
        raise HTTPException(status_code=500, detail=f"Search failed: {exc}") from exc

    return SearchResultsResponse(
        items=outcome.records, total_item_count=outcome.total_item_count
    )
