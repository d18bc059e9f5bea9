"""
FastAPI route for per-product search.

Endpoints:
- POST /api/search: Fetch Serpstack snippets for one product name

The frontend calls this once per product name and forwards the collected
results to /api/generate as searchData.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from zhihu_writer.schemas.search import SearchRequest, SearchResponse
from zhihu_writer.services.search_service import (
    SearchStatus,
    SerpstackClient,
    get_search_client,
)
from zhihu_writer.utils.constants import ERROR_MESSAGES
from zhihu_writer.utils.logging import preview

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["search"]
)


@router.post(
    "/search",
    response_model=SearchResponse,
    status_code=200,
    summary="Search snippets for one product",
    description="""
    Queries Serpstack for a single product name and returns normalized
    organic results (title, snippet, link, source).

    **Errors:**
    - 400: model name missing
    - 500: SERPSTACK_API_KEY not configured
    - 502: provider failed or returned nothing usable
    """
)
async def search_endpoint(
    request: SearchRequest,
    client: Optional[SerpstackClient] = Depends(get_search_client),
) -> SearchResponse:
    """Single-product search endpoint."""
    model = (request.model or "").strip()
    if not model:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES['MODEL_REQUIRED']
        )

    if client is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ERROR_MESSAGES['CREDENTIAL_NOT_CONFIGURED']
        )

    logger.info(f"POST /api/search called, model='{preview(model)}'")

    outcome = await client.search(model)

    if outcome.status is SearchStatus.EMPTY:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ERROR_MESSAGES['SEARCH_EMPTY']
        )
    if not outcome.ok:
        logger.warning(f"Search unavailable for model='{preview(model)}': {outcome.reason}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=ERROR_MESSAGES['SEARCH_UNAVAILABLE']
        )

    return SearchResponse(model=model, results=outcome.results)
