"""
FastAPI route for answer generation.

Endpoints:
- POST /api/generate: Generate one Zhihu-style answer

Endpoint flow:
- Step 1: Parse/Validate -> Pydantic GenerateRequest + explicit field checks
- Step 2: Configuration -> completion credential must be present
- Step 3: Call Service -> generate_article (prompt assembly + completion)
- Step 4: Map Errors -> CompletionError becomes 500 with its message
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from zhihu_writer.schemas.generate import GenerateRequest, GenerateResponse
from zhihu_writer.services.completion_service import (
    ChatCompletionClient,
    CompletionError,
    get_completion_client,
)
from zhihu_writer.services.generation_service import generate_article, normalize_models
from zhihu_writer.services.prompt_assets import StaticPromptAssets, get_prompt_assets
from zhihu_writer.utils.constants import ERROR_MESSAGES
from zhihu_writer.utils.logging import preview

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["generate"]
)


@router.post(
    "/generate",
    response_model=GenerateResponse,
    status_code=200,
    summary="Generate a Zhihu-style answer",
    description="""
    Generates a long-form answer for a Zhihu question.

    **Frontend Flow:**
    1. User enters a title and optionally up to 3 product names
    2. Frontend calls POST /api/search once per product name
    3. POST /api/generate with title, models and the collected searchData
    4. Display, copy, download or edit the returned article

    **Errors:**
    - 400: title missing, or models given without searchData
    - 500: credential not configured, timeout, upstream failure, empty generation
    """
)
async def generate_endpoint(
    request: GenerateRequest,
    client: Optional[ChatCompletionClient] = Depends(get_completion_client),
    assets: StaticPromptAssets = Depends(get_prompt_assets),
) -> GenerateResponse:
    """
    Answer generation endpoint.

    Generation is all-or-nothing: either the full article is returned or an
    error body, never a partial text.
    """
    # --- STEP 1: Validate ---
    title = (request.title or "").strip()
    if not title:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES['TITLE_REQUIRED']
        )

    models = normalize_models(request.models)
    if models and not request.search_data:
        logger.warning(f"Generate called with {len(models)} models but no searchData")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES['MISSING_SEARCH_DATA']
        )

    logger.info(
        f"POST /api/generate called, title='{preview(title)}', models={len(models)}"
    )

    # --- STEP 2: Configuration ---
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ERROR_MESSAGES['CREDENTIAL_NOT_CONFIGURED']
        )

    # --- STEP 3 & 4: Call service, map errors ---
    try:
        response = await generate_article(
            client=client,
            assets=assets,
            title=title,
            models=models,
            search_data=request.search_data,
            content_type=request.content_type,
            style_preference=request.style_preference,
            manual_prompt=request.manual_prompt,
        )
    except CompletionError as e:
        logger.error(f"Generation failed: {type(e).__name__}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or ERROR_MESSAGES['GENERATION_FAILED']
        )
    except Exception as e:
        logger.error(f"Unexpected error during generation: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{ERROR_MESSAGES['GENERATION_FAILED']}: {e}"
        )

    logger.info(f"Returning article with {len(response.article)} chars")
    return response
