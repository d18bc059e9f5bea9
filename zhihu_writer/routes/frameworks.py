"""
FastAPI route listing the answer structure frameworks.

Endpoints:
- GET /api/frameworks: Frameworks parsed from structureRules.md

Read-only; the list is fixed for the lifetime of the process.
"""

import logging

from fastapi import APIRouter, Depends

from zhihu_writer.schemas.frameworks import (
    FrameworkListResponse,
    StructureFrameworkResponse,
)
from zhihu_writer.services.prompt_assets import StaticPromptAssets, get_prompt_assets

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["frameworks"]
)


@router.get(
    "/frameworks",
    response_model=FrameworkListResponse,
    summary="List answer structure frameworks",
)
async def list_frameworks(
    assets: StaticPromptAssets = Depends(get_prompt_assets),
) -> FrameworkListResponse:
    """Return every framework in file order; empty when the file is missing."""
    logger.debug(f"Listing {len(assets.frameworks)} frameworks")
    return FrameworkListResponse(
        frameworks=[
            StructureFrameworkResponse(title=f.title, content=f.content)
            for f in assets.frameworks
        ]
    )
