"""Schemas for the answer structure framework listing."""

from typing import List

from pydantic import BaseModel, Field


class StructureFrameworkResponse(BaseModel):
    """One answer skeleton from structureRules.md."""
    title: str = Field(..., examples=["先下结论再拆解"])
    content: str = Field(..., description="Free-text description of the skeleton")


class FrameworkListResponse(BaseModel):
    """All frameworks, in file order."""
    frameworks: List[StructureFrameworkResponse]
