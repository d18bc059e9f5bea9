"""
Pydantic schemas for the answer generation endpoint.

Wire format is camelCase (searchData, contentType, ...) because the browser
frontend posts and reads these bodies directly; Python attributes stay
snake_case through field aliases.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zhihu_writer.agents.answer.types import ContentType, StylePreference
from zhihu_writer.schemas.search import SearchSnippet

# ============================================================================
# REQUEST MODELS
# ============================================================================

class GenerateRequest(BaseModel):
    """
    Request to generate one Zhihu answer.

    Required-field checks (title, searchData when models are given) happen in
    the route so they can answer with specific messages; this model only
    enforces types.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(
        None,
        description="The Zhihu question to answer",
        examples=["无线吸尘器到底值不值得买？"]
    )
    models: List[str] = Field(
        default_factory=list,
        description=(
            "Product names to weave in as examples. Trimmed, blanks and "
            "duplicates dropped, first 3 kept."
        ),
        examples=[["戴森 V12", "追觅 V16"]]
    )
    search_data: Dict[str, List[SearchSnippet]] = Field(
        default_factory=dict,
        alias="searchData",
        description="Search results per product name, as returned by /api/search"
    )
    manual_prompt: Optional[str] = Field(
        None,
        alias="manualPrompt",
        description="Optional extra requirement appended to the prompt",
    )
    content_type: ContentType = Field(
        ContentType.DISCUSSION,
        alias="contentType",
        description="Guidance block; unknown values fall back to 'discussion'"
    )
    style_preference: StylePreference = Field(
        StylePreference.RANDOM,
        alias="stylePreference",
        description="Tone nudge; unknown values fall back to 'random'"
    )

    @field_validator("models", mode="before")
    @classmethod
    def default_models(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("search_data", mode="before")
    @classmethod
    def default_search_data(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("content_type", mode="before")
    @classmethod
    def coerce_content_type(cls, value: Any) -> ContentType:
        return ContentType.parse(value)

    @field_validator("style_preference", mode="before")
    @classmethod
    def coerce_style_preference(cls, value: Any) -> StylePreference:
        return StylePreference.parse(value)


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class ArticleMetadata(BaseModel):
    """Echo of the inputs that produced an article, plus a timestamp."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    models: List[str]
    content_type: ContentType = Field(..., alias="contentType")
    style_preference: StylePreference = Field(..., alias="stylePreference")
    generated_at: datetime = Field(
        ...,
        alias="generatedAt",
        description="UTC time the completion finished (ISO-8601)"
    )


class GenerateResponse(BaseModel):
    """
    Successful generation.

    The article is immutable from the server's point of view; edits made in
    the browser stay in the browser.
    """
    success: bool = Field(True, description="Always true on 200")
    article: str = Field(..., description="The generated answer text")
    metadata: ArticleMetadata
