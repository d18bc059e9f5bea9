"""
Pydantic schemas for the product search endpoint.

POST /api/search looks up one product name on Serpstack and returns the
normalized organic results, which the frontend later sends back inside
GenerateRequest.searchData.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from zhihu_writer.agents.answer.types import SearchSource


class SearchSnippet(BaseModel):
    """
    A search result as posted back in GenerateRequest.searchData.

    Only title and snippet reach the prompt, so link and source are loose.
    """
    title: str = Field(..., description="Result page title")
    snippet: str = Field(..., description="Short text excerpt shown by the search engine")
    link: Optional[str] = Field(
        None,
        description="Result URL",
        examples=["https://www.zhihu.com/question/123"]
    )
    source: Optional[str] = Field(
        None,
        description="Provider tag, any value accepted"
    )


class SearchResultItem(SearchSnippet):
    """A single normalized result produced by /api/search."""
    source: SearchSource = Field(
        SearchSource.SERPSTACK,
        description="Search provider tag"
    )


class SearchRequest(BaseModel):
    """Request to search snippets for one product name."""
    model: Optional[str] = Field(
        None,
        description="Product name / model to search for",
        examples=["戴森 V12", "祖玛珑 蓝风铃"]
    )


class SearchResponse(BaseModel):
    """Successful search response."""
    model: str = Field(..., description="The trimmed product name that was searched")
    results: List[SearchResultItem] = Field(
        ...,
        description="Normalized results in provider order"
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "model": "戴森 V12",
                "results": [
                    {
                        "title": "戴森V12吸尘器使用半年感受",
                        "snippet": "轻是真的轻，但是尘盒太小……",
                        "link": "https://www.zhihu.com/question/123",
                        "source": "serpstack"
                    }
                ]
            }
        }
