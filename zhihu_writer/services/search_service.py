"""
Search Service - Serpstack web search

Looks up a single product name on Serpstack and normalizes the organic
results into SearchResultItem records.

Outcome model:
- OK: at least one usable result
- EMPTY: Serpstack answered but nothing usable came back
- UNAVAILABLE: transport failure, timeout, non-2xx, provider error payload,
  or a body that is not JSON

The client never raises for transport errors; callers branch on the outcome.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

import httpx

from zhihu_writer.agents.answer.types import SearchSource
from zhihu_writer.config import settings
from zhihu_writer.schemas.search import SearchResultItem
from zhihu_writer.utils.logging import preview

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    OK = "OK"
    EMPTY = "EMPTY"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search call."""
    status: SearchStatus
    results: List[SearchResultItem] = field(default_factory=list)
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SearchStatus.OK


def normalize_results(raw_results: Iterable[Any], limit: int) -> List[SearchResultItem]:
    """
    Map raw Serpstack organic results to SearchResultItem.

    Entries missing a title, snippet or url are dropped. Order is preserved
    and at most `limit` items are returned.
    """
    items: List[SearchResultItem] = []
    for raw in raw_results:
        if len(items) >= limit:
            break
        if not isinstance(raw, dict):
            continue

        title = raw.get("title")
        snippet = raw.get("snippet")
        url = raw.get("url")
        if not (title and snippet and url):
            continue

        items.append(SearchResultItem(
            title=str(title),
            snippet=str(snippet),
            link=str(url),
            source=SearchSource.SERPSTACK,
        ))

    return items


class SerpstackClient:
    """Async client for the Serpstack search API."""

    def __init__(
        self,
        access_key: str,
        base_url: str = "http://api.serpstack.com/search",
        result_limit: int = 10,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_key = access_key
        self.base_url = base_url
        self.result_limit = result_limit
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def search(self, product_name: str) -> SearchOutcome:
        """
        Search one product name.

        Args:
            product_name: Trimmed, non-empty product name used as the query

        Returns:
            SearchOutcome (never raises for network or provider errors)
        """
        params = {
            "access_key": self.access_key,
            "query": product_name,
            "num": self.result_limit,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.TimeoutException:
            logger.warning(
                f"Serpstack request timed out after {self.timeout_seconds}s "
                f"for query='{preview(product_name)}'"
            )
            return SearchOutcome(SearchStatus.UNAVAILABLE, reason="timeout")
        except httpx.HTTPError as e:
            logger.warning(f"Serpstack request failed: {type(e).__name__}")
            return SearchOutcome(SearchStatus.UNAVAILABLE, reason="network error")

        if not response.is_success:
            logger.warning(
                f"Serpstack response not ok: {response.status_code} "
                f"{preview(response.text, 200)}"
            )
            return SearchOutcome(
                SearchStatus.UNAVAILABLE,
                reason=f"HTTP {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning("Serpstack returned a non-JSON body")
            return SearchOutcome(SearchStatus.UNAVAILABLE, reason="invalid response body")

        if not isinstance(data, dict):
            logger.warning("Serpstack returned an unexpected JSON shape")
            return SearchOutcome(SearchStatus.UNAVAILABLE, reason="invalid response body")

        if data.get("error"):
            logger.warning(f"Serpstack error: {data['error']}")
            return SearchOutcome(SearchStatus.UNAVAILABLE, reason="provider error")

        organic = data.get("organic_results") or []
        if not isinstance(organic, list):
            organic = []

        results = normalize_results(organic, self.result_limit)
        if not results:
            logger.info(f"No usable results for query='{preview(product_name)}'")
            return SearchOutcome(SearchStatus.EMPTY, reason="no results")

        logger.info(f"Search returned {len(results)} results for query='{preview(product_name)}'")
        return SearchOutcome(SearchStatus.OK, results=results)


def get_search_client() -> Optional[SerpstackClient]:
    """
    FastAPI dependency: a Serpstack client, or None when no key is configured.
    """
    if not settings.SERPSTACK_API_KEY:
        logger.warning(
            "SERPSTACK_API_KEY not configured. Search will not work. "
            "Please set SERPSTACK_API_KEY in your .env file."
        )
        return None

    return SerpstackClient(
        access_key=settings.SERPSTACK_API_KEY,
        base_url=settings.SERPSTACK_API_URL,
        result_limit=settings.SEARCH_RESULT_LIMIT,
        timeout_seconds=settings.SEARCH_TIMEOUT_SECONDS,
    )
