"""
Service layer for the Zhihu answer writer backend.

Contains the orchestration that:
- Talks to external APIs (Serpstack search, chat completions)
- Loads the static prompt guidance once per process
- Assembles prompts and maps outputs into Pydantic response models

Services act as the glue between routes (HTTP layer) and the prompt agents.
"""

from .completion_service import (
    ChatCompletionClient,
    CompletionConnectionError,
    CompletionError,
    CompletionTimeoutError,
    CompletionUpstreamError,
    EmptyCompletionError,
    get_completion_client,
)
from .generation_service import (
    build_system_prompt,
    format_search_digest,
    generate_article,
    normalize_models,
)
from .prompt_assets import (
    StaticPromptAssets,
    get_prompt_assets,
    load_prompt_assets,
    select_content_prompt,
)
from .search_service import (
    SearchOutcome,
    SearchStatus,
    SerpstackClient,
    get_search_client,
    normalize_results,
)

__all__ = [
    # Completion
    "ChatCompletionClient",
    "CompletionError",
    "CompletionTimeoutError",
    "CompletionConnectionError",
    "CompletionUpstreamError",
    "EmptyCompletionError",
    "get_completion_client",
    # Generation
    "generate_article",
    "build_system_prompt",
    "format_search_digest",
    "normalize_models",
    # Prompt assets
    "StaticPromptAssets",
    "get_prompt_assets",
    "load_prompt_assets",
    "select_content_prompt",
    # Search
    "SerpstackClient",
    "SearchOutcome",
    "SearchStatus",
    "get_search_client",
    "normalize_results",
]
