"""
Generation Service - Zhihu answer assembly

Turns a validated GenerateRequest into prompts and drives one completion.

This module:
1. Normalizes product names (trim, drop blanks and duplicates, keep first 3)
2. Formats the search digest (at most 4 snippets per product)
3. Builds the system prompt: persona + content guidance + style hint
4. Builds the user prompt via build_answer_prompt
5. Calls the completion client and wraps the text in a GenerateResponse

Validation of required fields is the route's job; completion failures
propagate as CompletionError.
"""

import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Sequence, Union

from zhihu_writer.agents.answer.prompts import build_answer_prompt, select_style_hint
from zhihu_writer.agents.answer.types import ContentType, StylePreference
from zhihu_writer.schemas.generate import ArticleMetadata, GenerateResponse
from zhihu_writer.schemas.search import SearchSnippet
from zhihu_writer.services.completion_service import ChatCompletionClient
from zhihu_writer.services.prompt_assets import StaticPromptAssets, select_content_prompt
from zhihu_writer.utils.constants import DIGEST_ITEMS_PER_MODEL, MAX_MODELS
from zhihu_writer.utils.logging import preview

logger = logging.getLogger(__name__)

NO_SUMMARY_TEXT = "暂无摘要"


def normalize_models(models: Optional[Sequence[str]]) -> List[str]:
    """Trim names, drop blanks and repeats, keep the first MAX_MODELS."""
    normalized: List[str] = []
    for name in models or []:
        name = name.strip()
        if name and name not in normalized:
            normalized.append(name)
        if len(normalized) == MAX_MODELS:
            break
    return normalized


def format_search_digest(
    models: Sequence[str],
    search_data: Mapping[str, Sequence[SearchSnippet]],
) -> str:
    """
    Render the background block embedded in the user prompt.

    Example:
        戴森 V12：
        - 标题一：摘要一
        - 标题二：摘要二

        追觅 V16：暂无摘要
    """
    blocks = []
    for model in models:
        items = list(search_data.get(model) or [])[:DIGEST_ITEMS_PER_MODEL]
        if not items:
            blocks.append(f"{model}：{NO_SUMMARY_TEXT}")
            continue
        lines = "\n".join(f"- {item.title}：{item.snippet}" for item in items)
        blocks.append(f"{model}：\n{lines}")

    return "\n\n".join(blocks)


def build_system_prompt(
    assets: StaticPromptAssets,
    content_type: Union[ContentType, str, None],
    style_preference: Union[StylePreference, str, None],
) -> str:
    """Persona, content guidance and style hint joined by blank lines."""
    parts = [
        assets.persona,
        select_content_prompt(assets, content_type),
        select_style_hint(style_preference),
    ]
    return "\n\n".join(part for part in parts if part)


async def generate_article(
    client: ChatCompletionClient,
    assets: StaticPromptAssets,
    title: str,
    models: Sequence[str],
    search_data: Mapping[str, Sequence[SearchSnippet]],
    content_type: ContentType = ContentType.DISCUSSION,
    style_preference: StylePreference = StylePreference.RANDOM,
    manual_prompt: Optional[str] = None,
) -> GenerateResponse:
    """
    Generate one answer.

    Args:
        client: Configured completion client
        assets: Process-wide prompt assets
        title: Trimmed, non-empty question title
        models: Normalized product names (see normalize_models)
        search_data: Search results keyed by product name
        content_type: Guidance block selector
        style_preference: Tone nudge
        manual_prompt: Optional extra requirement from the user

    Returns:
        GenerateResponse with the article and request metadata

    Raises:
        CompletionError: Any completion failure (timeout, upstream, empty)
    """
    has_models = len(models) > 0
    search_digest = format_search_digest(models, search_data) if has_models else ""

    user_prompt = build_answer_prompt(
        title=title,
        models=models,
        search_digest=search_digest,
        has_models=has_models,
        style_preference=style_preference,
        content_type=content_type,
        manual_prompt=manual_prompt,
    )
    system_prompt = build_system_prompt(assets, content_type, style_preference)

    logger.info(
        f"Generating answer for title='{preview(title)}', models={len(models)}, "
        f"content_type={content_type.value}, style={style_preference.value}"
    )

    article = await client.complete(system_prompt, user_prompt)

    return GenerateResponse(
        success=True,
        article=article,
        metadata=ArticleMetadata(
            title=title,
            models=list(models),
            content_type=content_type,
            style_preference=style_preference,
            generated_at=datetime.now(timezone.utc),
        ),
    )
