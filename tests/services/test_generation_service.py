"""
Tests for the generation service (digest, system prompt, orchestration).

The completion client is an AsyncMock so the tests can inspect the exact
prompts that would have been sent.
"""

from datetime import timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from zhihu_writer.agents.answer.prompts import STYLE_HINTS, ZHIHU_PERSONA_PROMPT
from zhihu_writer.agents.answer.types import ContentType, StylePreference
from zhihu_writer.schemas.search import SearchResultItem
from zhihu_writer.services.completion_service import CompletionTimeoutError
from zhihu_writer.services.generation_service import (
    build_system_prompt,
    format_search_digest,
    generate_article,
    normalize_models,
)


def _items(n, prefix="标题"):
    return [
        SearchResultItem(title=f"{prefix}{i}", snippet=f"摘要{i}", link=f"https://e.com/{i}")
        for i in range(n)
    ]


@pytest.fixture
def mock_completion_client():
    client = MagicMock()
    client.complete = AsyncMock(return_value="这是生成的回答。")
    return client


class TestNormalizeModels:

    def test_trims_drops_blanks_and_duplicates(self):
        assert normalize_models(["  A ", "", "   ", "A", "B"]) == ["A", "B"]

    def test_keeps_first_three(self):
        assert normalize_models(["A", "B", "C", "D", "E"]) == ["A", "B", "C"]

    def test_none_and_empty(self):
        assert normalize_models(None) == []
        assert normalize_models([]) == []


class TestFormatSearchDigest:

    def test_at_most_four_items_per_model(self):
        digest = format_search_digest(["A"], {"A": _items(6)})

        assert digest.startswith("A：\n")
        assert "- 标题3：摘要3" in digest
        assert "标题4" not in digest
        assert digest.count("\n- ") == 4

    def test_model_without_items(self):
        digest = format_search_digest(["A", "B"], {"A": _items(1)})

        assert digest == "A：\n- 标题0：摘要0\n\nB：暂无摘要"

    def test_empty_list_counts_as_no_items(self):
        assert format_search_digest(["A"], {"A": []}) == "A：暂无摘要"

    def test_follows_model_order(self):
        digest = format_search_digest(["B", "A"], {"A": _items(1, "甲"), "B": _items(1, "乙")})

        assert digest.index("B：") < digest.index("A：")


class TestBuildSystemPrompt:

    def test_persona_guidance_and_hint_in_order(self, prompt_assets):
        prompt = build_system_prompt(prompt_assets, ContentType.GIFT, StylePreference.RATIONAL)

        assert prompt == "\n\n".join([
            ZHIHU_PERSONA_PROMPT,
            "GIFT GUIDANCE",
            STYLE_HINTS[StylePreference.RATIONAL],
        ])

    def test_random_style_adds_nothing(self, prompt_assets):
        prompt = build_system_prompt(prompt_assets, ContentType.DISCUSSION, StylePreference.RANDOM)

        assert prompt == f"{ZHIHU_PERSONA_PROMPT}\n\nDISCUSSION GUIDANCE"

    def test_unknown_content_type_uses_discussion(self, prompt_assets):
        prompt = build_system_prompt(prompt_assets, "cars", "random")

        assert "DISCUSSION GUIDANCE" in prompt


class TestGenerateArticle:

    @pytest.mark.asyncio
    async def test_without_models(self, mock_completion_client, prompt_assets):
        result = await generate_article(
            client=mock_completion_client,
            assets=prompt_assets,
            title="年轻人该不该买房？",
            models=[],
            search_data={},
        )

        assert result.success is True
        assert result.article == "这是生成的回答。"
        assert result.metadata.models == []
        assert result.metadata.content_type is ContentType.DISCUSSION
        assert result.metadata.style_preference is StylePreference.RANDOM
        assert result.metadata.generated_at.tzinfo == timezone.utc

        system_prompt, user_prompt = mock_completion_client.complete.call_args.args
        assert system_prompt.startswith(ZHIHU_PERSONA_PROMPT)
        assert "年轻人该不该买房？" in user_prompt
        assert "适合谁" not in user_prompt

    @pytest.mark.asyncio
    async def test_with_models_embeds_digest(self, mock_completion_client, prompt_assets):
        await generate_article(
            client=mock_completion_client,
            assets=prompt_assets,
            title="第一支香水怎么选？",
            models=["蓝风铃", "无人区玫瑰"],
            search_data={"蓝风铃": _items(2)},
            content_type=ContentType.BEAUTY,
            style_preference=StylePreference.EXPERIENCE,
        )

        system_prompt, user_prompt = mock_completion_client.complete.call_args.args
        assert "BEAUTY GUIDANCE" in system_prompt
        assert STYLE_HINTS[StylePreference.EXPERIENCE] in system_prompt
        assert "- 标题1：摘要1" in user_prompt
        assert "无人区玫瑰：暂无摘要" in user_prompt
        assert "前调" in user_prompt

    @pytest.mark.asyncio
    async def test_same_inputs_same_prompts(self, mock_completion_client, prompt_assets):
        kwargs = dict(
            client=mock_completion_client,
            assets=prompt_assets,
            title="T",
            models=["A"],
            search_data={"A": _items(3)},
        )

        first = await generate_article(**kwargs)
        second = await generate_article(**kwargs)

        calls = mock_completion_client.complete.call_args_list
        assert calls[0] == calls[1]
        assert first.article == second.article

    @pytest.mark.asyncio
    async def test_completion_error_propagates(self, mock_completion_client, prompt_assets):
        mock_completion_client.complete.side_effect = CompletionTimeoutError("timed out")

        with pytest.raises(CompletionTimeoutError):
            await generate_article(
                client=mock_completion_client,
                assets=prompt_assets,
                title="T",
                models=[],
                search_data={},
            )
