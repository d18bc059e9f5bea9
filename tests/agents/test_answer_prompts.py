"""
Tests for the answer prompt templates and tag enumerations.

Covers:
- Template choice by presence of product names
- Suits / doesn't-suit instruction and product names in the product template
- Fragrance-note guidance only for beauty content with products
- Style hints for rational / experience / random
- Optional manual requirement block
"""

import pytest

from zhihu_writer.agents.answer.prompts import (
    PROMPT_STYLE_HINTS,
    STYLE_HINTS,
    build_answer_prompt,
    select_style_hint,
)
from zhihu_writer.agents.answer.types import ContentType, StylePreference


MODELS = ["戴森 V12", "追觅 V16", "小米 G10"]
DIGEST = "戴森 V12：\n- 使用半年：轻但尘盒小\n\n追觅 V16：暂无摘要\n\n小米 G10：暂无摘要"


def _with_models(**kwargs):
    params = dict(
        title="无线吸尘器到底值不值得买？",
        models=MODELS,
        search_digest=DIGEST,
        has_models=True,
    )
    params.update(kwargs)
    return build_answer_prompt(**params)


def _without_models(**kwargs):
    params = dict(
        title="年轻人该不该买房？",
        models=[],
        search_digest="",
        has_models=False,
    )
    params.update(kwargs)
    return build_answer_prompt(**params)


# =============================================================================
# TEMPLATE SELECTION
# =============================================================================

class TestTemplateSelection:
    """The two templates and what each one must (not) contain."""

    def test_without_models_has_no_product_guidance(self):
        prompt = _without_models()

        assert "年轻人该不该买房？" in prompt
        assert "可用来举例的商品" not in prompt
        assert "适合谁" not in prompt
        assert "背景信息" not in prompt

    def test_without_models_forbids_provenance_words(self):
        prompt = _without_models()

        assert "不要出现 AI、模型、搜索、数据来源" in prompt
        assert "不要写总结式收尾" in prompt

    def test_with_models_mentions_every_model(self):
        prompt = _with_models()

        for model in MODELS:
            assert model in prompt

    def test_with_models_requires_suits_and_not_suits(self):
        prompt = _with_models()

        assert "「适合谁」" in prompt
        assert "「不适合谁」" in prompt
        assert "清单感" in prompt
        assert "不写参数表" in prompt

    def test_digest_is_embedded_verbatim(self):
        prompt = _with_models()

        assert DIGEST in prompt
        assert "不要逐字照抄" in prompt

    def test_single_model(self):
        prompt = _with_models(models=["祖玛珑 蓝风铃"], search_digest="祖玛珑 蓝风铃：暂无摘要")

        assert "可用来举例的商品有：祖玛珑 蓝风铃" in prompt

    def test_models_joined_with_enumeration_comma(self):
        prompt = _with_models()

        assert "戴森 V12、追觅 V16、小米 G10" in prompt

    def test_deterministic(self):
        assert _with_models() == _with_models()
        assert _without_models() == _without_models()


# =============================================================================
# FRAGRANCE GUIDANCE
# =============================================================================

class TestFragranceGuidance:

    def test_beauty_with_models_adds_note_guidance(self):
        prompt = _with_models(content_type=ContentType.BEAUTY)

        assert "前调" in prompt
        assert "中调" in prompt
        assert "后调" in prompt

    def test_beauty_accepts_plain_string(self):
        prompt = _with_models(content_type="beauty")

        assert "前调" in prompt

    @pytest.mark.parametrize("content_type", ["appliance", "gift", "discussion", None, "unknown"])
    def test_other_content_types_have_no_note_guidance(self, content_type):
        prompt = _with_models(content_type=content_type)

        assert "前调" not in prompt

    def test_beauty_without_models_has_no_note_guidance(self):
        prompt = _without_models(content_type=ContentType.BEAUTY)

        assert "前调" not in prompt


# =============================================================================
# STYLE HINTS
# =============================================================================

class TestStyleHints:

    @pytest.mark.parametrize("builder", [_with_models, _without_models])
    def test_rational_hint(self, builder):
        prompt = builder(style_preference=StylePreference.RATIONAL)

        assert PROMPT_STYLE_HINTS[StylePreference.RATIONAL] in prompt
        assert "偏体验" not in prompt

    @pytest.mark.parametrize("builder", [_with_models, _without_models])
    def test_experience_hint(self, builder):
        prompt = builder(style_preference=StylePreference.EXPERIENCE)

        assert PROMPT_STYLE_HINTS[StylePreference.EXPERIENCE] in prompt
        assert "偏理性" not in prompt

    @pytest.mark.parametrize("builder", [_with_models, _without_models])
    @pytest.mark.parametrize("style", [StylePreference.RANDOM, None, "whatever"])
    def test_random_or_unknown_has_no_hint(self, builder, style):
        prompt = builder(style_preference=style)

        assert "偏理性" not in prompt
        assert "偏体验" not in prompt

    def test_experience_hint_ends_opinion_prompt(self):
        prompt = _without_models(style_preference="experience")

        assert prompt.endswith(PROMPT_STYLE_HINTS[StylePreference.EXPERIENCE])

    def test_select_style_hint(self):
        assert select_style_hint("rational") == STYLE_HINTS[StylePreference.RATIONAL]
        assert select_style_hint(StylePreference.EXPERIENCE) == STYLE_HINTS[StylePreference.EXPERIENCE]
        assert select_style_hint("random") == ""
        assert select_style_hint("nonsense") == ""
        assert select_style_hint(None) == ""


# =============================================================================
# MANUAL REQUIREMENT
# =============================================================================

class TestManualPrompt:

    @pytest.mark.parametrize("builder", [_with_models, _without_models])
    def test_manual_prompt_is_appended(self, builder):
        prompt = builder(manual_prompt="  多写一点租房党的视角  ")

        assert "补充要求" in prompt
        assert "多写一点租房党的视角" in prompt

    @pytest.mark.parametrize("builder", [_with_models, _without_models])
    @pytest.mark.parametrize("manual", [None, "", "   "])
    def test_blank_manual_prompt_changes_nothing(self, builder, manual):
        assert builder(manual_prompt=manual) == builder()


# =============================================================================
# ENUM PARSING
# =============================================================================

class TestEnumParsing:

    def test_content_type_parse(self):
        assert ContentType.parse("beauty") is ContentType.BEAUTY
        assert ContentType.parse(" GIFT ") is ContentType.GIFT
        assert ContentType.parse(ContentType.APPLIANCE) is ContentType.APPLIANCE

    @pytest.mark.parametrize("value", [None, "", "perfume", 42])
    def test_content_type_parse_defaults_to_discussion(self, value):
        assert ContentType.parse(value) is ContentType.DISCUSSION

    def test_style_preference_parse(self):
        assert StylePreference.parse("rational") is StylePreference.RATIONAL
        assert StylePreference.parse("Experience") is StylePreference.EXPERIENCE

    @pytest.mark.parametrize("value", [None, "", "poetic"])
    def test_style_preference_parse_defaults_to_random(self, value):
        assert StylePreference.parse(value) is StylePreference.RANDOM
