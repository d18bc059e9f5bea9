"""
Answer Writer - Single-Shot LLM Architecture

This module contains the prompt templates and tag types for the Zhihu
answer generation flow.

Architecture:
- Pattern: Single-shot LLM (one chat-completion call per answer)
- Model: configurable, OpenAI-compatible endpoint (default gpt-4.1)
- Temperature: 0.85
- Output: Free text (the answer itself)

The service layer is in:
- zhihu_writer/services/generation_service.py

Prompt templates are in:
- zhihu_writer/agents/answer/prompts.py
"""

from zhihu_writer.agents.answer.prompts import (
    ZHIHU_PERSONA_PROMPT,
    build_answer_prompt,
    select_style_hint,
)
from zhihu_writer.agents.answer.types import (
    ContentType,
    SearchSource,
    StylePreference,
)

__all__ = [
    "ZHIHU_PERSONA_PROMPT",
    "build_answer_prompt",
    "select_style_hint",
    "ContentType",
    "SearchSource",
    "StylePreference",
]
