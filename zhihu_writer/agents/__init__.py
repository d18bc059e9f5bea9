"""
AI Components for the Zhihu answer writer backend.

1. Answer Writer (Single-Shot LLM)
   - Persona system prompt + one of two user prompt templates
   - Calls an OpenAI-compatible chat-completion endpoint over HTTP
   - Located in: zhihu_writer/services/generation_service.py

Product snippets come from Serpstack (zhihu_writer/services/search_service.py)
and are only background context for the model.
"""

from zhihu_writer.agents.answer import (
    ContentType,
    StylePreference,
    build_answer_prompt,
)

__all__ = [
    "build_answer_prompt",
    "ContentType",
    "StylePreference",
]
