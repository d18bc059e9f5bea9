"""
Pytest configuration for the answer writer backend tests.

Sets up the test environment and shared fixtures. External APIs are never
called: completion and search clients run on httpx.MockTransport.
"""
import os

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("AI_API_KEY", "test-ai-api-key")
os.environ.setdefault("SERPSTACK_API_KEY", "test-serpstack-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from zhihu_writer.agents.answer.prompts import ZHIHU_PERSONA_PROMPT
from zhihu_writer.main import app
from zhihu_writer.services.completion_service import ChatCompletionClient
from zhihu_writer.services.prompt_assets import (
    StaticPromptAssets,
    StructureFramework,
    get_prompt_assets,
)
from zhihu_writer.services.search_service import SerpstackClient

TEST_AI_URL = "https://llm.test/v1/chat/completions"
TEST_SERPSTACK_URL = "http://serpstack.test/search"


def _chat_response(content):
    """Minimal OpenAI-style chat completion envelope."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def prompt_assets():
    """In-memory assets with recognizable guidance blocks."""
    return StaticPromptAssets(
        appliance="APPLIANCE GUIDANCE",
        beauty="BEAUTY GUIDANCE",
        gift="GIFT GUIDANCE",
        discussion="DISCUSSION GUIDANCE",
        persona=ZHIHU_PERSONA_PROMPT,
        structure_rules="# 参考\n\n## 框架一\n内容一\n\n## 框架二\n内容二",
        frameworks=(
            StructureFramework(title="框架一", content="内容一"),
            StructureFramework(title="框架二", content="内容二"),
        ),
    )


@pytest.fixture
def make_completion_client():
    """
    Factory for a ChatCompletionClient backed by a MockTransport handler.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception to simulate transport failures).
    """
    def _make(handler, timeout_seconds=5.0):
        return ChatCompletionClient(
            api_url=TEST_AI_URL,
            api_key="test-ai-api-key",
            timeout_seconds=timeout_seconds,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def make_search_client():
    """Factory for a SerpstackClient backed by a MockTransport handler."""
    def _make(handler, result_limit=10):
        return SerpstackClient(
            access_key="test-serpstack-key",
            base_url=TEST_SERPSTACK_URL,
            result_limit=result_limit,
            timeout_seconds=5.0,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def client(prompt_assets):
    """Test client with in-memory prompt assets; clears overrides afterwards."""
    app.dependency_overrides[get_prompt_assets] = lambda: prompt_assets

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def chat_response():
    """Builder for chat completion bodies: chat_response("text") -> dict."""
    return _chat_response
