"""
Completion Service - OpenAI-compatible chat completions over HTTP

Sends one system + user prompt pair to the configured chat-completion
endpoint and returns the generated text.

Architecture:
- Transport: httpx.AsyncClient, one POST per call, no retries
- Auth: Bearer token (AI_API_KEY)
- Default model: gpt-4.1, temperature 0.85, max_tokens 4000
- Timeout: AI_TIMEOUT_SECONDS (120s by default), wall clock for the whole request

Failures are raised as CompletionError subclasses whose message is safe to
return to the client as-is.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from zhihu_writer.config import settings
from zhihu_writer.utils.constants import UPSTREAM_ERROR_PREVIEW
from zhihu_writer.utils.logging import preview

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Base class for completion failures; str(e) is user-facing."""


class CompletionTimeoutError(CompletionError):
    """The endpoint did not answer within the timeout."""


class CompletionConnectionError(CompletionError):
    """The endpoint could not be reached at all."""


class CompletionUpstreamError(CompletionError):
    """The endpoint answered with an error status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyCompletionError(CompletionError):
    """The endpoint answered 2xx but the generated text was empty."""


def extract_completion_text(data: Any) -> str:
    """Pull choices[0].message.content out of a chat-completion envelope."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0] if isinstance(choices[0], dict) else {}
    message = first.get("message") or {}
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


class ChatCompletionClient:
    """Async client for an OpenAI-compatible /chat/completions endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        model: str = "gpt-4.1",
        temperature: float = 0.85,
        max_tokens: int = 4000,
        timeout_seconds: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _build_payload(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generate one answer.

        Args:
            system_prompt: Persona + content guidance + style hint
            user_prompt: Output of build_answer_prompt

        Returns:
            The generated text (non-empty)

        Raises:
            CompletionTimeoutError: No answer within timeout_seconds
            CompletionConnectionError: Endpoint unreachable
            CompletionUpstreamError: Non-2xx status or undecodable body
            EmptyCompletionError: 2xx with empty content
            CompletionError: Any other network failure
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        payload = self._build_payload(system_prompt, user_prompt)

        logger.info(
            f"Calling completion endpoint model={self.model}, "
            f"system_chars={len(system_prompt)}, user_chars={len(user_prompt)}"
        )

        # httpx timeouts apply per socket operation; wait_for caps the total
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await asyncio.wait_for(
                    client.post(self.api_url, json=payload, headers=headers),
                    timeout=self.timeout_seconds,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error(f"Completion request timed out: {type(e).__name__}")
            raise CompletionTimeoutError(
                f"completion request timed out after {self.timeout_seconds:g} seconds, "
                "please check the network or try again later"
            ) from e
        except httpx.ConnectError as e:
            logger.error(f"Cannot reach completion endpoint: {e}")
            raise CompletionConnectionError(
                f"cannot reach completion endpoint ({self.api_url}), "
                "please check the network or the AI_API_URL setting"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Completion request failed: {type(e).__name__}: {e}")
            raise CompletionError(f"network request failed: {e}") from e

        if not response.is_success:
            error_text = response.text or response.reason_phrase
            logger.error(
                f"Completion API error: {response.status_code} {preview(error_text, 500)}"
            )
            raise CompletionUpstreamError(
                f"upstream error ({response.status_code}): "
                f"{error_text[:UPSTREAM_ERROR_PREVIEW]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Completion API returned non-JSON body: {preview(response.text, 200)}")
            raise CompletionUpstreamError(
                "upstream error: response was not valid JSON",
                status_code=response.status_code,
            ) from e

        article = extract_completion_text(data)
        if not article.strip():
            logger.error("Completion API returned empty content")
            raise EmptyCompletionError("empty generation: the model returned no text")

        logger.info(f"Completion succeeded, article_chars={len(article)}")
        return article


def get_completion_client() -> Optional[ChatCompletionClient]:
    """
    FastAPI dependency: a completion client, or None when no key is configured.
    """
    if not settings.AI_API_KEY:
        logger.warning(
            "AI_API_KEY not configured. Generation will not work. "
            "Please set AI_API_KEY in your .env file."
        )
        return None

    return ChatCompletionClient(
        api_url=settings.AI_API_URL,
        api_key=settings.AI_API_KEY,
        model=settings.AI_MODEL,
        temperature=settings.AI_TEMPERATURE,
        max_tokens=settings.AI_MAX_TOKENS,
        timeout_seconds=settings.AI_TIMEOUT_SECONDS,
    )
