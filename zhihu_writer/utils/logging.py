"""
Logging utilities for the Zhihu answer writer backend.

Loggers come from logging.getLogger(__name__); main.py configures the root
handler once with logging.basicConfig.

SECURITY RULES:
- NEVER log AI_API_KEY, SERPSTACK_API_KEY or any Authorization header
- NEVER log full prompts or full generated answers (use preview())
- NEVER log full upstream error bodies (they may echo request data)

Acceptable logging:
- High-level events (e.g., "Completion request sent", "Search finished")
- Non-sensitive metadata (e.g., "models=3", "content_type=beauty")
- Truncated previews of titles, prompts and upstream error bodies
"""

from typing import Optional


def preview(text: Optional[str], limit: int = 50) -> str:
    """Shorten text for log lines; appends '...' when truncated."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
