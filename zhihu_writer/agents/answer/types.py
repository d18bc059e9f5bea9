"""
Answer Writer Type Definitions

Closed enumerations for the tags that steer prompt assembly. Values are the
exact strings used on the wire (request bodies and response metadata).
"""

from enum import Enum
from typing import Any, Optional


class ContentType(str, Enum):
    """Domain guidance block that augments the system prompt."""
    APPLIANCE = "appliance"
    BEAUTY = "beauty"
    GIFT = "gift"
    DISCUSSION = "discussion"

    @classmethod
    def parse(cls, value: Optional[Any]) -> "ContentType":
        """Coerce any input to a ContentType; unknown or missing -> DISCUSSION."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DISCUSSION


class StylePreference(str, Enum):
    """Tone nudge appended to both prompts."""
    RATIONAL = "rational"
    EXPERIENCE = "experience"
    RANDOM = "random"

    @classmethod
    def parse(cls, value: Optional[Any]) -> "StylePreference":
        """Coerce any input to a StylePreference; unknown or missing -> RANDOM."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.RANDOM


class SearchSource(str, Enum):
    """Provider tag stamped on every normalized search result."""
    SERPSTACK = "serpstack"
