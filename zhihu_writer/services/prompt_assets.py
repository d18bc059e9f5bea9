"""
Static prompt guidance loaded once per process.

The four content-type guidance files, the optional persona override and the
structure framework reference are read from PROMPTS_DIR the first time a
request needs them. The result is a frozen value shared by every request.

Expected files (all optional, a missing file loads as ""):
- appliance.md, beauty.md, gift.md, discussion.md
- persona.md (overrides the built-in Zhihu persona)
- structureRules.md (frameworks introduced by "## " headings)
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

from zhihu_writer.agents.answer.prompts import ZHIHU_PERSONA_PROMPT
from zhihu_writer.agents.answer.types import ContentType
from zhihu_writer.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructureFramework:
    """One answer skeleton parsed from structureRules.md."""
    title: str
    content: str


@dataclass(frozen=True)
class StaticPromptAssets:
    """Read-only guidance texts; empty string means the file was unavailable."""
    appliance: str
    beauty: str
    gift: str
    discussion: str
    persona: str
    structure_rules: str
    frameworks: Tuple[StructureFramework, ...] = ()


def _safe_read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Prompt file unavailable: {path.name} ({type(e).__name__})")
        return ""


def parse_structure_frameworks(content: str) -> Tuple[StructureFramework, ...]:
    """
    Split structureRules.md into frameworks.

    Each framework starts with a "## " heading on its own line; its first line
    is the title and the remaining lines are the body. Text before the first
    heading is preamble and is ignored.
    """
    if not content:
        return ()

    frameworks = []
    for section in re.split(r"\n## ", content)[1:]:
        title, _, body = section.partition("\n")
        title = title.strip()
        if not title:
            continue
        frameworks.append(StructureFramework(title=title, content=body.strip()))

    return tuple(frameworks)


def load_prompt_assets(prompts_dir: Union[str, Path]) -> StaticPromptAssets:
    """
    Read every guidance file from prompts_dir.

    Never raises for missing files; the content selector falls back to the
    discussion guidance when a block is empty.
    """
    base = Path(prompts_dir)
    if not base.is_dir():
        logger.warning(f"Prompts directory not found: {base}")

    structure_rules = _safe_read(base / "structureRules.md")
    assets = StaticPromptAssets(
        appliance=_safe_read(base / "appliance.md"),
        beauty=_safe_read(base / "beauty.md"),
        gift=_safe_read(base / "gift.md"),
        discussion=_safe_read(base / "discussion.md"),
        persona=_safe_read(base / "persona.md") or ZHIHU_PERSONA_PROMPT,
        structure_rules=structure_rules,
        frameworks=parse_structure_frameworks(structure_rules),
    )

    loaded = [
        name for name in ("appliance", "beauty", "gift", "discussion")
        if getattr(assets, name)
    ]
    logger.info(
        f"Prompt assets loaded from {base}: guidance={loaded}, "
        f"frameworks={len(assets.frameworks)}"
    )
    return assets


@lru_cache(maxsize=1)
def get_prompt_assets() -> StaticPromptAssets:
    """FastAPI dependency: the process-wide assets, loaded on first use."""
    return load_prompt_assets(settings.PROMPTS_DIR)


def select_content_prompt(
    assets: StaticPromptAssets,
    content_type: Union[ContentType, str, None],
) -> str:
    """
    Return the guidance block for a content type.

    Unknown or missing content types, and blocks whose file failed to load,
    fall back to the discussion guidance.
    """
    selected: Optional[str] = {
        ContentType.APPLIANCE: assets.appliance,
        ContentType.BEAUTY: assets.beauty,
        ContentType.GIFT: assets.gift,
    }.get(ContentType.parse(content_type))

    return selected or assets.discussion
