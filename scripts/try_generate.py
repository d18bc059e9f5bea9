#!/usr/bin/env python3
"""
Answer Generation Test Script

Runs the search + generation flow locally without the HTTP layer or the
browser frontend. Reads AI_API_KEY / SERPSTACK_API_KEY from .env.

Usage:
    python scripts/try_generate.py --title "无线吸尘器到底值不值得买？"
    python scripts/try_generate.py --title "第一支香水怎么选" --model "祖玛珑 蓝风铃" --content-type beauty
    python scripts/try_generate.py --title "..." --model "戴森 V12" --dry-run
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Dict, List, Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zhihu_writer.agents.answer.prompts import build_answer_prompt
from zhihu_writer.agents.answer.types import ContentType, StylePreference
from zhihu_writer.schemas.search import SearchResultItem
from zhihu_writer.services.completion_service import CompletionError, get_completion_client
from zhihu_writer.services.generation_service import (
    build_system_prompt,
    format_search_digest,
    generate_article,
    normalize_models,
)
from zhihu_writer.services.prompt_assets import get_prompt_assets
from zhihu_writer.services.search_service import get_search_client


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def collect_search_data(models: List[str]) -> Dict[str, List[SearchResultItem]]:
    """Search every model; a failed search leaves an empty list."""
    client = get_search_client()
    if client is None:
        print("\n⚠️  SERPSTACK_API_KEY not set, continuing without snippets")
        return {model: [] for model in models}

    search_data: Dict[str, List[SearchResultItem]] = {}
    for model in models:
        outcome = await client.search(model)
        print(f"  {model}: {outcome.status.value} ({len(outcome.results)} results)")
        search_data[model] = outcome.results
    return search_data


async def run(
    title: str,
    models: List[str],
    content_type: ContentType,
    style_preference: StylePreference,
    manual_prompt: Optional[str] = None,
    dry_run: bool = False,
):
    """Run one generation and print the answer (or just the prompts)."""
    assets = get_prompt_assets()
    models = normalize_models(models)

    print("\n" + "=" * 60)
    print("ZHIHU ANSWER GENERATION")
    print("=" * 60)
    print(f"\nTitle:    {title}")
    print(f"Models:   {', '.join(models) or '(none)'}")
    print(f"Content:  {content_type.value}")
    print(f"Style:    {style_preference.value}")

    search_data: Dict[str, List[SearchResultItem]] = {}
    if models:
        print("\nSearching...")
        search_data = await collect_search_data(models)

    if dry_run:
        digest = format_search_digest(models, search_data) if models else ""
        print("\n--- SYSTEM PROMPT ---\n")
        print(build_system_prompt(assets, content_type, style_preference))
        print("\n--- USER PROMPT ---\n")
        print(build_answer_prompt(
            title=title,
            models=models,
            search_digest=digest,
            has_models=bool(models),
            style_preference=style_preference,
            content_type=content_type,
            manual_prompt=manual_prompt,
        ))
        return

    client = get_completion_client()
    if client is None:
        print("\n⚠️  ERROR: AI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export AI_API_KEY=your-api-key")
        return

    print("\nCalling completion API...")
    try:
        result = await generate_article(
            client=client,
            assets=assets,
            title=title,
            models=models,
            search_data=search_data,
            content_type=content_type,
            style_preference=style_preference,
            manual_prompt=manual_prompt,
        )
    except CompletionError as e:
        print(f"\n❌ Generation failed: {e}\n")
        return

    print("\n" + "=" * 60)
    print(f"GENERATED AT: {result.metadata.generated_at.isoformat()}")
    print("=" * 60 + "\n")
    print(result.article)


def main():
    parser = argparse.ArgumentParser(
        description="Generate a Zhihu answer locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Opinion answer, no products
  python scripts/try_generate.py --title "年轻人该不该买房"

  # Products as examples
  python scripts/try_generate.py \\
    --title "小户型买什么洗碗机" \\
    --model "美的 V8" --model "西门子 SJ43" \\
    --content-type appliance \\
    --style rational

  # Print prompts only
  python scripts/try_generate.py --title "..." --dry-run
        """
    )

    parser.add_argument(
        "--title", "-t",
        type=str,
        required=True,
        help="Zhihu question title"
    )
    parser.add_argument(
        "--model", "-m",
        action="append",
        default=[],
        help="Product name (repeat up to 3 times)"
    )
    parser.add_argument(
        "--content-type", "-c",
        choices=[c.value for c in ContentType],
        default=ContentType.DISCUSSION.value,
    )
    parser.add_argument(
        "--style", "-s",
        choices=[s.value for s in StylePreference],
        default=StylePreference.RANDOM.value,
    )
    parser.add_argument(
        "--manual", "-n",
        type=str,
        help="Extra requirement appended to the prompt (optional)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the prompts instead of calling the completion API"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    asyncio.run(run(
        title=args.title,
        models=args.model,
        content_type=ContentType(args.content_type),
        style_preference=StylePreference(args.style),
        manual_prompt=args.manual,
        dry_run=args.dry_run,
    ))


if __name__ == "__main__":
    main()
