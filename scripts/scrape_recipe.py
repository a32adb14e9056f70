#!/usr/bin/env python3
"""
Scrape a single recipe page (from a URL or a saved HTML file) and print the
normalized recipe as JSON.
"""

import argparse
import json
import logging
import pathlib
import sys

from recipe_utils.ingredients.ai_normalization import (
    DEFAULT_MODEL_ID,
    BedrockIngredientNormalizer,
    apply_ai_normalization,
)
from recipe_utils.recipes import RecipeExtractionError, parse_recipe_html, scrape_recipe
from recipe_utils.scraping import FetchError

logger = logging.getLogger(__name__)


def main():
    """Scrape one recipe and print it."""
    parser = argparse.ArgumentParser(description="Extract a recipe from a web page")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", type=str, help="Recipe page URL to fetch")
    source.add_argument("--file", type=str, help="Saved recipe HTML file to parse")
    parser.add_argument(
        "--ai-normalize",
        action="store_true",
        help="Use a Bedrock model to clean up ambiguous ingredient lines",
    )
    parser.add_argument(
        "--model-id",
        type=str,
        default=DEFAULT_MODEL_ID,
        help="Bedrock model ID for AI normalization",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.url:
            recipe = scrape_recipe(args.url)
        else:
            html = pathlib.Path(args.file).read_text(encoding="utf-8")
            recipe = parse_recipe_html(html, url=args.file)
    except (FetchError, RecipeExtractionError, OSError) as e:
        logger.error(str(e))
        sys.exit(1)

    if args.ai_normalize:
        recipe = apply_ai_normalization(
            recipe, BedrockIngredientNormalizer(model_id=args.model_id)
        )

    print(json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
