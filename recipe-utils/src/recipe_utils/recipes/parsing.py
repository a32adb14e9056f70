"""Recipe parsing pipeline."""

import logging
from typing import List, Optional, Union

import requests
from bs4 import BeautifulSoup

from recipe_utils.recipes.models import ScrapedRecipe
from recipe_utils.recipes.sources import RecipeExtractor, get_all_recipe_extractors
from recipe_utils.scraping.fetch import fetch_html

logger = logging.getLogger(__name__)


class RecipeExtractionError(RuntimeError):
    """Raised when a page cannot be turned into a recipe at all."""


def parse_recipe_html(
    html: Union[str, bytes, BeautifulSoup],
    url: Optional[str] = None,
    extractors: Optional[List[RecipeExtractor]] = None,
) -> ScrapedRecipe:
    """Parse recipe HTML into a normalized recipe.

    Extractors are tried in priority order (WPRM plugin markup, data
    attributes, JSON-LD, generic HTML). The first one that applies and finds
    at least one ingredient wins. The generic extractor always produces a
    recipe, so this only fails if the document itself cannot be handled.

    Args:
        html: Raw HTML content of a recipe page, or an already parsed document.
        url: Source URL, used only in log messages.
        extractors: Override the extractor order (mostly for tests).

    Returns:
        A ScrapedRecipe.

    Raises:
        RecipeExtractionError: If the document cannot be parsed or the
            fallback extractor fails.
    """
    source = url or "<html>"
    try:
        soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html, "lxml")
    except Exception as e:
        raise RecipeExtractionError(f"Failed to scrape recipe: {e}") from e

    extractors = extractors if extractors is not None else get_all_recipe_extractors()
    fallback = extractors[-1]

    for extractor in extractors[:-1]:
        if not extractor.detect(soup):
            logger.debug(f"{extractor.method.value} markup not found on {source}")
            continue
        try:
            recipe = extractor.extract(soup)
        except Exception as e:
            logger.warning(f"{extractor.method.value} extraction failed on {source}: {e}")
            continue
        if recipe is not None and recipe.ingredients:
            logger.info(f"Using {extractor.method.value} extraction for {source}")
            return recipe
        logger.debug(f"{extractor.method.value} extraction found no ingredients on {source}")

    try:
        recipe = fallback.extract(soup)
    except Exception as e:
        raise RecipeExtractionError(f"Failed to scrape recipe: {e}") from e
    if recipe is None:
        raise RecipeExtractionError(
            f"Failed to scrape recipe: {fallback.method.value} extraction returned nothing"
        )

    logger.info(f"Using {fallback.method.value} extraction for {source}")
    return recipe


def scrape_recipe(url: str, session: Optional[requests.Session] = None) -> ScrapedRecipe:
    """Fetch a recipe page and parse it.

    Fetch failures are raised as ``FetchError`` and are not retried.
    """
    html = fetch_html(url, session=session)
    return parse_recipe_html(html, url=url)
