"""Recipe extraction utilities."""

from .models import DEFAULT_INSTRUCTIONS, DEFAULT_TITLE, ExtractionMethod, ScrapedRecipe
from .parsing import RecipeExtractionError, parse_recipe_html, scrape_recipe
from .sources import (
    DataAttributeExtractor,
    GenericHtmlExtractor,
    LinkedDataExtractor,
    RecipeExtractor,
    WPRMExtractor,
    get_all_recipe_extractors,
    get_recipe_extractor,
)

__all__ = [
    "DEFAULT_INSTRUCTIONS",
    "DEFAULT_TITLE",
    "ExtractionMethod",
    "ScrapedRecipe",
    "RecipeExtractionError",
    "parse_recipe_html",
    "scrape_recipe",
    "RecipeExtractor",
    "WPRMExtractor",
    "DataAttributeExtractor",
    "LinkedDataExtractor",
    "GenericHtmlExtractor",
    "get_recipe_extractor",
    "get_all_recipe_extractors",
]
