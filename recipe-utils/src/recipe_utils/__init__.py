"""Recipe Utils - Recipe page extraction and ingredient text parsing."""

__version__ = "0.1.0"

from . import ingredients, recipes, scraping

__all__ = ["ingredients", "recipes", "scraping"]
