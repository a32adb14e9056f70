"""Ingredient parsing and normalization utilities."""

from .models import Ingredient
from .normalization import UNIT_LOOKUP, UNIT_MAP, canonical_units, normalize_unit
from .number_utils import (
    normalize_unicode_fractions,
    parse_amount_range,
    parse_fraction,
    parse_iso_duration,
    parse_mixed_number,
)
from .parsing import clean_list_item_text, parse_ingredient, parse_ingredients

__all__ = [
    "Ingredient",
    "UNIT_MAP",
    "UNIT_LOOKUP",
    "canonical_units",
    "normalize_unit",
    "normalize_unicode_fractions",
    "parse_amount_range",
    "parse_fraction",
    "parse_iso_duration",
    "parse_mixed_number",
    "clean_list_item_text",
    "parse_ingredient",
    "parse_ingredients",
]
