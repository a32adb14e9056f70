"""Ingredient and instruction text parsing utilities."""

import re
from typing import Iterable, List, Optional, Tuple

from recipe_utils.ingredients.models import Ingredient
from recipe_utils.ingredients.normalization import match_leading_unit
from recipe_utils.ingredients.number_utils import (
    normalize_unicode_fractions,
    parse_amount_range,
)

# --- Constants ---

# "1.", "2)", "3- ", "4:" but not "1.5", "1-2" or "1-inch"
_NUMBERED_MARKER_RE = re.compile(r"^\d+(?:[.):](?!\d)|-(?=\s))\s*")

# Bullets, checkboxes, check marks, squares, circles and arrows
_GLYPH_MARKER_RE = re.compile(
    r"^[•-…☐-☒✓-✔▪-▫○-●◦"
    r"→⇒▸►➤]+\s*"
)

_ASCII_BULLET_RE = re.compile(r"^[-*+]\s+")

_NUMBER = r"\d+(?:\s+\d+/\d+|\.\d+|/\d+)?"
_LEADING_AMOUNT_RE = re.compile(
    rf"^(?P<amount>{_NUMBER}(?:(?:\s*[-–]\s*|\s+to\s+){_NUMBER})?)(?:\s+(?P<rest>.*)|(?P<sized>-[^\W\d].*))?$",
    re.IGNORECASE,
)

_TO_TASTE_RE = re.compile(r"^(?P<name>.*?)[\s,]*\bto taste\b\.?$", re.IGNORECASE)

# --- Functions ---


def clean_list_item_text(text: Optional[str]) -> str:
    """Strip list markers and bullets from the start of a line.

    Numbered markers are only removed when followed by punctuation, so an
    ingredient quantity such as "1 yellow onion" is left alone.

    Examples:
        >>> clean_list_item_text("1) Preheat the oven")
        'Preheat the oven'
        >>> clean_list_item_text("• 2 eggs")
        '2 eggs'
        >>> clean_list_item_text("1 yellow onion")
        '1 yellow onion'
    """
    if not text:
        return ""
    cleaned = text.strip()
    cleaned = _NUMBERED_MARKER_RE.sub("", cleaned)
    cleaned = _GLYPH_MARKER_RE.sub("", cleaned)
    cleaned = _ASCII_BULLET_RE.sub("", cleaned)
    return cleaned.strip()


def parse_ingredient(text: str, section: Optional[str] = None) -> Ingredient:
    """Parse a free-text ingredient line into amount, unit and name.

    Args:
        text: Raw ingredient line (e.g., "1 1/2 cups chopped yellow onion").
        section: Optional group label to attach to the ingredient.

    Returns:
        An Ingredient. ``original_text`` is the line with list markers removed.
        ``amount`` and ``unit`` are None when they cannot be found, and the
        name falls back to the whole line rather than ever being empty.

    Examples:
        >>> parse_ingredient("2-3 tbsp olive oil")
        Ingredient(amount=2.0, unit='tablespoon', name='olive oil', original_text='2-3 tbsp olive oil', amount_max=3.0, section=None)
    """
    cleaned = clean_list_item_text(text)
    normalized = normalize_unicode_fractions(cleaned)

    amount_text, rest = _split_leading_amount(normalized)
    if amount_text is None:
        unit, name = _parse_to_taste(normalized)
        return Ingredient(
            amount=None,
            unit=unit,
            name=name or cleaned,
            original_text=cleaned,
            section=section,
        )

    amount, amount_max = parse_amount_range(amount_text)
    unit, name = match_leading_unit(rest)

    return Ingredient(
        amount=amount,
        amount_max=amount_max,
        unit=unit,
        name=name or cleaned,
        original_text=cleaned,
        section=section,
    )


def parse_ingredients(lines: Iterable[str], section: Optional[str] = None) -> List[Ingredient]:
    """Parse several ingredient lines, skipping blank ones."""
    return [
        parse_ingredient(line, section=section)
        for line in lines
        if line and clean_list_item_text(line)
    ]


def _split_leading_amount(text: str) -> Tuple[Optional[str], str]:
    """Split a leading quantity (number, fraction, mixed number or range) from the text.

    A size such as "1-inch" keeps the amount but leaves the whole line as the name.
    """
    match = _LEADING_AMOUNT_RE.match(text)
    if not match:
        return None, text
    return match.group("amount"), (match.group("rest") or "").strip()


def _parse_to_taste(text: str) -> Tuple[Optional[str], str]:
    """Catch amount-less lines such as "Salt and pepper, to taste"."""
    match = _TO_TASTE_RE.match(text)
    if not match:
        return None, text
    return "to taste", match.group("name").strip(" ,")
