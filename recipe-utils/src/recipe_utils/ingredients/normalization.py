"""Unit normalization utilities."""

import re
from typing import Dict, List, Optional, Tuple

# Canonical unit -> accepted spellings (the canonical name itself always matches)
UNIT_MAP: Dict[str, List[str]] = {
    # Volume
    "cup": ["cups", "c", "c."],
    "tablespoon": ["tablespoons", "tbsp", "tbsp.", "tbs", "tbs.", "tbl", "T"],
    "teaspoon": ["teaspoons", "tsp", "tsp.", "t"],
    "fluid ounce": ["fluid ounces", "fl oz", "fl. oz.", "fl oz."],
    "milliliter": ["milliliters", "millilitre", "millilitres", "ml", "ml."],
    "liter": ["liters", "litre", "litres", "l"],
    "pint": ["pints", "pt", "pt."],
    "quart": ["quarts", "qt", "qt."],
    "gallon": ["gallons", "gal", "gal."],
    # Weight
    "pound": ["pounds", "lb", "lb.", "lbs", "lbs."],
    "ounce": ["ounces", "oz", "oz."],
    "gram": ["grams", "g", "g."],
    "kilogram": ["kilograms", "kg", "kg."],
    # Count/pieces
    "piece": ["pieces", "pc", "pcs"],
    "whole": ["wholes"],
    "clove": ["cloves"],
    "slice": ["slices"],
    "can": ["cans"],
    "package": ["packages", "pkg", "pkgs"],
    "jar": ["jars"],
    "bunch": ["bunches"],
    "head": ["heads"],
    "stalk": ["stalks"],
    "sprig": ["sprigs"],
    "leaf": ["leaves"],
    "stick": ["sticks"],
    # Informal
    "pinch": ["pinches"],
    "dash": ["dashes"],
    "drop": ["drops"],
    "splash": ["splashes"],
    "handful": ["handfuls"],
    "to taste": [],
}

# Single-letter cooking abbreviations where case carries the meaning
CASE_SENSITIVE_UNITS: Dict[str, str] = {"T": "tablespoon", "t": "teaspoon"}

# Reverse lookup: lowercase spelling -> canonical unit
UNIT_LOOKUP: Dict[str, str] = {
    form.lower(): canonical
    for canonical, forms in UNIT_MAP.items()
    for form in [canonical, *forms]
    if form not in CASE_SENSITIVE_UNITS
}

# Every surface form, longest first so the most specific spelling wins
_SURFACE_FORMS = sorted(
    {form for canonical, forms in UNIT_MAP.items() for form in [canonical, *forms]},
    key=len,
    reverse=True,
)
_LEADING_UNIT_RE = re.compile(
    r"^(" + "|".join(re.escape(form) for form in _SURFACE_FORMS) + r")\.?(?!\w)",
    re.IGNORECASE,
)


def canonical_units() -> List[str]:
    """Return the canonical unit vocabulary in table order."""
    return list(UNIT_MAP)


def normalize_unit(unit: Optional[str]) -> Optional[str]:
    """Normalize a unit spelling to its canonical name.

    Unknown units are returned unchanged so they can still be displayed.

    Args:
        unit: Raw unit text.

    Returns:
        The canonical unit name, the original text if unrecognized, or None
        for a missing unit.

    Examples:
        >>> normalize_unit("lbs")
        'pound'
        >>> normalize_unit("Tbsp.")
        'tablespoon'
        >>> normalize_unit("knob")
        'knob'
    """
    if unit is None:
        return None

    key = unit.strip()
    if key in CASE_SENSITIVE_UNITS:
        return CASE_SENSITIVE_UNITS[key]

    key = key.lower()
    if key in UNIT_LOOKUP:
        return UNIT_LOOKUP[key]
    if key.rstrip(".") in UNIT_LOOKUP:
        return UNIT_LOOKUP[key.rstrip(".")]
    return unit


def match_leading_unit(text: str) -> Tuple[Optional[str], str]:
    """Match a known unit at the start of ``text``.

    The unit must end on a word boundary, so "large" does not match "l". A
    period after the unit ("T.", "oz.") is consumed with it.

    Returns:
        A tuple of (canonical unit or None, remaining text).

    Examples:
        >>> match_leading_unit("cups chopped onion")
        ('cup', 'chopped onion')
        >>> match_leading_unit("large eggs")
        (None, 'large eggs')
    """
    match = _LEADING_UNIT_RE.match(text)
    if not match:
        return None, text
    return normalize_unit(match.group(1)), text[match.end():].strip()
