"""Numeric helpers for ingredient amounts and recipe durations."""

import re
from typing import Optional, Tuple

# Vulgar fraction glyphs and their ASCII equivalents
UNICODE_FRACTIONS = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

FRACTION_SLASH = "⁄"

_UNICODE_FRACTION_RE = re.compile(
    r"(\d)?\s*([" + "".join(UNICODE_FRACTIONS) + r"])"
)
_NUMBER_RE = re.compile(r"^(?:\d+(?:\.\d+)?|\.\d+)$")
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+\s*/\s*\d+)$")
_RANGE_SPLIT_RE = re.compile(r"\s*[-–]\s*|\s+to\s+", re.IGNORECASE)
# "PT1H30M", "P0DT15M"; never inside a word such as "EXCEPT"
_ISO_DURATION_RE = re.compile(r"(?<![A-Za-z])P(?:\d+D)?T(?=\d)(?:(\d+)H)?(?:(\d+)M)?")


def normalize_unicode_fractions(text: str) -> str:
    """Replace vulgar fraction glyphs with ASCII ``n/d`` fractions.

    A glyph glued to a whole number is separated from it so that the result
    reads as a mixed number. The Unicode fraction slash is also replaced
    with a plain slash.

    Examples:
        >>> normalize_unicode_fractions("¾ cup")
        '3/4 cup'
        >>> normalize_unicode_fractions("1½ cups")
        '1 1/2 cups'
    """
    if not text:
        return text

    def _replace(match: re.Match) -> str:
        whole, glyph = match.group(1), match.group(2)
        fraction = UNICODE_FRACTIONS[glyph]
        return f"{whole} {fraction}" if whole else fraction

    text = text.replace(FRACTION_SLASH, "/")
    return _UNICODE_FRACTION_RE.sub(_replace, text)


def parse_fraction(token: Optional[str]) -> Optional[float]:
    """Parse a simple fraction, decimal or integer.

    Args:
        token: Text such as ``"1/2"``, ``"2.5"`` or ``"3"``.

    Returns:
        The value as a float, or None if the token is not a number.
    """
    if token is None:
        return None
    token = str(token).strip()
    if not token:
        return None

    if "/" in token:
        parts = [part.strip() for part in token.split("/")]
        if len(parts) != 2 or not all(_NUMBER_RE.match(part) for part in parts):
            return None
        denominator = float(parts[1])
        if denominator == 0:
            return None
        return float(parts[0]) / denominator

    if _NUMBER_RE.match(token):
        return float(token)
    return None


def parse_mixed_number(text: Optional[str]) -> Optional[float]:
    """Parse a mixed number like ``"1 1/2"``, falling back to :func:`parse_fraction`."""
    if text is None:
        return None
    text = normalize_unicode_fractions(str(text)).strip()

    match = _MIXED_RE.match(text)
    if match:
        fraction = parse_fraction(match.group(2))
        whole = float(match.group(1))
        return whole + fraction if fraction is not None else whole

    return parse_fraction(text)


def parse_amount_range(text: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    """Parse an amount that may be a range.

    Each side of a range gets the full mixed-number treatment.

    Args:
        text: Amount text such as ``"2"``, ``"1 1/2"``, ``"2-3"`` or ``"½ to 1"``.

    Returns:
        A tuple of (amount, amount_max). ``amount_max`` is only set for ranges.

    Examples:
        >>> parse_amount_range("2-3")
        (2.0, 3.0)
        >>> parse_amount_range("1 1/2")
        (1.5, None)
    """
    if not text:
        return None, None
    text = normalize_unicode_fractions(str(text)).strip()

    parts = _RANGE_SPLIT_RE.split(text)
    if len(parts) == 2 and all(parts):
        return parse_mixed_number(parts[0]), parse_mixed_number(parts[1])

    return parse_mixed_number(text), None


def parse_iso_duration(duration: Optional[str]) -> Optional[int]:
    """Convert a coarse ISO 8601 duration to minutes.

    Only hours and minutes are read; seconds are ignored.

    Examples:
        >>> parse_iso_duration("PT1H30M")
        90
        >>> parse_iso_duration("PT45M")
        45
        >>> parse_iso_duration("20 minutes") is None
        True
    """
    if not duration or not isinstance(duration, str):
        return None

    match = _ISO_DURATION_RE.search(duration)
    if not match:
        return None

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes
