"""HTML heuristics shared by the recipe extractors."""

import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from recipe_utils.ingredients.parsing import clean_list_item_text

INSTRUCTION_SELECTORS = [
    # List items and containers named after instructions
    'li[class*="instruction"], li[class*="direction"], li[class*="step"], '
    '.instruction, [itemprop="recipeInstructions"] li, '
    'ol[class*="instruction"] li, ol[class*="direction"] li, ol[class*="step"] li',
    # Dotdash Meredith sites (AllRecipes, Simply Recipes, ...)
    ".mntl-sc-block-group--OL li.mntl-sc-block-group--LI p.mntl-sc-block-html",
    # Paragraph-based steps
    '[class*="instruction"] p, [class*="direction"] p, [class*="step"] p',
]

METADATA_SELECTORS = [
    '[class*="recipe-meta"]',
    '[class*="recipe-info"]',
    '[class*="recipe-details"]',
    '[class*="meta"]',
    ".recipe-yield",
    ".yield",
    ".servings",
    ".prep-time",
    ".cook-time",
]

_SERVINGS_PATTERNS = [
    re.compile(r"serves?\s*:?\s*(\d+)"),
    re.compile(r"yield\s*:?\s*(\d+)"),
    re.compile(r"makes?\s*:?\s*(\d+)"),
    re.compile(r"servings?\s*:?\s*(\d+)"),
    re.compile(r"(\d+)\s*servings?"),
]
_HOURS_RE = re.compile(r"(\d+)\s*(?:hours?|hrs?|h)\b")
_MINUTES_RE = re.compile(r"(\d+)\s*(?:minutes?|mins?|m)\b")


def text_of(tag: Optional[Tag]) -> str:
    """Visible text of a tag with whitespace collapsed."""
    if tag is None:
        return ""
    return " ".join(tag.get_text(" ", strip=True).split())


def first_text(soup, selector: str) -> str:
    """Text of the first element matching ``selector`` that has any."""
    for tag in soup.select(selector):
        text = text_of(tag)
        if text:
            return text
    return ""


def find_title(soup: BeautifulSoup) -> str:
    """Recipe heading, then any h1, then the page title. Empty if none."""
    return (
        first_text(soup, 'h1[class*="recipe"]')
        or first_text(soup, '[class*="recipe"] h1, [class*="recipe"] h2')
        or first_text(soup, "h1")
        or first_text(soup, "title")
    )


def find_description(soup: BeautifulSoup) -> Optional[str]:
    meta = soup.select_one('meta[name="description"]')
    if meta and meta.get("content", "").strip():
        return meta["content"].strip()
    return first_text(soup, 'p[class*="description"]') or None


def find_image_url(soup: BeautifulSoup) -> Optional[str]:
    meta = soup.select_one('meta[property="og:image"]')
    if meta and meta.get("content", "").strip():
        return meta["content"].strip()
    image = soup.select_one('img[class*="recipe"]')
    if image and image.get("src"):
        return image["src"]
    return None


def collect_instructions(soup: BeautifulSoup) -> List[str]:
    """Collect instruction steps using the first selector group that finds any."""
    for selector in INSTRUCTION_SELECTORS:
        steps = [clean_list_item_text(text_of(tag)) for tag in soup.select(selector)]
        steps = [step for step in steps if step]
        if steps:
            return steps
    return []


def parse_servings_text(text: str) -> Optional[int]:
    """Servings from text such as "Serves 4" or "Yield: 6 servings".

    Examples:
        >>> parse_servings_text("Makes 8")
        8
    """
    if not text:
        return None
    normalized = text.lower()
    for pattern in _SERVINGS_PATTERNS:
        match = pattern.search(normalized)
        if match:
            servings = int(match.group(1))
            # Anything else is probably not a serving count
            if 0 < servings < 100:
                return servings
    return None


def parse_duration_text(text: str) -> Optional[int]:
    """Minutes from free text such as "1 hr 15 min" or "45 minutes".

    Examples:
        >>> parse_duration_text("1 hour 30 minutes")
        90
    """
    if not text:
        return None
    normalized = text.lower()
    total = 0
    hours = _HOURS_RE.search(normalized)
    if hours:
        total += int(hours.group(1)) * 60
    minutes = _MINUTES_RE.search(normalized)
    if minutes:
        total += int(minutes.group(1))
    return total or None


def _labeled_segment(text: str, label: str) -> str:
    """Text following ``label`` up to the next timing label ("Prep 10 min Cook 1 hr")."""
    match = re.search(
        rf"\b{label}\w*(.*?)(?=\b(?:prep|cook|total|active|inactive|rest)|$)",
        text,
        re.IGNORECASE | re.DOTALL,
    )
    return match.group(1) if match else ""


def extract_metadata_from_html(soup: BeautifulSoup) -> Dict[str, Optional[int]]:
    """Look for servings and prep/cook times in common metadata containers.

    Returns:
        Dict with ``servings``, ``prep_time`` and ``cook_time`` keys; values
        are None where nothing was found.
    """
    result: Dict[str, Optional[int]] = {
        "servings": None,
        "prep_time": None,
        "cook_time": None,
    }

    for selector in METADATA_SELECTORS:
        for tag in soup.select(selector):
            text = text_of(tag)
            if not text:
                continue
            if result["servings"] is None:
                result["servings"] = parse_servings_text(text)
            if result["prep_time"] is None:
                result["prep_time"] = parse_duration_text(_labeled_segment(text, "prep"))
            if result["cook_time"] is None:
                result["cook_time"] = parse_duration_text(_labeled_segment(text, "cook"))

    if result["servings"] is None:
        meta = soup.select_one(
            'meta[name*="yield" i], meta[property*="yield" i], meta[itemprop*="yield" i]'
        )
        if meta and meta.get("content"):
            result["servings"] = parse_servings_text(meta["content"])

    return result
