"""JSON-LD (schema.org Recipe) reading and backfill utilities."""

import dataclasses
import html
import json
import logging
import math
import re
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup

from recipe_utils.ingredients.models import Ingredient
from recipe_utils.ingredients.normalization import normalize_unit
from recipe_utils.ingredients.number_utils import parse_amount_range, parse_iso_duration
from recipe_utils.ingredients.parsing import clean_list_item_text, parse_ingredient
from recipe_utils.recipes.models import DEFAULT_TITLE, ExtractionMethod, ScrapedRecipe

logger = logging.getLogger(__name__)

LINKED_DATA_SELECTOR = 'script[type="application/ld+json"]'


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def iter_linked_data_nodes(soup: BeautifulSoup) -> Iterator[Dict[str, Any]]:
    """Yield every JSON-LD object on the page.

    Handles single objects, top-level arrays and ``@graph`` containers.
    Blocks that are not valid JSON (including ``NaN``/``Infinity`` literals
    and nesting too deep to decode) are logged and skipped.
    """
    for index, script in enumerate(soup.select(LINKED_DATA_SELECTOR)):
        content = script.string or script.get_text()
        if not content or not content.strip():
            continue
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Skipping malformed JSON-LD block {index}: {e}")
            continue
        yield from _flatten_nodes(data)


def _flatten_nodes(data: Any) -> Iterator[Dict[str, Any]]:
    """Walk lists and ``@graph`` containers without recursing."""
    stack = [data]
    while stack:
        item = stack.pop()
        if isinstance(item, list):
            stack.extend(reversed(item))
        elif isinstance(item, dict):
            graph = item.get("@graph")
            if isinstance(graph, list):
                stack.extend(reversed(graph))
            else:
                yield item


def is_recipe_node(node: Dict[str, Any]) -> bool:
    """Check whether a JSON-LD object declares the Recipe type."""
    node_type = node.get("@type")
    if isinstance(node_type, list):
        return "Recipe" in node_type
    return node_type == "Recipe"


def find_linked_data_recipe(soup: BeautifulSoup) -> Optional[Dict[str, Any]]:
    """Return the first JSON-LD Recipe object on the page, or None."""
    for node in iter_linked_data_nodes(soup):
        if is_recipe_node(node):
            return node
    return None


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return " ".join(html.unescape(str(value)).split())


def parse_linked_data_ingredients(items: Any) -> List[Ingredient]:
    """Convert ``recipeIngredient`` entries into Ingredients.

    Plain strings go through the text parser. Structured ``PropertyValue``
    records already separate value, unit code and name, so they are combined
    directly.
    """
    if items is None:
        return []
    if not isinstance(items, list):
        items = [items]

    ingredients = []
    for item in items:
        if isinstance(item, dict):
            ingredient = _ingredient_from_property_value(item)
        else:
            text = _clean_text(item)
            ingredient = parse_ingredient(text) if text else None
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def _ingredient_from_property_value(item: Dict[str, Any]) -> Optional[Ingredient]:
    value = _clean_text(item.get("value"))
    unit_code = _clean_text(item.get("unitCode") or item.get("unitText"))
    name = _clean_text(item.get("name"))

    text = " ".join(part for part in [value, unit_code, name] if part)
    if not text:
        return None

    amount, amount_max = parse_amount_range(value) if value else (None, None)
    return Ingredient(
        amount=amount,
        amount_max=amount_max,
        unit=normalize_unit(unit_code) if unit_code else None,
        name=name or text,
        original_text=text,
    )


def parse_linked_data_instructions(instructions: Any) -> List[str]:
    """Convert ``recipeInstructions`` into a flat list of step texts.

    Accepts a single string (split on line breaks), a list of strings,
    ``HowToStep`` objects, and ``HowToSection`` objects whose steps sit in
    ``itemListElement``.
    """
    if not instructions:
        return []

    if isinstance(instructions, str):
        lines = html.unescape(instructions).splitlines()
        return [step for step in (clean_list_item_text(line) for line in lines) if step]

    if isinstance(instructions, dict):
        instructions = [instructions]
    if not isinstance(instructions, list):
        return []

    steps = []
    for item in instructions:
        if isinstance(item, dict):
            if "itemListElement" in item:
                steps.extend(parse_linked_data_instructions(item["itemListElement"]))
                continue
            text = item.get("text") or item.get("name")
        else:
            text = item
        step = clean_list_item_text(_clean_text(text))
        if step:
            steps.append(step)
    return steps


def resolve_image_url(image: Any) -> Optional[str]:
    """Resolve a schema.org image given as a string, a list or an ImageObject."""
    if not image:
        return None
    if isinstance(image, str):
        return image.strip() or None
    if isinstance(image, list):
        for entry in image:
            url = resolve_image_url(entry)
            if url:
                return url
        return None
    if isinstance(image, dict):
        url = image.get("url") or image.get("contentUrl")
        return url.strip() if isinstance(url, str) and url.strip() else None
    return None


def parse_yield(recipe_yield: Any) -> Optional[int]:
    """Read servings from ``recipeYield`` ("4", "4 servings", 4 or ["4", "4 servings"])."""
    if recipe_yield is None or isinstance(recipe_yield, bool):
        return None
    if isinstance(recipe_yield, float) and not math.isfinite(recipe_yield):
        return None
    if isinstance(recipe_yield, (int, float)):
        return int(recipe_yield) if recipe_yield >= 1 else None
    if isinstance(recipe_yield, list):
        for entry in recipe_yield:
            if isinstance(entry, list):
                continue
            servings = parse_yield(entry)
            if servings:
                return servings
        return None

    match = re.search(r"\d+", str(recipe_yield))
    if match:
        return int(match.group()) or None
    return None


def parse_duration_minutes(duration: Any) -> Optional[int]:
    """ISO 8601 duration in minutes; zero-length durations count as missing."""
    return parse_iso_duration(duration) or None


def _as_string_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [part.strip() for part in html.unescape(value).split(",") if part.strip()]
    if isinstance(value, list):
        return [_clean_text(part) for part in value if isinstance(part, str) and part.strip()]
    return []


def recipe_from_linked_data(node: Dict[str, Any]) -> ScrapedRecipe:
    """Map a schema.org Recipe object onto a ScrapedRecipe."""
    return ScrapedRecipe(
        title=_clean_text(node.get("name")) or DEFAULT_TITLE,
        description=_clean_text(node.get("description")) or None,
        ingredients=parse_linked_data_ingredients(node.get("recipeIngredient")),
        instructions=parse_linked_data_instructions(node.get("recipeInstructions")),
        image_url=resolve_image_url(node.get("image")),
        servings=parse_yield(node.get("recipeYield")),
        prep_time=parse_duration_minutes(node.get("prepTime")),
        cook_time=parse_duration_minutes(node.get("cookTime")),
        category=_as_string_list(node.get("recipeCategory")),
        cuisine=_as_string_list(node.get("recipeCuisine")),
        keywords=_as_string_list(node.get("keywords")),
        extraction_method=ExtractionMethod.JSON_LD,
    )


def backfill_from_linked_data(recipe: ScrapedRecipe, soup: BeautifulSoup) -> ScrapedRecipe:
    """Fill missing metadata on ``recipe`` from the page's JSON-LD Recipe.

    Only fields that are still empty are filled; values the extractor
    already found are never overwritten.

    Args:
        recipe: A partially filled recipe.
        soup: The parsed page the recipe came from.

    Returns:
        The same recipe if nothing could be added, otherwise an updated copy.
    """
    missing = [
        field
        for field in ("servings", "prep_time", "cook_time", "description", "image_url")
        if getattr(recipe, field) is None
    ]
    missing += [
        field for field in ("category", "cuisine", "keywords") if not getattr(recipe, field)
    ]
    if not missing:
        return recipe

    node = find_linked_data_recipe(soup)
    if node is None:
        return recipe

    try:
        linked = recipe_from_linked_data(node)
    except RecursionError as e:
        logger.warning(f"Skipping JSON-LD backfill, recipe object nested too deeply: {e}")
        return recipe

    updates = {}
    for field in missing:
        value = getattr(linked, field)
        if value:
            updates[field] = value

    if not updates:
        return recipe
    logger.debug(f"Backfilled {', '.join(sorted(updates))} from JSON-LD")
    return dataclasses.replace(recipe, **updates)
