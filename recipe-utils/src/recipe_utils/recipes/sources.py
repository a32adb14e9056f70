"""Recipe extraction strategies for the page formats we understand."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from recipe_utils.ingredients.models import Ingredient
from recipe_utils.ingredients.normalization import normalize_unit
from recipe_utils.ingredients.number_utils import parse_amount_range
from recipe_utils.ingredients.parsing import clean_list_item_text, parse_ingredients
from recipe_utils.recipes.html_utils import (
    collect_instructions,
    extract_metadata_from_html,
    find_description,
    find_image_url,
    find_title,
    text_of,
)
from recipe_utils.recipes.linked_data import (
    LINKED_DATA_SELECTOR,
    backfill_from_linked_data,
    find_linked_data_recipe,
    recipe_from_linked_data,
)
from recipe_utils.recipes.models import DEFAULT_TITLE, ExtractionMethod, ScrapedRecipe

logger = logging.getLogger(__name__)


def _first_int(text: str) -> Optional[int]:
    match = re.search(r"\d+", text or "")
    return int(match.group()) if match else None


def _structured_ingredient(
    amount_text: str,
    unit_text: str,
    name: str,
    notes: str = "",
    section: Optional[str] = None,
) -> Optional[Ingredient]:
    """Build an Ingredient from markup that already separates its fields."""
    original_text = " ".join(part for part in [amount_text, unit_text, name, notes] if part)
    if not original_text:
        return None

    amount, amount_max = parse_amount_range(amount_text) if amount_text else (None, None)
    return Ingredient(
        amount=amount,
        amount_max=amount_max,
        unit=normalize_unit(unit_text) if unit_text else None,
        name=name or original_text,
        section=section,
        original_text=original_text,
    )


class RecipeExtractor(ABC):
    """Abstract base class for recipe extraction strategies."""

    @property
    @abstractmethod
    def method(self) -> ExtractionMethod:
        """Return the extraction method this strategy reports."""
        pass

    @abstractmethod
    def detect(self, soup: BeautifulSoup) -> bool:
        """Cheap check for this strategy's signature markup.

        Args:
            soup: Parsed recipe page

        Returns:
            True if the page looks like it uses this format
        """
        pass

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> Optional[ScrapedRecipe]:
        """Extract a recipe from the page.

        Args:
            soup: Parsed recipe page

        Returns:
            A ScrapedRecipe, or None if this format does not apply to the page
        """
        pass


class WPRMExtractor(RecipeExtractor):
    """WP Recipe Maker plugin markup (``.wprm-recipe``)."""

    CONTAINER = ".wprm-recipe"

    @property
    def method(self) -> ExtractionMethod:
        return ExtractionMethod.WPRM

    def detect(self, soup: BeautifulSoup) -> bool:
        return soup.select_one(self.CONTAINER) is not None

    def extract(self, soup: BeautifulSoup) -> Optional[ScrapedRecipe]:
        container = soup.select_one(self.CONTAINER)
        if container is None:
            return None

        ingredients = []
        groups = container.select(".wprm-recipe-ingredient-group")
        if groups:
            for group in groups:
                section = text_of(group.select_one(".wprm-recipe-ingredient-group-name")) or None
                ingredients.extend(self._parse_ingredients(group, section))
        else:
            ingredients.extend(self._parse_ingredients(container, None))

        instructions = [
            clean_list_item_text(text_of(tag))
            for tag in container.select(".wprm-recipe-instruction-text")
        ]

        image = container.select_one(".wprm-recipe-image img")
        image_url = None
        if image is not None:
            image_url = image.get("src") or image.get("data-src") or image.get("data-lazy-src")

        recipe = ScrapedRecipe(
            title=text_of(container.select_one(".wprm-recipe-name")) or DEFAULT_TITLE,
            ingredients=ingredients,
            instructions=[step for step in instructions if step],
            description=text_of(container.select_one(".wprm-recipe-summary")) or None,
            image_url=image_url,
            servings=_first_int(text_of(container.select_one(".wprm-recipe-servings"))),
            prep_time=self._parse_time(container, "prep_time"),
            cook_time=self._parse_time(container, "cook_time"),
            extraction_method=self.method,
        )
        return backfill_from_linked_data(recipe, soup)

    def _parse_ingredients(self, scope: Tag, section: Optional[str]) -> List[Ingredient]:
        ingredients = []
        for elem in scope.select(".wprm-recipe-ingredient"):
            ingredient = _structured_ingredient(
                text_of(elem.select_one(".wprm-recipe-ingredient-amount")),
                text_of(elem.select_one(".wprm-recipe-ingredient-unit")),
                text_of(elem.select_one(".wprm-recipe-ingredient-name")),
                text_of(elem.select_one(".wprm-recipe-ingredient-notes")),
                section=section,
            )
            if ingredient is not None:
                ingredients.append(ingredient)
        return ingredients

    def _parse_time(self, container: Tag, field: str) -> Optional[int]:
        """WPRM splits times into ``-hours`` and ``-minutes`` elements."""
        hours = _first_int(text_of(container.select_one(f".wprm-recipe-{field}-hours")))
        minutes = _first_int(text_of(container.select_one(f".wprm-recipe-{field}-minutes")))
        if hours is None and minutes is None:
            return None
        return (hours or 0) * 60 + (minutes or 0) or None


class DataAttributeExtractor(RecipeExtractor):
    """Markup that labels ingredient parts with ``data-ingredient-*`` attributes."""

    SIGNATURE = "[data-ingredient-quantity], [data-ingredient-name]"
    SECTION_HEADINGS = ["h2", "h3", "h4", "strong"]
    SECTION_LOOKAHEAD = 5

    @property
    def method(self) -> ExtractionMethod:
        return ExtractionMethod.DATA_ATTRIBUTES

    def detect(self, soup: BeautifulSoup) -> bool:
        return soup.select_one(self.SIGNATURE) is not None

    def extract(self, soup: BeautifulSoup) -> Optional[ScrapedRecipe]:
        if not self.detect(soup):
            return None

        sections = self._map_sections(soup)
        ingredients = []
        for elem in soup.select("[data-ingredient-name]"):
            name = text_of(elem)
            if not name:
                continue
            # Quantity and unit live next to the name inside the same row
            if elem.name in ("li", "p", "div"):
                row = elem
            else:
                row = elem.find_parent(["li", "p", "div"]) or elem
            ingredient = _structured_ingredient(
                text_of(row.select_one("[data-ingredient-quantity]")),
                text_of(row.select_one("[data-ingredient-unit]")),
                name,
                section=sections.get(id(elem)),
            )
            if ingredient is not None:
                ingredients.append(ingredient)

        if not ingredients:
            logger.debug("Data attributes present but no ingredients could be read")
            return None

        metadata = extract_metadata_from_html(soup)
        recipe = ScrapedRecipe(
            title=find_title(soup) or DEFAULT_TITLE,
            ingredients=ingredients,
            instructions=collect_instructions(soup),
            description=find_description(soup),
            image_url=find_image_url(soup),
            servings=metadata["servings"],
            prep_time=metadata["prep_time"],
            cook_time=metadata["cook_time"],
            extraction_method=self.method,
        )
        return backfill_from_linked_data(recipe, soup)

    def _map_sections(self, soup: BeautifulSoup) -> Dict[int, str]:
        """Map ``id()`` of ingredient name elements to their section heading."""
        sections: Dict[int, str] = {}

        # AllRecipes names each ingredient list with a dedicated heading
        for heading in soup.select(".mm-recipes-structured-ingredients__list-heading"):
            label = text_of(heading)
            ingredient_list = heading.find_next_sibling("ul")
            if not label or ingredient_list is None:
                continue
            for elem in ingredient_list.select("[data-ingredient-name]"):
                sections[id(elem)] = label

        labeled_by_site = set(sections)
        for heading in soup.find_all(self.SECTION_HEADINGS):
            label = text_of(heading)
            if not label:
                continue
            for sibling in heading.find_next_siblings(True, limit=self.SECTION_LOOKAHEAD):
                if sibling.name in self.SECTION_HEADINGS:
                    break
                found = sibling.select("[data-ingredient-name]")
                if sibling.has_attr("data-ingredient-name"):
                    found.append(sibling)
                for elem in found:
                    if id(elem) not in labeled_by_site:
                        sections[id(elem)] = label
        return sections


class LinkedDataExtractor(RecipeExtractor):
    """schema.org Recipe objects embedded as JSON-LD."""

    @property
    def method(self) -> ExtractionMethod:
        return ExtractionMethod.JSON_LD

    def detect(self, soup: BeautifulSoup) -> bool:
        return soup.select_one(LINKED_DATA_SELECTOR) is not None

    def extract(self, soup: BeautifulSoup) -> Optional[ScrapedRecipe]:
        node = find_linked_data_recipe(soup)
        if node is None:
            return None
        return recipe_from_linked_data(node)


class GenericHtmlExtractor(RecipeExtractor):
    """Best-effort class-name heuristics for any page. Never reports not-applicable."""

    INGREDIENT_SELECTOR = (
        'li[class*="ingredient"], .ingredient, [itemprop="recipeIngredient"], '
        '[class*="ingredient"] li'
    )

    @property
    def method(self) -> ExtractionMethod:
        return ExtractionMethod.HTML

    def detect(self, soup: BeautifulSoup) -> bool:
        return True

    def extract(self, soup: BeautifulSoup) -> Optional[ScrapedRecipe]:
        lines = [text_of(tag) for tag in self._ingredient_elements(soup)]
        metadata = extract_metadata_from_html(soup)

        recipe = ScrapedRecipe(
            title=find_title(soup) or DEFAULT_TITLE,
            ingredients=parse_ingredients(lines),
            instructions=collect_instructions(soup),
            description=find_description(soup),
            image_url=find_image_url(soup),
            servings=metadata["servings"],
            prep_time=metadata["prep_time"],
            cook_time=metadata["cook_time"],
            extraction_method=self.method,
        )
        return backfill_from_linked_data(recipe, soup)

    def _ingredient_elements(self, soup: BeautifulSoup) -> List[Tag]:
        """Matching elements in document order, innermost only, hidden ones skipped."""
        candidates = []
        seen = set()
        for tag in soup.select(self.INGREDIENT_SELECTOR):
            if id(tag) in seen:
                continue
            seen.add(id(tag))
            style = (tag.get("style") or "").replace(" ", "").lower()
            if "display:none" in style:
                continue
            candidates.append(tag)

        candidate_ids = {id(tag) for tag in candidates}
        return [
            tag
            for tag in candidates
            if not any(id(child) in candidate_ids for child in tag.find_all(True))
        ]


# Extraction strategies in priority order; the generic extractor must stay last
RECIPE_EXTRACTORS: List[RecipeExtractor] = [
    WPRMExtractor(),
    DataAttributeExtractor(),
    LinkedDataExtractor(),
    GenericHtmlExtractor(),
]


def get_recipe_extractor(method: str) -> Optional[RecipeExtractor]:
    """Get an extractor by its extraction method value (e.g., "WPRM", "JSON-LD").

    Args:
        method: Extraction method name, case-insensitive

    Returns:
        RecipeExtractor instance or None if not found
    """
    for extractor in RECIPE_EXTRACTORS:
        if extractor.method.value.lower() == method.lower():
            return extractor
    return None


def get_all_recipe_extractors() -> List[RecipeExtractor]:
    """Get all registered extractors in priority order."""
    return list(RECIPE_EXTRACTORS)
