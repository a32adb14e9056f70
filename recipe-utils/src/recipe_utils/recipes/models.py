"""Data models for scraped recipes."""

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Optional

from recipe_utils.ingredients.models import Ingredient

DEFAULT_TITLE = "Untitled Recipe"
DEFAULT_INSTRUCTIONS = ["No instructions found. Please add manually."]


class ExtractionMethod(str, Enum):
    """Strategy that produced a scraped recipe."""

    WPRM = "WPRM"
    DATA_ATTRIBUTES = "DataAttributes"
    JSON_LD = "JSON-LD"
    HTML = "HTML"


@dataclasses.dataclass(frozen=True)
class ScrapedRecipe:
    """Normalized recipe record produced by one extraction call.

    Fields cannot be reassigned; enrichment steps return updated copies made
    with :func:`dataclasses.replace`. List fields are copied on construction,
    so the record never shares a list with its caller.
    """

    title: str = DEFAULT_TITLE
    ingredients: List[Ingredient] = dataclasses.field(default_factory=list)
    instructions: List[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_INSTRUCTIONS)
    )
    description: Optional[str] = None
    image_url: Optional[str] = None
    servings: Optional[int] = None
    prep_time: Optional[int] = None  # minutes
    cook_time: Optional[int] = None  # minutes
    category: List[str] = dataclasses.field(default_factory=list)
    cuisine: List[str] = dataclasses.field(default_factory=list)
    keywords: List[str] = dataclasses.field(default_factory=list)
    extraction_method: Optional[ExtractionMethod] = None

    def __post_init__(self):
        for field in ("ingredients", "instructions", "category", "cuisine", "keywords"):
            object.__setattr__(self, field, list(getattr(self, field)))
        # Placeholders keep title and instructions non-empty
        if not self.title or not self.title.strip():
            object.__setattr__(self, "title", DEFAULT_TITLE)
        if not self.instructions:
            object.__setattr__(self, "instructions", list(DEFAULT_INSTRUCTIONS))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict using camelCase field names."""
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": [ingredient.to_dict() for ingredient in self.ingredients],
            "instructions": list(self.instructions),
            "imageUrl": self.image_url,
            "servings": self.servings,
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "category": list(self.category),
            "cuisine": list(self.cuisine),
            "keywords": list(self.keywords),
            "extractionMethod": (
                self.extraction_method.value if self.extraction_method else None
            ),
        }
