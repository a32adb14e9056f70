"""Optional LLM re-normalization of ingredient lines through AWS Bedrock.

The text parser leaves some lines only partly structured (no amount, or a
unit it does not recognize). This module asks a Bedrock model to split those
lines into amount, unit and name and merges the answers back into a recipe.
Any failure leaves the recipe exactly as it was.
"""

import dataclasses
import json
import logging
from typing import Any, Dict, List, Optional

import boto3

from recipe_utils.ingredients.models import Ingredient
from recipe_utils.ingredients.normalization import canonical_units, normalize_unit
from recipe_utils.ingredients.number_utils import parse_mixed_number
from recipe_utils.recipes.models import ScrapedRecipe

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "us.anthropic.claude-3-5-haiku-20241022-v1:0"
DEFAULT_REGION = "us-east-1"
DEFAULT_MAX_TOKENS = 2048

PROMPT_TEMPLATE = """
You are helping clean up ingredient lists scraped from recipe web pages.
For each ingredient line below, extract the amount, the unit and the ingredient name.

Use only these units (or null when there is no unit):
{units}

Ingredient lines:
{lines}

Respond with a JSON array containing exactly one object per line, in the same order:
[
  {{"amount": 1.5, "unit": "cup", "name": "chopped yellow onion"}}
]
Amounts must be numbers (convert fractions to decimals) or null.
"""


class BedrockIngredientNormalizer:
    """Ingredient line normalizer backed by a Bedrock hosted model.

    Attributes:
        model_id: Bedrock model or inference profile ID.
        max_tokens: Response token limit sent with each request.
        bedrock_client: The ``bedrock-runtime`` client used for requests.
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        region_name: str = DEFAULT_REGION,
        client: Any = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        self.model_id = model_id
        self.max_tokens = max_tokens
        self.bedrock_client = client or boto3.client(
            "bedrock-runtime", region_name=region_name
        )

    def _request_body(self, prompt: str) -> str:
        if "amazon.nova" in self.model_id:
            return json.dumps(
                {
                    "messages": [{"role": "user", "content": [{"text": prompt}]}],
                    "inferenceConfig": {"maxTokens": self.max_tokens},
                }
            )
        return json.dumps(
            {
                "anthropic_version": "bedrock-2023-05-31",
                "max_tokens": self.max_tokens,
                "messages": [
                    {"role": "user", "content": [{"type": "text", "text": prompt}]}
                ],
            }
        )

    def _completion_text(self, response_body: Dict[str, Any]) -> str:
        if "amazon.nova" in self.model_id:
            return (
                response_body.get("output", {})
                .get("message", {})
                .get("content", [{}])[0]
                .get("text", "")
            )
        return response_body.get("content", [{}])[0].get("text", "")

    def normalize(
        self, lines: List[str], unit_values: List[str]
    ) -> Optional[List[Dict[str, Any]]]:
        """Structure a batch of ingredient lines.

        Args:
            lines: Ingredient lines, as displayed
            unit_values: Canonical unit names the model may answer with

        Returns:
            One dict with ``amount``, ``unit`` and ``name`` keys per input line,
            or None if the call fails or the answer does not line up with the
            input.
        """
        if not lines:
            return []

        prompt = PROMPT_TEMPLATE.format(
            units=", ".join(unit_values),
            lines="\n".join(f"{i + 1}. {line}" for i, line in enumerate(lines)),
        )

        try:
            response = self.bedrock_client.invoke_model(
                body=self._request_body(prompt),
                modelId=self.model_id,
                accept="application/json",
                contentType="application/json",
            )
            response_body = json.loads(response.get("body").read())
            completion = self._completion_text(response_body)

            if "```json" in completion:
                completion = completion.split("```json")[1].split("```")[0]
            else:
                start_index = completion.find("[")
                end_index = completion.rfind("]")
                if start_index == -1 or end_index <= start_index:
                    logger.warning(f"No JSON array in response from {self.model_id}")
                    return None
                completion = completion[start_index : end_index + 1]

            parsed = json.loads(completion.strip())
        except Exception as e:
            logger.warning(f"AI normalization with model {self.model_id} failed: {e}")
            return None

        if not isinstance(parsed, list) or len(parsed) != len(lines):
            logger.warning(
                f"AI normalization returned {len(parsed) if isinstance(parsed, list) else 'no'} "
                f"results for {len(lines)} lines; ignoring"
            )
            return None
        if not all(isinstance(item, dict) for item in parsed):
            logger.warning("AI normalization returned non-object entries; ignoring")
            return None
        return parsed


def is_ambiguous(ingredient: Ingredient, units: Optional[set] = None) -> bool:
    """Whether the text parser left this ingredient only partly structured.

    An ingredient is ambiguous when it has no amount (unless it is a
    "to taste" line) or when its unit is not a canonical unit.
    """
    units = units if units is not None else set(canonical_units())
    if ingredient.unit is not None and ingredient.unit not in units:
        return True
    return ingredient.amount is None and ingredient.unit != "to taste"


def _coerce_amount(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return parse_mixed_number(value.strip())
    return None


def _merge(ingredient: Ingredient, result: Dict[str, Any], units: set) -> Ingredient:
    amount = _coerce_amount(result.get("amount"))
    unit = result.get("unit")
    unit = normalize_unit(unit.strip()) if isinstance(unit, str) and unit.strip() else None
    name = result.get("name")
    name = name.strip() if isinstance(name, str) else ""

    return dataclasses.replace(
        ingredient,
        amount=amount if amount is not None else ingredient.amount,
        unit=unit if unit in units else ingredient.unit,
        name=name or ingredient.name,
    )


def apply_ai_normalization(
    recipe: ScrapedRecipe, normalizer: Optional[BedrockIngredientNormalizer]
) -> ScrapedRecipe:
    """Backfill ambiguous ingredients of ``recipe`` using ``normalizer``.

    Only ambiguous ingredients are sent. ``original_text`` and ``section`` are
    always kept, and units outside the canonical vocabulary are ignored.

    Args:
        recipe: Recipe produced by the extraction pipeline
        normalizer: Normalizer to use, or None to skip

    Returns:
        An updated copy of the recipe, or the recipe itself if nothing changed
    """
    if normalizer is None:
        return recipe

    units = set(canonical_units())
    positions = [
        i for i, ingredient in enumerate(recipe.ingredients) if is_ambiguous(ingredient, units)
    ]
    if not positions:
        return recipe

    lines = [recipe.ingredients[i].original_text for i in positions]
    results = normalizer.normalize(lines, sorted(units))
    if not results:
        return recipe

    ingredients = list(recipe.ingredients)
    for position, result in zip(positions, results):
        ingredients[position] = _merge(ingredients[position], result, units)

    logger.info(f"AI normalization updated {len(positions)} ingredient(s)")
    return dataclasses.replace(recipe, ingredients=ingredients)
