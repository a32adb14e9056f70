#!/usr/bin/env python3
"""Parse a directory of saved recipe HTML pages into one ingredient CSV."""

import argparse
import logging
import pathlib

import pandas as pd
from tqdm import tqdm

from recipe_utils.recipes import RecipeExtractionError, parse_recipe_html

logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

COLUMNS = [
    "recipe_file",
    "title",
    "extraction_method",
    "section",
    "amount",
    "amount_max",
    "unit",
    "name",
    "original_text",
]


def recipe_rows(file_path: pathlib.Path) -> list[dict]:
    """One row per ingredient of the recipe saved at ``file_path``."""
    html = file_path.read_text(encoding="utf-8", errors="replace")
    recipe = parse_recipe_html(html, url=str(file_path))
    return [
        {
            "recipe_file": str(file_path),
            "title": recipe.title,
            "extraction_method": recipe.extraction_method.value,
            "section": ingredient.section,
            "amount": ingredient.amount,
            "amount_max": ingredient.amount_max,
            "unit": ingredient.unit,
            "name": ingredient.name,
            "original_text": ingredient.original_text,
        }
        for ingredient in recipe.ingredients
    ]


def main():
    """Parse every HTML file under the input directory."""
    parser = argparse.ArgumentParser(
        description="Extract ingredients from saved recipe pages into a CSV file"
    )
    parser.add_argument(
        "--input-dir",
        type=str,
        default="raw_recipes",
        help="Directory searched recursively for .html files",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/recipe_ingredients.csv",
        help="Path of the CSV file to write",
    )
    args = parser.parse_args()

    recipe_files = sorted(pathlib.Path(args.input_dir).rglob("*.html"))
    rows = []
    failures = 0
    for file_path in tqdm(recipe_files, desc="Parsing recipes"):
        try:
            rows.extend(recipe_rows(file_path))
        except (RecipeExtractionError, OSError) as e:
            logger.warning(f"Skipping {file_path}: {e}")
            failures += 1

    output = pathlib.Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=COLUMNS).to_csv(output, index=False)

    print(f"Parsed {len(recipe_files) - failures} of {len(recipe_files)} recipe files")
    print(f"Wrote {len(rows)} ingredient rows to {output}")


if __name__ == "__main__":
    main()
