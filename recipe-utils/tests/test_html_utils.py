import pytest
from bs4 import BeautifulSoup

from recipe_utils.recipes.html_utils import (
    collect_instructions,
    extract_metadata_from_html,
    find_image_url,
    find_title,
    parse_duration_text,
    parse_servings_text,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Serves 4", 4),
        ("Yield: 6 servings", 6),
        ("Makes 12 muffins", 12),
        ("Servings: 8", 8),
        ("10 servings", 10),
        ("Serves 150", None),
        ("no numbers here", None),
        ("", None),
    ],
)
def test_parse_servings_text(text, expected):
    assert parse_servings_text(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 hr 15 min", 75),
        ("45 minutes", 45),
        ("2 hours", 120),
        ("1h 5m", 65),
        ("soon", None),
        ("", None),
    ],
)
def test_parse_duration_text(text, expected):
    assert parse_duration_text(text) == expected


def test_metadata_keeps_prep_and_cook_apart():
    soup = BeautifulSoup(
        '<div class="recipe-meta">Prep 10 mins Cook 1 hr Total 1 hr 10 mins</div>', "lxml"
    )
    assert extract_metadata_from_html(soup) == {
        "servings": None,
        "prep_time": 10,
        "cook_time": 60,
    }


def test_metadata_servings_from_meta_tag():
    soup = BeautifulSoup('<meta name="recipeYield" content="Serves 5">', "lxml")
    assert extract_metadata_from_html(soup)["servings"] == 5


def test_find_title_prefers_recipe_heading():
    soup = BeautifulSoup(
        "<title>Site</title><h1>Blog</h1><h1 class='recipe-title'>Pie</h1>", "lxml"
    )
    assert find_title(soup) == "Pie"


def test_find_image_url_from_open_graph():
    soup = BeautifulSoup(
        '<meta property="og:image" content="https://example.com/og.jpg">'
        '<img class="recipe-photo" src="https://example.com/img.jpg">',
        "lxml",
    )
    assert find_image_url(soup) == "https://example.com/og.jpg"


def test_collect_instructions_stops_at_first_matching_group():
    soup = BeautifulSoup(
        """
        <ol class="steps"><li>1. Whisk</li><li>2. Fold</li></ol>
        <div class="step-notes"><p>Do not overmix.</p></div>
        """,
        "lxml",
    )
    assert collect_instructions(soup) == ["Whisk", "Fold"]
