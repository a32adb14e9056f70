import pytest
from bs4 import BeautifulSoup

from recipe_utils.recipes.models import ExtractionMethod
from recipe_utils.recipes.sources import (
    DataAttributeExtractor,
    GenericHtmlExtractor,
    LinkedDataExtractor,
    WPRMExtractor,
    get_all_recipe_extractors,
    get_recipe_extractor,
)


def _soup(html):
    return BeautifulSoup(html, "lxml")


def test_wprm_extractor(wprm_html):
    recipe = WPRMExtractor().extract(_soup(wprm_html))

    assert recipe.extraction_method == ExtractionMethod.WPRM
    assert recipe.title == "Best Chili"
    assert recipe.description == "A hearty chili."
    assert recipe.image_url == "https://example.com/chili.jpg"
    assert recipe.servings == 6
    assert recipe.prep_time == 15
    assert recipe.instructions == ["Brown the beef.", "Add garlic and simmer."]

    beef, garlic, sour_cream = recipe.ingredients
    assert (beef.amount, beef.unit, beef.name) == (1.5, "pound", "ground beef")
    assert beef.section == "For the chili"
    assert beef.original_text == "1 1/2 lbs ground beef"
    assert (garlic.amount, garlic.amount_max, garlic.unit) == (2.0, 3.0, "clove")
    assert garlic.original_text == "2-3 cloves garlic minced"
    assert sour_cream.amount is None
    assert sour_cream.unit is None
    assert sour_cream.name == "Sour cream"
    assert sour_cream.section == "Toppings"


def test_wprm_extractor_backfills_from_linked_data(wprm_html):
    recipe = WPRMExtractor().extract(_soup(wprm_html))

    # Missing on the plugin markup, present in JSON-LD
    assert recipe.cook_time == 60
    assert recipe.cuisine == ["American"]
    assert recipe.category == ["Dinner"]
    assert recipe.keywords == ["chili", "beans"]
    # Present on the plugin markup, kept as is
    assert recipe.title == "Best Chili"
    assert len(recipe.ingredients) == 3


def test_wprm_extractor_not_applicable(generic_html):
    extractor = WPRMExtractor()
    soup = _soup(generic_html)
    assert not extractor.detect(soup)
    assert extractor.extract(soup) is None


def test_wprm_ungrouped_ingredients():
    html = """
    <div class="wprm-recipe">
      <span class="wprm-recipe-name">Toast</span>
      <li class="wprm-recipe-ingredient">
        <span class="wprm-recipe-ingredient-amount">2</span>
        <span class="wprm-recipe-ingredient-name">slices bread</span>
      </li>
      <span class="wprm-recipe-cook_time-hours">1</span>
      <span class="wprm-recipe-cook_time-minutes">10</span>
    </div>
    """
    recipe = WPRMExtractor().extract(_soup(html))
    assert len(recipe.ingredients) == 1
    assert recipe.ingredients[0].section is None
    assert recipe.ingredients[0].amount == 2.0
    assert recipe.cook_time == 70


def test_data_attribute_extractor(data_attribute_html):
    recipe = DataAttributeExtractor().extract(_soup(data_attribute_html))

    assert recipe.extraction_method == ExtractionMethod.DATA_ATTRIBUTES
    assert recipe.title == "Lemon Cake"
    assert recipe.description == "Bright lemon cake."
    assert recipe.image_url == "https://example.com/cake.jpg"
    assert recipe.instructions == ["Preheat the oven.", "Mix and bake."]
    assert recipe.servings == 8
    assert recipe.prep_time == 20
    assert recipe.cook_time == 65

    flour, salt, sugar = recipe.ingredients
    assert (flour.amount, flour.unit, flour.name) == (2.0, "cup", "all-purpose flour")
    assert flour.original_text == "2 cups all-purpose flour"
    assert (salt.amount, salt.unit) == (0.5, "teaspoon")
    assert [i.section for i in recipe.ingredients] == ["Cake", "Cake", "Glaze"]
    assert sugar.name == "powdered sugar"


def test_data_attribute_sections_from_headings(data_attribute_headings_html):
    recipe = DataAttributeExtractor().extract(_soup(data_attribute_headings_html))

    flour, cinnamon = recipe.ingredients
    assert flour.section == "For the dough"
    assert cinnamon.section == "For the filling"
    assert cinnamon.unit == "tablespoon"
    assert recipe.title == "Cinnamon Rolls"
    assert recipe.instructions == ["Knead the dough."]


def test_data_attribute_extractor_without_names():
    html = '<ul><li><span data-ingredient-quantity="true">2</span></li></ul>'
    extractor = DataAttributeExtractor()
    soup = _soup(html)
    assert extractor.detect(soup)
    assert extractor.extract(soup) is None


def test_linked_data_extractor(json_ld_html):
    recipe = LinkedDataExtractor().extract(_soup(json_ld_html))

    assert recipe.extraction_method == ExtractionMethod.JSON_LD
    assert recipe.title == "Garlic Pasta & Herbs"
    assert recipe.description == "Quick weeknight pasta."
    assert recipe.image_url == "https://example.com/pasta.jpg"
    assert recipe.servings == 4
    assert recipe.prep_time == 10
    assert recipe.cook_time is None
    assert recipe.instructions == ["Boil the pasta.", "Saute the garlic.", "Toss together."]
    assert recipe.category == ["Dinner"]
    assert recipe.cuisine == ["Italian"]
    assert recipe.keywords == ["pasta", "garlic"]

    spaghetti, garlic, salt = recipe.ingredients
    assert (spaghetti.amount, spaghetti.unit, spaghetti.name) == (8.0, "ounce", "spaghetti")
    assert (garlic.amount, garlic.unit, garlic.name) == (4.0, "clove", "garlic, minced")
    assert (salt.amount, salt.unit, salt.name) == (None, "to taste", "Salt")


def test_linked_data_extractor_without_recipe():
    html = """
    <script type="application/ld+json">{"@type": "Article", "name": "News"}</script>
    """
    extractor = LinkedDataExtractor()
    soup = _soup(html)
    assert extractor.detect(soup)
    assert extractor.extract(soup) is None


def test_generic_extractor(generic_html):
    recipe = GenericHtmlExtractor().extract(_soup(generic_html))

    assert recipe.extraction_method == ExtractionMethod.HTML
    assert recipe.title == "Grandma's Soup"
    assert recipe.servings == 4
    assert recipe.prep_time == 15
    assert recipe.cook_time == 60
    assert recipe.instructions == ["Chop the vegetables.", "Simmer everything for an hour."]

    names = [i.name for i in recipe.ingredients]
    assert names == ["carrots, diced", "(32 oz) carton broth", "Salt and pepper"]
    assert recipe.ingredients[2].unit == "to taste"


def test_generic_extractor_uses_innermost_matches():
    html = """
    <ul class="ingredients">
      <li class="ingredient-item"><span class="ingredient">1 cup rice</span></li>
      <li class="ingredient-item"><span class="ingredient">2 cups water</span></li>
    </ul>
    """
    recipe = GenericHtmlExtractor().extract(_soup(html))
    assert [i.original_text for i in recipe.ingredients] == ["1 cup rice", "2 cups water"]


def test_generic_extractor_always_returns_a_record(empty_html):
    recipe = GenericHtmlExtractor().extract(_soup(empty_html))
    assert recipe is not None
    assert recipe.ingredients == []
    assert recipe.title == "Untitled Recipe"
    assert recipe.instructions == ["No instructions found. Please add manually."]


def test_extractors_are_in_priority_order():
    methods = [extractor.method for extractor in get_all_recipe_extractors()]
    assert methods == [
        ExtractionMethod.WPRM,
        ExtractionMethod.DATA_ATTRIBUTES,
        ExtractionMethod.JSON_LD,
        ExtractionMethod.HTML,
    ]


@pytest.mark.parametrize(
    "method, expected_type",
    [
        ("WPRM", WPRMExtractor),
        ("json-ld", LinkedDataExtractor),
        ("DataAttributes", DataAttributeExtractor),
        ("html", GenericHtmlExtractor),
    ],
)
def test_get_recipe_extractor(method, expected_type):
    assert isinstance(get_recipe_extractor(method), expected_type)


def test_get_recipe_extractor_unknown():
    assert get_recipe_extractor("microdata") is None
