import pytest

WPRM_HTML = """
<html>
<head>
<title>Best Chili | Example Kitchen</title>
<script type="application/ld+json">
{"@context": "https://schema.org", "@type": "Recipe", "name": "Linked Chili",
 "recipeIngredient": ["5 cups beans"], "recipeInstructions": ["Linked step"],
 "recipeCuisine": "American", "recipeCategory": ["Dinner"],
 "keywords": "chili, beans", "cookTime": "PT1H"}
</script>
</head>
<body>
<div class="wprm-recipe">
  <h2 class="wprm-recipe-name">Best Chili</h2>
  <div class="wprm-recipe-summary">A hearty chili.</div>
  <div class="wprm-recipe-image"><img data-src="https://example.com/chili.jpg"></div>
  <span class="wprm-recipe-servings">6</span>
  <span class="wprm-recipe-prep_time-minutes">15 mins</span>
  <div class="wprm-recipe-ingredient-group">
    <h4 class="wprm-recipe-ingredient-group-name">For the chili</h4>
    <ul>
      <li class="wprm-recipe-ingredient">
        <span class="wprm-recipe-ingredient-amount">1 1/2</span>
        <span class="wprm-recipe-ingredient-unit">lbs</span>
        <span class="wprm-recipe-ingredient-name">ground beef</span>
      </li>
      <li class="wprm-recipe-ingredient">
        <span class="wprm-recipe-ingredient-amount">2-3</span>
        <span class="wprm-recipe-ingredient-unit">cloves</span>
        <span class="wprm-recipe-ingredient-name">garlic</span>
        <span class="wprm-recipe-ingredient-notes">minced</span>
      </li>
    </ul>
  </div>
  <div class="wprm-recipe-ingredient-group">
    <h4 class="wprm-recipe-ingredient-group-name">Toppings</h4>
    <ul>
      <li class="wprm-recipe-ingredient">
        <span class="wprm-recipe-ingredient-name">Sour cream</span>
      </li>
    </ul>
  </div>
  <ul>
    <li class="wprm-recipe-instruction"><div class="wprm-recipe-instruction-text">1. Brown the beef.</div></li>
    <li class="wprm-recipe-instruction"><div class="wprm-recipe-instruction-text">Add garlic and simmer.</div></li>
  </ul>
</div>
</body>
</html>
"""

DATA_ATTRIBUTE_HTML = """
<html>
<head>
<title>Lemon Cake Recipe</title>
<meta name="description" content="Bright lemon cake.">
<meta property="og:image" content="https://example.com/cake.jpg">
</head>
<body>
<h1 class="article-heading">Lemon Cake</h1>
<div class="recipe-details">Prep: 20 mins Cook: 1 hr 5 mins Servings: 8</div>
<div class="mm-recipes-structured-ingredients">
  <p class="mm-recipes-structured-ingredients__list-heading">Cake</p>
  <ul>
    <li><p><span data-ingredient-quantity="true">2</span> <span data-ingredient-unit="true">cups</span> <span data-ingredient-name="true">all-purpose flour</span></p></li>
    <li><p><span data-ingredient-quantity="true">½</span> <span data-ingredient-unit="true">tsp</span> <span data-ingredient-name="true">salt</span></p></li>
  </ul>
  <p class="mm-recipes-structured-ingredients__list-heading">Glaze</p>
  <ul>
    <li><p><span data-ingredient-quantity="true">1</span> <span data-ingredient-unit="true">cup</span> <span data-ingredient-name="true">powdered sugar</span></p></li>
  </ul>
</div>
<ol class="mntl-sc-block-group--OL">
  <li class="mntl-sc-block-group--LI"><p class="mntl-sc-block-html">Preheat the oven.</p></li>
  <li class="mntl-sc-block-group--LI"><p class="mntl-sc-block-html">Mix and bake.</p></li>
</ol>
</body>
</html>
"""

DATA_ATTRIBUTE_HEADINGS_HTML = """
<html>
<head><title>Cinnamon Rolls</title></head>
<body>
<h3>For the dough</h3>
<ul>
  <li><span data-ingredient-quantity="">3</span> <span data-ingredient-unit="">cups</span> <span data-ingredient-name="">bread flour</span></li>
</ul>
<h3>For the filling</h3>
<ul>
  <li><span data-ingredient-quantity="">1</span> <span data-ingredient-unit="">T</span> <span data-ingredient-name="">cinnamon</span></li>
</ul>
<ol class="directions"><li>Knead the dough.</li></ol>
</body>
</html>
"""

JSON_LD_HTML = """
<html>
<head>
<title>Pasta | Blog</title>
<script type="application/ld+json">{ this is not valid json </script>
<script type="application/ld+json">
{"@context": "https://schema.org", "@graph": [
  {"@type": "WebPage", "name": "Pasta page"},
  {"@type": ["Recipe"], "name": "Garlic Pasta &amp; Herbs",
   "description": "Quick weeknight pasta.",
   "image": [{"@type": "ImageObject", "url": "https://example.com/pasta.jpg"}],
   "recipeYield": ["4", "4 servings"],
   "prepTime": "PT10M",
   "cookTime": "PT0M",
   "recipeIngredient": ["8 oz spaghetti", "4 cloves garlic, minced", "Salt to taste"],
   "recipeInstructions": [
     {"@type": "HowToSection", "name": "Cook", "itemListElement": [
       {"@type": "HowToStep", "text": "Boil the pasta."},
       {"@type": "HowToStep", "text": "Saute the garlic."}
     ]},
     {"@type": "HowToStep", "text": "Toss together."}
   ],
   "recipeCategory": "Dinner",
   "recipeCuisine": ["Italian"],
   "keywords": "pasta, garlic"}
]}
</script>
</head>
<body><h1>Something else entirely</h1></body>
</html>
"""

GENERIC_HTML = """
<html>
<head><title>Grandma's Soup | Family Recipes</title></head>
<body>
<div class="recipe-card">
  <h2>Grandma's Soup</h2>
  <div class="recipe-meta">Serves 4 | Prep time: 15 minutes | Cook time: 1 hour</div>
  <ul class="ingredients-list">
    <li>2 carrots, diced</li>
    <li>1 (32 oz) carton broth</li>
    <li style="display: none">hidden thing</li>
    <li>Salt and pepper to taste</li>
  </ul>
  <ol class="instructions">
    <li>1. Chop the vegetables.</li>
    <li>2) Simmer everything for an hour.</li>
  </ol>
</div>
</body>
</html>
"""

EMPTY_HTML = "<html><body><p>Nothing to see here.</p></body></html>"


@pytest.fixture
def wprm_html():
    return WPRM_HTML


@pytest.fixture
def data_attribute_html():
    return DATA_ATTRIBUTE_HTML


@pytest.fixture
def data_attribute_headings_html():
    return DATA_ATTRIBUTE_HEADINGS_HTML


@pytest.fixture
def json_ld_html():
    return JSON_LD_HTML


@pytest.fixture
def generic_html():
    return GENERIC_HTML


@pytest.fixture
def empty_html():
    return EMPTY_HTML
