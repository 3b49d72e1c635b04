from __future__ import annotations

import pytest

from app.services import recipe_text_parser as rtp

GARLIC_RICE = """Recipe: Garlic Chicken Rice
Description: A quick one-pan dinner.
Total Time: 35 minutes
Serves: 4
Difficulty: Easy

Ingredients:
• 1 lb chicken thighs - [AVAILABLE]
• 2 cloves garlic, minced
• 1 onion
• 1 tsp chili flakes - [OPTIONAL] (adds heat)
• 1 cup rice - [MISSING]

Instructions:
1. Season the chicken with salt.
2. It is **important** to sear the chicken until golden.
3. Be careful not to burn the garlic.
4. Add rice and water, then simmer.

Tips: Rest the rice for 5 minutes
before fluffing.

Unused Ingredients:
• Chocolate – does not pair with garlic
• Tofu - texture clash
• Kale

Sources:
1. https://example.com/garlic-rice
2. https://example.com/chicken
"""

PANCAKES = """Recipe: Pancakes
Description: Fluffy breakfast stack.
Total Time: 20 min
Serves: 2
Difficulty: Easy
Ingredients:
• 1 cup flour - [AVAILABLE]
• 2 large eggs - [AVAILABLE]
Instructions:
1. Whisk everything together.
2. Cook on a hot griddle.
"""

USER = ["chicken", "garlic"]


def _blob(*segments: str) -> str:
    return "---\n" + "\n---\n".join(segments) + "\n---"


def test_concrete_single_recipe():
    raw = (
        "---\nRecipe: Test\nDescription: D\nTotal Time: 10 min\nServes: 2\n"
        "Difficulty: Easy\nIngredients:\n• 1 cup rice - [AVAILABLE]\nInstructions:\n1. Cook rice.\n---"
    )

    recipes = rtp.parse_recipes(raw, [])

    assert len(recipes) == 1
    r = recipes[0]
    assert r.recipe_name == "Test"
    assert r.description == "D"
    assert r.time == "10 min"
    assert r.serves == "2"
    assert r.difficulty == "Easy"
    assert [(i.text, i.status) for i in r.ingredients] == [("1 cup rice", "available")]
    assert [(s.text, s.is_crucial) for s in r.instructions] == [("Cook rice.", False)]
    assert r.tips is None
    assert r.unused_ingredients is None
    assert r.sources is None


def test_two_recipes_in_source_order():
    recipes = rtp.parse_recipes(_blob(GARLIC_RICE, PANCAKES), USER)

    assert [r.recipe_name for r in recipes] == ["Garlic Chicken Rice", "Pancakes"]
    assert all(r.instructions for r in recipes)


def test_reparse_is_identical():
    raw = _blob(GARLIC_RICE, PANCAKES)

    first = [r.model_dump() for r in rtp.parse_recipes(raw, USER)]
    second = [r.model_dump() for r in rtp.parse_recipes(raw, USER)]

    assert first == second


def test_segment_without_name_is_dropped():
    nameless = PANCAKES.replace("Recipe: Pancakes\n", "")

    recipes = rtp.parse_recipes(_blob(GARLIC_RICE, nameless, PANCAKES), USER)

    assert [r.recipe_name for r in recipes] == ["Garlic Chicken Rice", "Pancakes"]


def test_segment_without_instructions_is_dropped():
    no_steps = "Recipe: Soup\nDescription: Warm.\nIngredients:\n• 1 leek\nInstructions:\nJust wing it."

    assert rtp.parse_recipes(_blob(no_steps), []) == []


def test_short_segment_is_dropped():
    assert rtp.parse_recipe_segment("Recipe: X\n1. Do it.", []) is None


@pytest.mark.parametrize("raw", ["", "   ", "---", "no recipes here", "---\n---\n---"])
def test_degenerate_input_yields_nothing(raw: str):
    assert rtp.parse_recipes(raw, USER) == []


def test_ingredient_statuses():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    assert [(i.text, i.status) for i in recipe.ingredients] == [
        ("1 lb chicken thighs", "available"),
        ("2 cloves garlic, minced", "available"),
        ("1 onion", "missing"),
        ("1 tsp chili flakes (adds heat)", "optional"),
        ("1 cup rice", "missing"),
    ]


def test_missing_tag_beats_fuzzy_match():
    segment = "Recipe: R\nIngredients:\n• 2 cloves garlic - [MISSING]\nInstructions:\n1. Go."

    recipe = rtp.parse_recipe_segment(segment, ["garlic"])

    assert recipe is not None
    assert recipe.ingredients[0].status == "missing"


def test_optional_tag_beats_missing_tag():
    segment = "Recipe: R\nIngredients:\n• 1 lime - [MISSING] [OPTIONAL]\nInstructions:\n1. Go."

    recipe = rtp.parse_recipe_segment(segment, ["lime"])

    assert recipe.ingredients[0].status == "optional"
    assert recipe.ingredients[0].text == "1 lime"


def test_missing_tag_beats_available_tag():
    segment = "Recipe: R\nIngredients:\n• 1 lime - [AVAILABLE] [MISSING]\nInstructions:\n1. Go."

    recipe = rtp.parse_recipe_segment(segment, ["lime"])

    assert recipe.ingredients[0].status == "missing"
    assert recipe.ingredients[0].text == "1 lime"


@pytest.mark.parametrize("dash", ["–", "—"])
def test_unicode_dash_before_tag_is_stripped(dash: str):
    segment = f"Recipe: R\nIngredients:\n• 1 cup rice {dash} [AVAILABLE]\nInstructions:\n1. Go."

    recipe = rtp.parse_recipe_segment(segment, [])

    assert recipe.ingredients[0].text == "1 cup rice"
    assert recipe.ingredients[0].status == "available"


def test_fuzzy_match_is_bidirectional():
    segment = "Recipe: R\nIngredients:\n• 1 cup rice\n• 2 eggs\nInstructions:\n1. Go."

    recipe = rtp.parse_recipe_segment(segment, ["basmati rice", "egg"])

    assert [i.status for i in recipe.ingredients] == ["available", "available"]


def test_crucial_flags():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    assert [s.is_crucial for s in recipe.instructions] == [False, True, True, False]
    assert recipe.instructions[1].text == "It is important to sear the chicken until golden."


def test_instructions_stop_at_tips_and_skip_empty_steps():
    segment = "Recipe: R\nInstructions:\n1. Boil.\n2.\n3. Drain.\nTips: 1. Salt the water."

    recipe = rtp.parse_recipe_segment(segment, [])

    assert [s.text for s in recipe.instructions] == ["Boil.", "Drain."]
    assert recipe.tips == "1. Salt the water."


def test_tips_block_is_joined():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    assert recipe.tips == "Rest the rice for 5 minutes before fluffing."


def test_unused_ingredients():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    assert [(u.ingredient, u.reason) for u in recipe.unused_ingredients] == [
        ("Chocolate", "does not pair with garlic"),
        ("Tofu", "texture clash"),
        ("Kale", rtp.UNUSED_REASON_PLACEHOLDER),
    ]


def test_sources():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    assert recipe.sources == ["https://example.com/garlic-rice", "https://example.com/chicken"]


def test_emphasis_is_stripped_from_prose_and_bold_labels_still_match():
    segment = (
        "**Recipe:** Bold Stew\n**Difficulty:** Hard\nIngredients:\n• **2** carrots\n"
        "Instructions:\n1. **Simmer** for an hour."
    )

    recipe = rtp.parse_recipe_segment(segment, [])

    assert recipe.recipe_name == "Bold Stew"
    assert recipe.difficulty == "Hard"
    assert recipe.ingredients[0].text == "2 carrots"
    assert recipe.instructions[0].text == "Simmer for an hour."


def test_label_lines_keep_their_formatting():
    segment = "Recipe: **Chef's** Stew\nInstructions:\n1. Cook.\n2. Eat."

    recipe = rtp.parse_recipe_segment(segment, [])

    assert recipe.recipe_name == "**Chef's** Stew"


def test_tips_before_instructions_empties_the_steps():
    segment = "Recipe: R\nTips: none\nInstructions:\n1. Cook."

    assert rtp.parse_recipe_segment(segment, []) is None


def test_missing_labels_become_empty_strings():
    segment = "Recipe: Plain\nInstructions:\n1. Cook.\n2. Eat."

    recipe = rtp.parse_recipe_segment(segment, [])

    assert recipe.description == ""
    assert recipe.serves == ""
    assert recipe.ingredients == []


def test_hyphens_inside_lines_do_not_split_segments():
    segment = (
        "Recipe: Sun-dried Pasta\nIngredients:\n• 1 cup sun-dried tomatoes - [AVAILABLE]\n"
        "Instructions:\n1. Boil pasta --- al dente.\n2. Toss."
    )

    recipes = rtp.parse_recipes(segment, [])

    assert len(recipes) == 1
    assert recipes[0].ingredients[0].text == "1 cup sun-dried tomatoes"
    assert recipes[0].instructions[0].text == "Boil pasta --- al dente."


def test_crlf_input():
    raw = _blob(PANCAKES).replace("\n", "\r\n")

    recipes = rtp.parse_recipes(raw, [])

    assert [r.recipe_name for r in recipes] == ["Pancakes"]


def test_broken_segment_does_not_affect_neighbours(monkeypatch: pytest.MonkeyPatch):
    real = rtp.parse_recipe_segment

    def flaky(segment, user_ingredients):
        if "Pancakes" in segment:
            raise RuntimeError("boom")
        return real(segment, user_ingredients)

    monkeypatch.setattr(rtp, "parse_recipe_segment", flaky)

    recipes = rtp.parse_recipes(_blob(PANCAKES, GARLIC_RICE), USER)

    assert [r.recipe_name for r in recipes] == ["Garlic Chicken Rice"]


def test_serialized_field_names():
    recipe = rtp.parse_recipes(GARLIC_RICE, USER)[0]

    data = recipe.model_dump(by_alias=True)

    assert data["recipeName"] == "Garlic Chicken Rice"
    assert "isCrucial" in data["instructions"][0]
    assert data["unusedIngredients"][0]["ingredient"] == "Chocolate"
