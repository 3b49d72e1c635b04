# app/services/recipe_prompt.py
from __future__ import annotations

from typing import Optional, Sequence

from app.core import config


def build_recipe_prompt(ingredients: Sequence[str], count: Optional[int] = None) -> str:
    items = [i.strip() for i in ingredients or [] if i and i.strip()]
    if not items:
        raise ValueError("Please provide at least one ingredient")

    return config.RECIPE_PROMPT.format(
        ingredient_list=", ".join(items),
        count=count or config.RECIPE_SUGGESTION_COUNT,
    )
