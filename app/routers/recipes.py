# app/routers/recipes.py
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.models.recipe import (
    RecipeParseRequest,
    RecipeParseResponse,
    RecipePromptRequest,
    RecipePromptResponse,
)
from app.services.recipe_prompt import build_recipe_prompt
from app.services.recipe_text_parser import parse_recipes

log = logging.getLogger("recipe_bridge.recipes")

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/parse", response_model=RecipeParseResponse)
def recipes_parse(req: RecipeParseRequest) -> RecipeParseResponse:
    recipes = parse_recipes(req.text, req.ingredients)
    if not recipes:
        log.info("no recipes parsed from response text")
    return RecipeParseResponse(count=len(recipes), recipes=recipes)


@router.post("/prompt", response_model=RecipePromptResponse)
def recipes_prompt(req: RecipePromptRequest) -> RecipePromptResponse:
    try:
        prompt = build_recipe_prompt(req.ingredients)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RecipePromptResponse(prompt=prompt)
