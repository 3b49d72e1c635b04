# app/models/recipe.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.ingredient import IngredientStatus


class RecipeIngredient(BaseModel):
    text: str
    status: IngredientStatus = "missing"

    model_config = {"frozen": True}


class RecipeInstruction(BaseModel):
    text: str
    is_crucial: bool = Field(default=False, alias="isCrucial")

    model_config = {"frozen": True, "populate_by_name": True}


class UnusedIngredient(BaseModel):
    ingredient: str
    reason: str

    model_config = {"frozen": True}


class ParsedRecipe(BaseModel):
    recipe_name: str = Field(alias="recipeName")
    description: str = ""
    time: str = ""
    serves: str = ""
    difficulty: str = ""
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    instructions: List[RecipeInstruction] = Field(default_factory=list)
    tips: Optional[str] = None
    unused_ingredients: Optional[List[UnusedIngredient]] = Field(default=None, alias="unusedIngredients")
    sources: Optional[List[str]] = None

    model_config = {"frozen": True, "populate_by_name": True}


class RecipeParseRequest(BaseModel):
    text: str
    ingredients: List[str] = Field(default_factory=list)


class RecipeParseResponse(BaseModel):
    count: int
    recipes: List[ParsedRecipe]


class RecipePromptRequest(BaseModel):
    ingredients: List[str]


class RecipePromptResponse(BaseModel):
    prompt: str
