# app/models/ingredient.py
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

IngredientCategory = Literal["ingredient", "product", "preference"]
IngredientStatus = Literal["available", "missing", "optional"]


class TaggedIngredient(BaseModel):
    text: str
    category: IngredientCategory = "ingredient"
    status: IngredientStatus = "available"

    model_config = {"frozen": True}


class IngredientTagRequest(BaseModel):
    raw: str = Field(min_length=1)


class IngredientBatchRequest(BaseModel):
    items: List[str] = Field(default_factory=list)


class IngredientBatchResponse(BaseModel):
    items: List[TaggedIngredient]
