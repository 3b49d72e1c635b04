# app/routers/ingredients.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from app.models.ingredient import (
    IngredientBatchRequest,
    IngredientBatchResponse,
    IngredientTagRequest,
    TaggedIngredient,
)
from app.services.ingredient_tagger import add_ingredient, tag_ingredient

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.post("/tag", response_model=TaggedIngredient)
def tag(req: IngredientTagRequest) -> TaggedIngredient:
    raw = req.raw.strip()
    if not raw:
        raise HTTPException(status_code=422, detail="Ingredient must not be blank")
    return tag_ingredient(raw)


@router.post("/tag/batch", response_model=IngredientBatchResponse)
def tag_batch(req: IngredientBatchRequest) -> IngredientBatchResponse:
    items: List[TaggedIngredient] = []
    for raw in req.items:
        add_ingredient(items, raw)
    return IngredientBatchResponse(items=items)
