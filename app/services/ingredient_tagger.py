# app/services/ingredient_tagger.py
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from app.core.text import collapse_whitespace, strip_trailing_dashes
from app.models.ingredient import IngredientCategory, IngredientStatus, TaggedIngredient

# Checked in order; a later match overrides an earlier one, so "optional" wins over "missing".
STATUS_MARKERS: Tuple[Tuple[IngredientStatus, Tuple[str, ...]], ...] = (
    ("missing", ("needs to be purchased", "needed", "missing")),
    ("optional", ("optional",)),
)

PRODUCT_KEYWORDS = ("stock", "msg")
PRODUCT_EXACT = ("water",)
PREFERENCE_KEYWORDS = ("style", "easy", "fast")


def _marker_pattern(phrase: str) -> re.Pattern[str]:
    # "- [missing]", "(missing)", "[missing]", "- missing", "missing"
    p = re.escape(phrase)
    return re.compile(rf"\s*[-–—]*\s*(?:\[\s*{p}\s*\]|\(\s*{p}\s*\)|{p})", flags=re.IGNORECASE)


_MARKER_PATTERNS = tuple(
    (status, tuple(_marker_pattern(p) for p in phrases), phrases)
    for status, phrases in STATUS_MARKERS
)


def _strip_markers(text: str, patterns: Tuple[re.Pattern[str], ...]) -> str:
    for pat in patterns:
        text = pat.sub(" ", text)
    return strip_trailing_dashes(collapse_whitespace(text))


def _status_and_text(raw: str) -> Tuple[IngredientStatus, str]:
    text = strip_trailing_dashes(raw)
    lowered = text.lower()

    status: IngredientStatus = "available"
    for marker_status, patterns, phrases in _MARKER_PATTERNS:
        if any(p in lowered for p in phrases):
            status = marker_status
            text = _strip_markers(text, patterns)

    return status, text


def categorize(raw: str) -> IngredientCategory:
    lowered = (raw or "").strip().lower()

    if any(k in lowered for k in PRODUCT_KEYWORDS) or lowered in PRODUCT_EXACT:
        return "product"
    if any(k in lowered for k in PREFERENCE_KEYWORDS):
        return "preference"
    return "ingredient"


def tag_ingredient(raw: str) -> TaggedIngredient:
    """
    Classify one user entry, e.g. "Chicken stock - [needed]" ->
    text="Chicken stock", category="product", status="missing".

    Never raises; blank input is the caller's job to reject.
    """
    status, text = _status_and_text(raw or "")
    return TaggedIngredient(text=text, category=categorize(raw), status=status)


def add_ingredient(items: List[TaggedIngredient], raw: str) -> Optional[TaggedIngredient]:
    raw = (raw or "").strip()
    if not raw:
        return None

    tagged = tag_ingredient(raw)
    items.append(tagged)
    return tagged


def remove_ingredient(items: List[TaggedIngredient], index: int) -> Optional[TaggedIngredient]:
    if index < 0 or index >= len(items):
        return None
    return items.pop(index)


def submission_texts(items: List[TaggedIngredient]) -> List[str]:
    return [i.text for i in items]
