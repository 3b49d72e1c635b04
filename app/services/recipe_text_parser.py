# app/services/recipe_text_parser.py
from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence

from app.core.text import (
    has_numeric_prefix,
    normalize_ingredient_name,
    strip_emphasis,
    strip_numeric_prefix,
    strip_trailing_dashes,
)
from app.models.ingredient import IngredientStatus
from app.models.recipe import ParsedRecipe, RecipeIngredient, RecipeInstruction, UnusedIngredient

log = logging.getLogger("recipe_bridge.parser")

SEGMENT_DELIMITER_RE = re.compile(r"^[ \t]*---[ \t]*$", flags=re.MULTILINE)

FIELD_LABELS = {
    "recipe_name": "Recipe:",
    "description": "Description:",
    "time": "Total Time:",
    "serves": "Serves:",
    "difficulty": "Difficulty:",
}

INGREDIENTS = "Ingredients:"
INSTRUCTIONS = "Instructions:"
TIPS = "Tips:"
UNUSED = "Unused Ingredients:"
SOURCES = "Sources:"

SECTION_MARKERS = (INGREDIENTS, INSTRUCTIONS, TIPS, UNUSED, SOURCES)
LABELS = tuple(FIELD_LABELS.values()) + SECTION_MARKERS

BULLET = "•"
CRUCIAL_KEYWORDS = ("important", "crucial", "careful", "must", "essential")
UNUSED_REASON_PLACEHOLDER = "Not a good fit for this recipe"

_STATUS_TAG_RE = re.compile(r"\s*[-–—]*\s*\[(AVAILABLE|MISSING|OPTIONAL)\]", flags=re.IGNORECASE)


def _clean_lines(segment: str) -> List[str]:
    lines = []
    for line in segment.strip().splitlines():
        line = line.strip()
        if not line.startswith(LABELS):
            line = strip_emphasis(line).strip()
        lines.append(line)
    return lines


def _first_index(lines: Sequence[str], prefix: str) -> int:
    for i, line in enumerate(lines):
        if line.startswith(prefix):
            return i
    return -1


def _get_field(lines: Sequence[str], prefix: str) -> str:
    i = _first_index(lines, prefix)
    if i < 0:
        return ""
    return lines[i][len(prefix):].strip()


def _block_end(indices: Dict[str, int], start: int, markers: Sequence[str], default: int) -> int:
    # first present marker after `start`, else `default`
    found = [indices[m] for m in markers if indices[m] > start]
    return min(found) if found else default


def _matches_user_ingredient(text: str, user_ingredients: Sequence[str]) -> bool:
    name = normalize_ingredient_name(text)
    if not name:
        return False
    for u in user_ingredients:
        u = (u or "").strip().lower()
        if u and (name in u or u in name):
            return True
    return False


def _ingredient_status(line: str, text: str, user_ingredients: Sequence[str]) -> IngredientStatus:
    tags = {m.upper() for m in _STATUS_TAG_RE.findall(line)}

    if "OPTIONAL" in tags:
        return "optional"

    status: IngredientStatus = "missing"
    if "AVAILABLE" in tags or _matches_user_ingredient(text, user_ingredients):
        status = "available"

    if "MISSING" in tags:
        status = "missing"
    return status


def _parse_ingredients(lines: Sequence[str], user_ingredients: Sequence[str]) -> List[RecipeIngredient]:
    out: List[RecipeIngredient] = []
    for line in lines:
        if not line.startswith(BULLET):
            continue
        raw = line[len(BULLET):].strip()
        text = strip_trailing_dashes(_STATUS_TAG_RE.sub("", raw))
        out.append(RecipeIngredient(text=text, status=_ingredient_status(raw, text, user_ingredients)))
    return out


def _parse_instructions(lines: Sequence[str]) -> List[RecipeInstruction]:
    out: List[RecipeInstruction] = []
    for line in lines:
        if not has_numeric_prefix(line):
            continue
        text = strip_numeric_prefix(line)
        if not text:
            continue
        lowered = line.lower()
        out.append(RecipeInstruction(text=text, is_crucial=any(k in lowered for k in CRUCIAL_KEYWORDS)))
    return out


def _parse_tips(lines: Sequence[str]) -> Optional[str]:
    parts = [lines[0][len(TIPS):].strip()] + list(lines[1:])
    tips = " ".join(p for p in parts if p)
    return tips or None


def _split_unused(entry: str) -> Optional[UnusedIngredient]:
    sep = "–" if "–" in entry else "-"
    name, _, reason = entry.partition(sep)
    name = name.strip()
    if not name:
        return None
    return UnusedIngredient(ingredient=name, reason=reason.strip() or UNUSED_REASON_PLACEHOLDER)


def _parse_unused(lines: Sequence[str]) -> List[UnusedIngredient]:
    out: List[UnusedIngredient] = []
    for line in lines:
        if not line.startswith(BULLET):
            continue
        item = _split_unused(line[len(BULLET):].strip())
        if item:
            out.append(item)
    return out


def _parse_sources(lines: Sequence[str]) -> List[str]:
    out: List[str] = []
    inline = lines[0][len(SOURCES):].strip()
    for line in ([inline] if inline else []) + list(lines[1:]):
        src = strip_numeric_prefix(line)
        if src:
            out.append(src)
    return out


def parse_recipe_segment(segment: str, user_ingredients: Sequence[str]) -> Optional[ParsedRecipe]:
    """
    Parse one `---` delimited block into a ParsedRecipe.

    Returns None for blocks that are too short, have no `Recipe:` name,
    or end up with no numbered instruction steps.
    """
    lines = _clean_lines(segment)
    if len(lines) < 3:
        return None

    fields = {name: _get_field(lines, label) for name, label in FIELD_LABELS.items()}
    if not fields["recipe_name"]:
        return None

    idx = {m: _first_index(lines, m) for m in SECTION_MARKERS}
    end = len(lines)

    ingredients: List[RecipeIngredient] = []
    if idx[INGREDIENTS] >= 0:
        stop = idx[INSTRUCTIONS] if idx[INSTRUCTIONS] >= 0 else end
        ingredients = _parse_ingredients(lines[idx[INGREDIENTS] + 1:stop], user_ingredients)

    instructions: List[RecipeInstruction] = []
    if idx[INSTRUCTIONS] >= 0:
        # first-index semantics: a terminator listed before Instructions: empties the block
        present = [idx[m] for m in (TIPS, UNUSED, SOURCES) if idx[m] >= 0]
        stop = min(present) if present else end
        instructions = _parse_instructions(lines[idx[INSTRUCTIONS] + 1:stop])

    if not instructions:
        return None

    tips = None
    if idx[TIPS] >= 0:
        stop = _block_end(idx, idx[TIPS], SECTION_MARKERS, end)
        tips = _parse_tips(lines[idx[TIPS]:stop])

    unused = None
    if idx[UNUSED] >= 0:
        stop = _block_end(idx, idx[UNUSED], SECTION_MARKERS, end)
        unused = _parse_unused(lines[idx[UNUSED] + 1:stop])

    sources = None
    if idx[SOURCES] >= 0:
        sources = _parse_sources(lines[idx[SOURCES]:])

    return ParsedRecipe(
        recipe_name=fields["recipe_name"],
        description=fields["description"],
        time=fields["time"],
        serves=fields["serves"],
        difficulty=fields["difficulty"],
        ingredients=ingredients,
        instructions=instructions,
        tips=tips,
        unused_ingredients=unused,
        sources=sources,
    )


def split_segments(raw_text: str) -> List[str]:
    text = (raw_text or "").replace("\r\n", "\n")
    return SEGMENT_DELIMITER_RE.split(text)


def parse_recipes(raw_text: str, user_ingredients: Sequence[str] = ()) -> List[ParsedRecipe]:
    segments = split_segments(raw_text)

    recipes: List[ParsedRecipe] = []
    for n, segment in enumerate(segments):
        try:
            recipe = parse_recipe_segment(segment, user_ingredients)
        except Exception:
            log.warning("recipe segment %d could not be parsed", n, exc_info=True)
            continue
        if recipe is not None:
            recipes.append(recipe)

    log.debug("parsed recipes", extra={"segments": len(segments), "recipes": len(recipes)})
    return recipes
