import re

UNIT_WORDS = (
    "cup", "tablespoon", "teaspoon", "tbsp", "tsp", "oz", "ounce", "pound", "lb",
    "g", "gram", "ml", "l", "liter", "stick", "packet", "pinch", "to taste",
    "large", "medium", "small",
)

_UNIT_RE = "|".join(re.escape(u) for u in sorted(UNIT_WORDS, key=len, reverse=True))

# "2 1/2 cups", "1.5 tbsp.", "3 large", "½ pinch", or a bare leading unit word
_QTY_UNIT_RE = re.compile(
    rf"^(?:[\d½¼¾⅓⅔⅛/.\-\s]+)?(?:(?:{_UNIT_RE})(?:es|s)?\b\.?\s*)?",
    flags=re.IGNORECASE,
)

_TRAILING_DASHES_RE = re.compile(r"[\s\-–—]*[-–—]+\s*$")
_NUMERIC_PREFIX_RE = re.compile(r"^\d+\.\s*")


def strip_trailing_dashes(s: str) -> str:
    return _TRAILING_DASHES_RE.sub("", (s or "").strip()).strip()


def collapse_whitespace(s: str) -> str:
    return " ".join((s or "").split())


def strip_emphasis(line: str) -> str:
    return (line or "").replace("**", "")


def has_numeric_prefix(line: str) -> bool:
    return bool(_NUMERIC_PREFIX_RE.match(line or ""))


def strip_numeric_prefix(line: str) -> str:
    return _NUMERIC_PREFIX_RE.sub("", (line or "").strip(), count=1).strip()


def normalize_ingredient_name(s: str) -> str:
    """
    Reduce a recipe ingredient line to the part worth comparing against
    what the user typed:
      "2 cups long-grain rice, rinsed" -> "long-grain rice"
      "3 large eggs"                   -> "eggs"
    """
    text = (s or "").strip().lower()
    text = text.split(",", 1)[0]
    text = _QTY_UNIT_RE.sub("", text, count=1)
    return collapse_whitespace(text)
