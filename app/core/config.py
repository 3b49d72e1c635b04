import os

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RECIPE_SUGGESTION_COUNT = int(os.getenv("RECIPE_SUGGESTION_COUNT", "3"))

RECIPE_PROMPT = """You are a creative cooking expert specializing in practical and delicious recipes with excellent flavor harmony. Given the following ingredients: {ingredient_list}, suggest {count} diverse and realistic recipes that prioritize delicious, well-balanced flavor combinations and proven culinary logic.

Each recipe must be truly appetizing, achievable for home cooks, and based on realistic ingredient synergy.

Use this exact format for each recipe (with all sections and the --- separators):

---
Recipe: [Recipe Name]
Description: A short summary of the dish and its key flavor pairings.
Total Time: [Prep Time + Cook Time]
Serves: [Number of servings]
Difficulty: [Easy/Medium/Hard]

Ingredients:
• [amount] [ingredient] - [AVAILABLE]
• [amount] [ingredient] - [MISSING]
• [amount] [ingredient] - [OPTIONAL] (briefly say why or suggest a substitute)

Instructions:
1. [Clear, step-by-step instruction with timing if needed]
2. [Continue steps...]

Tips: [Cooking tips, substitutions, or storage advice]

Unused Ingredients:
• [ingredient] – [brief reason it wasn't a good fit for this dish]

Sources:
1. [URL of a reference recipe, if any]
---

RULES:
- Always mark ingredients as [AVAILABLE], [MISSING], or [OPTIONAL].
- Number every instruction step.
- Use standard US measurements (with metric in parentheses when helpful).
- Do NOT include text outside the recipe blocks.
"""
