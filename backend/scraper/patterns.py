"""Selector tables used by the extractors.

Order matters: earlier entries are more publisher-specific and take
precedence.  Ingredients union every table entry; steps stop at the first
entry that yields anything.

The WP Recipe Maker group wrapper
(``.wprm-recipe-ingredients .wprm-recipe-ingredient-group``) is deliberately
not an ingredient selector: it matches a whole group, whose joined text would
be added as one ingredient line.  ``.wprm-recipe-ingredient`` appears once;
a repeated entry could never add anything the first one had not.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------
TITLE_SELECTORS: Tuple[str, ...] = (
    "h1",
    "article.recipe h1",
    "[itemtype='http://schema.org/Recipe'] h1",
    "[itemtype='https://schema.org/Recipe'] h1",
)

# Last-resort source, only this one gets suffix stripping.
TITLE_TAG_SELECTOR = "title"

TITLE_SUFFIXES: Tuple[str, ...] = (
    " Recipe |",
    " | Food Network Kitchen",
    " | Food Network",
    " | Allrecipes",
    " - Love and Lemons",
)

# ---------------------------------------------------------------------------
# Ingredients
# ---------------------------------------------------------------------------
INGREDIENT_SELECTORS: Tuple[str, ...] = (
    # WP Recipe Maker / Tasty Recipes plugins (no group wrapper, see above)
    ".wprm-recipe-ingredient",
    ".wprm-recipe-ingredients-container .wprm-recipe-ingredient",
    ".wprm-recipe-ingredient-group .wprm-recipe-ingredient",
    ".wprm-recipe-ingredients-container li",
    ".wprm-recipe-ingredients li",
    ".tasty-recipes-ingredients li",
    # Dotdash Meredith (Allrecipes, Simply Recipes, ...)
    ".mntl-structured-ingredients__list-item",
    ".ingredients-item-name",
    ".recipe-ingredients__item-name",
    ".ingredients-item",
    "[data-ingredient-name]",
    # Generic lists
    ".recipe-ingredients li",
    ".ingredients li",
    ".recipe__ingredient",
    ".ingredient-name",
    ".ingredient",
    # Food Network
    ".o-Ingredients__a-Ingredient",
    ".recipe-ingredients-item",
    ".ingredient-item",
    ".ingredients-list li",
    # Microdata
    "[itemprop='recipeIngredient']",
    ".Recipe__ingredients li",
    ".Recipe__ingredientItems li",
    ".Ingredients__ingredient",
    "[data-ingredient]",
    ".recipe-ingredient",
    ".ingredient-list > li",
    "[data-testid='ingredient-item']",
    ".ingredient-text",
)

# Checkbox glyph some plugins render as literal text before each ingredient.
INGREDIENT_BULLET = "▢"

# UI labels that show up inside ingredient markup.  Stored case-folded.
EXCLUDED_TEXTS: frozenset[str] = frozenset(
    text.casefold()
    for text in (
        "Deselect All",
        "Select All",
        "Ingredients",
        "For the",
        "Special equipment",
        "Yield",
        "Nutritional Information",
        "Preparation",
    )
)

# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------
STEP_SELECTORS: Tuple[str, ...] = (
    # WP Recipe Maker / Tasty Recipes plugins
    ".wprm-recipe-instructions-container .wprm-recipe-instruction-text",
    ".wprm-recipe-instruction-group .wprm-recipe-instruction-text",
    ".wprm-recipe-instructions-container li",
    ".wprm-recipe-instructions li",
    ".tasty-recipes-instructions li",
    # Dotdash Meredith
    ".recipe__steps-content p",
    ".mntl-sc-block-html",
    ".recipe-instructions__step",
    ".instructions-section p",
    # Generic lists
    ".recipe-instructions li",
    ".recipe-directions__list li",
    ".recipe__instructions li",
    ".wprm-recipe-instruction",
    ".recipe-method li",
    ".instructions li",
    "[itemprop='recipeInstructions'] li",
    ".Recipe__instructions li",
    ".recipe-steps li",
    ".preparation-steps li",
    "[data-testid='instruction-step']",
    ".instruction-step",
)

FIELD_SELECTORS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "title": TITLE_SELECTORS,
    "ingredients": INGREDIENT_SELECTORS,
    "steps": STEP_SELECTORS,
})


# ---------------------------------------------------------------------------
# Publisher overrides
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SiteOverride:
    """Extra selectors re-run when the request URL contains ``domain``."""

    domain: str
    ingredient_selectors: Tuple[str, ...] = ()
    step_selectors: Tuple[str, ...] = ()

    def matches(self, url: str) -> bool:
        return self.domain in url


SITE_OVERRIDES: Tuple[SiteOverride, ...] = (
    SiteOverride(
        domain="allrecipes.com",
        ingredient_selectors=(
            ".mntl-structured-ingredients__list-item",
            ".ingredients-item-name",
            ".ingredient-list li",
            "[data-ingredient-name]",
            ".recipe-ingredients__list-item",
        ),
        step_selectors=(
            ".recipe__steps-content .mntl-sc-block-group--LI",
            ".recipe-instructions__list-item",
            ".instructions-section p",
            ".recipe-directions__item",
            ".recipe__instructions-step",
        ),
    ),
)
