"""Recipe extraction: turns a :class:`ParsedDocument` into an
:class:`ExtractionResult`.

Ingredients and steps deliberately use different strategies.  Ingredients
are the union of every selector's matches, because sites often spread them
over several co-existing structures.  Steps come from the first selector
that yields anything, because later selectors tend to pick up prose.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Set

from backend.scraper.document import ParsedDocument, node_text
from backend.scraper.models import ExtractionResult, RecipeStep
from backend.scraper.patterns import (
    EXCLUDED_TEXTS,
    INGREDIENT_BULLET,
    INGREDIENT_SELECTORS,
    SITE_OVERRIDES,
    STEP_SELECTORS,
    TITLE_SELECTORS,
    TITLE_SUFFIXES,
    TITLE_TAG_SELECTOR,
    SiteOverride,
)

logger = logging.getLogger(__name__)

# Residual numbering left after "Step" is removed: "1.", "2)", "5:"
_STEP_NUMBERING = re.compile(r"^[\d.:)\s]+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _strip_title_suffixes(title: str) -> str:
    for suffix in TITLE_SUFFIXES:
        idx = title.find(suffix)
        if idx != -1:
            title = title[:idx].strip()
    return title


def _clean_ingredient(text: str) -> Optional[str]:
    """Return the cleaned ingredient, or ``None`` when it should be dropped."""
    text = text.strip().removeprefix(INGREDIENT_BULLET).strip()
    if not text or text.casefold() in EXCLUDED_TEXTS:
        return None
    return text


def _clean_step(text: str) -> str:
    text = text.strip().removeprefix("Step").removeprefix(".").strip()
    return _STEP_NUMBERING.sub("", text)


def _collect_ingredients(
    doc: ParsedDocument,
    selectors: Iterable[str],
    ingredients: List[str],
    seen: Set[str],
) -> None:
    for selector in selectors:
        matches = doc.select(selector)
        logger.debug("Ingredient selector %r: %d matches", selector, len(matches))
        for node in matches:
            ingredient = _clean_ingredient(node_text(node))
            if ingredient is not None and ingredient not in seen:
                seen.add(ingredient)
                ingredients.append(ingredient)


def _collect_steps(
    doc: ParsedDocument,
    selector: str,
    steps: List[RecipeStep],
    seen: Set[str],
) -> None:
    matches = doc.select(selector)
    logger.debug("Step selector %r: %d matches", selector, len(matches))
    for node in matches:
        instruction = _clean_step(node_text(node))
        if instruction and instruction not in seen:
            seen.add(instruction)
            steps.append(RecipeStep(number=len(steps) + 1, instruction=instruction))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_title(doc: ParsedDocument) -> str:
    """Return the recipe title, or an empty string when none is found.

    Headings are tried first; the ``<title>`` tag is the last resort and is
    the only source that gets publisher suffixes removed.
    """
    for selector in TITLE_SELECTORS:
        title = doc.first_text(selector)
        if title:
            return title
    return _strip_title_suffixes(doc.first_text(TITLE_TAG_SELECTOR))


def extract_ingredients(doc: ParsedDocument) -> List[str]:
    """Return every distinct ingredient line, in first-seen order."""
    ingredients: List[str] = []
    _collect_ingredients(doc, INGREDIENT_SELECTORS, ingredients, set())
    return ingredients


def extract_steps(doc: ParsedDocument) -> List[RecipeStep]:
    """Return the steps found by the first selector that yields any."""
    steps: List[RecipeStep] = []
    seen: Set[str] = set()
    for selector in STEP_SELECTORS:
        _collect_steps(doc, selector, steps, seen)
        if steps:
            break
    return steps


def apply_site_overrides(
    url: str,
    doc: ParsedDocument,
    result: ExtractionResult,
    overrides: Iterable[SiteOverride] = SITE_OVERRIDES,
) -> None:
    """Append publisher-specific finds to *result* in place.

    Only items not already present are added, at the end of each list.
    """
    for override in overrides:
        if not override.matches(url):
            continue
        logger.debug("Applying %s overrides to %s", override.domain, url)
        _collect_ingredients(
            doc, override.ingredient_selectors,
            result.ingredients, set(result.ingredients),
        )
        seen_steps = {s.instruction for s in result.steps}
        for selector in override.step_selectors:
            _collect_steps(doc, selector, result.steps, seen_steps)


def extract_recipe(url: str, doc: ParsedDocument) -> ExtractionResult:
    """Run every extractor over *doc* and merge in *url*'s site overrides."""
    result = ExtractionResult(
        title=extract_title(doc),
        ingredients=extract_ingredients(doc),
        steps=extract_steps(doc),
    )
    apply_site_overrides(url, doc, result)
    logger.info(
        "Found %d ingredients and %d steps for %s",
        len(result.ingredients), len(result.steps), url,
    )
    return result
