"""Scrape pipeline: fetch → parse → sanity check → extract → validate.

:func:`scrape_recipe` is the single entry point used by the API and the CLI.
It never raises for per-request failures; every :class:`RecipeError` is
turned into a :class:`RecipeResponse` carrying only the error message.
"""

from __future__ import annotations

import logging
from typing import Optional

from backend.config import settings
from backend.scraper.document import parse_document
from backend.scraper.errors import (
    BlockedOrEmpty,
    Forbidden,
    MissingParameter,
    NoIngredientsFound,
    RecipeError,
    UpstreamError,
)
from backend.scraper.extractor import extract_recipe
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import ExtractionResult, RecipeResponse

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 500


def _validate(result: ExtractionResult, status_code: int) -> None:
    """Raise the terminal error for *result*, if any.

    The empty-ingredient check runs before the status code is consulted, so
    a 403 page with no recognisable ingredients reports
    :class:`NoIngredientsFound`, not :class:`Forbidden`.
    """
    if not result.ingredients:
        raise NoIngredientsFound("extraction yielded no ingredients")
    if status_code == 403:
        raise Forbidden("upstream returned 403")
    if status_code != 200:
        raise UpstreamError(f"upstream returned {status_code}")


def _run(url: Optional[str]) -> ExtractionResult:
    if not url:
        raise MissingParameter("no url given")

    fetched = fetch_url(url)
    doc = parse_document(fetched.body, fetched.charset)

    length = len(doc)
    logger.debug("Document length for %s: %d", url, length)
    logger.debug("Document preview: %r", fetched.body[:_PREVIEW_CHARS])
    if length < settings.min_document_length:
        raise BlockedOrEmpty(f"document is only {length} characters long")

    result = extract_recipe(url, doc)
    _validate(result, fetched.status_code)
    return result


def scrape_recipe(url: Optional[str]) -> RecipeResponse:
    """Scrape *url* and return the recipe or the reason it could not be read."""
    try:
        result = _run(url)
    except RecipeError as exc:
        logger.warning(
            "%s for URL %s: %s", type(exc).__name__, url or "<missing>", exc.detail
        )
        return RecipeResponse.failure(exc.message)
    return RecipeResponse.from_extraction(result)
