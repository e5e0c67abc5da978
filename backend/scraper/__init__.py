"""Scraper package — recipe fetch, extraction and response composition."""

from backend.scraper.composer import scrape_recipe
from backend.scraper.document import ParsedDocument, parse_document
from backend.scraper.extractor import extract_recipe
from backend.scraper.fetcher import fetch_url
from backend.scraper.models import (
    ExtractionResult,
    FetchResult,
    RecipeResponse,
    RecipeStep,
)

__all__ = [
    "scrape_recipe",
    "fetch_url",
    "parse_document",
    "extract_recipe",
    "ParsedDocument",
    "FetchResult",
    "ExtractionResult",
    "RecipeResponse",
    "RecipeStep",
]
