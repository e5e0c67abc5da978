"""Recipe scraping endpoint.

Routes
------
GET /recipe/ingredients?url=<absolute-URL>

Every outcome is an HTTP 200; failures are reported in the ``error`` field.
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from backend.api.responses import PrettyJSONResponse
from backend.scraper import scrape_recipe

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class RecipeStepSchema(BaseModel):
    step_number: int
    instruction: str


class RecipeResponseSchema(BaseModel):
    title: str = ""
    ingredients: List[str] = []
    steps: List[RecipeStepSchema] = []
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get(
    "/ingredients",
    response_model=RecipeResponseSchema,
    response_model_exclude_none=True,
    response_class=PrettyJSONResponse,
)
def get_recipe_ingredients(url: Optional[str] = None) -> dict[str, Any]:
    """Scrape the recipe at *url*; runs in the worker thread pool."""
    return scrape_recipe(url).to_dict()
