"""Error taxonomy for the scraping pipeline.

Every terminal failure of a request is a :class:`RecipeError`.  The class
carries a fixed, user-facing ``message``; the constructor argument is an
internal detail that is logged but never sent back to the caller.
"""

from __future__ import annotations


class RecipeError(Exception):
    """Base class for all terminal pipeline failures."""

    message = "Unable to process the recipe webpage"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class MissingParameter(RecipeError):
    message = "URL parameter is required"


class FetchError(RecipeError):
    message = "Failed to fetch webpage"


class DecodeError(RecipeError):
    message = "Failed to read compressed webpage"


class ParseError(RecipeError):
    message = "Failed to parse webpage"


class BlockedOrEmpty(RecipeError):
    message = (
        "Unable to properly load the recipe page. "
        "The website might be blocking automated access."
    )


class NoIngredientsFound(RecipeError):
    message = (
        "No ingredients were found on this webpage. Please ensure you're using "
        "a URL that leads directly to a recipe page with a list of ingredients "
        "and cooking instructions."
    )


class Forbidden(RecipeError):
    message = "This website requires a subscription or login to access recipes"


class UpstreamError(RecipeError):
    message = "Unable to access the recipe webpage"
