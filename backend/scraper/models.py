"""Data models for the recipe scraping pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class FetchResult:
    """The raw HTTP response for a single URL fetch.

    ``body`` is already decompressed when the server declared a content
    encoding; ``content_encoding`` records what was declared.  ``charset`` is
    the character set named by the ``Content-Type`` header, if any.
    """

    url: str
    status_code: int
    body: bytes
    content_encoding: Optional[str] = None
    charset: Optional[str] = None


@dataclass
class RecipeStep:
    """One numbered preparation step."""

    number: int
    instruction: str


@dataclass
class ExtractionResult:
    """Title, ingredients and steps pulled out of one parsed document."""

    title: str = ""
    ingredients: List[str] = field(default_factory=list)
    steps: List[RecipeStep] = field(default_factory=list)


@dataclass
class RecipeResponse:
    """The outcome of one scrape, ready to be rendered on the wire.

    Either ``error`` is set and the recipe fields keep their zero values, or
    ``error`` is ``None`` and the recipe fields carry the extraction.
    """

    title: str = ""
    ingredients: List[str] = field(default_factory=list)
    steps: List[RecipeStep] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_extraction(cls, result: ExtractionResult) -> "RecipeResponse":
        return cls(
            title=result.title,
            ingredients=list(result.ingredients),
            steps=list(result.steps),
        )

    @classmethod
    def failure(cls, message: str) -> "RecipeResponse":
        return cls(error=message)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation; ``error`` is omitted when unset."""
        data: dict[str, Any] = {
            "title": self.title,
            "ingredients": list(self.ingredients),
            "steps": [
                {"step_number": s.number, "instruction": s.instruction}
                for s in self.steps
            ],
        }
        if self.error is not None:
            data["error"] = self.error
        return data
