"""Health check endpoint.

Routes
------
GET /hello
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    message: str


@router.get("/hello", response_model=HealthResponse)
def hello() -> dict[str, str]:
    """Report that the API process is up."""
    return {"message": "Api is running"}
