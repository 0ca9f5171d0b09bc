"""Pydantic models shared by the FastAPI endpoints and the UI client."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    # Both fields are required; the route reports a missing value itself.
    city: Optional[str] = Field(default=None, description="City selected by the user")
    issue: Optional[str] = Field(default=None, description="Climate issue selected for that city")


class ImageResult(BaseModel):
    url: str = Field(..., description="data: URI with the generated image, or a static placeholder path")
    provider: str = Field(..., description="Label of the provider that produced the image")
    placeholder: bool = Field(
        default=False,
        description="True when the entry is static stub data rather than a real generation",
    )


class GenerateResponse(BaseModel):
    images: List[ImageResult]


class ErrorResponse(BaseModel):
    error: str


class CityListResponse(BaseModel):
    cities: Dict[str, List[str]] = Field(..., description="City name mapped to its ordered issue list")


class HealthResponse(BaseModel):
    status: str
    provider: str
    credentialConfigured: bool
