"""Pydantic models shared by the FastAPI endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    prompt: Optional[str] = Field(default=None, description="Text prompt for image generation")


class GenerationResult(BaseModel):
    """Envelope returned by ``POST /api/generate-image``.

    ``imageUrl`` is only set on success; failures carry ``error`` and/or
    ``message`` instead. Unset fields are dropped from the JSON body.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, image_url: str, message: Optional[str] = None) -> "GenerationResult":
        return cls(success=True, image_url=image_url, message=message)

    @classmethod
    def failed(cls, error: str, message: Optional[str] = None) -> "GenerationResult":
        return cls(success=False, error=error, message=message)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    status: str = Field(..., description="Always 'ok' while the process is serving")
    message: str
    environment: str
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")
