"""
Review request and response models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ReviewRequest(BaseModel):
    """Code submitted for review."""

    code: Optional[str] = Field(None, description="Source text, any language")


class ReviewResponse(BaseModel):
    """Markdown review report."""

    review: str = Field(..., description="Report in markdown")
