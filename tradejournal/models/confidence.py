"""ConfidenceEntry data model."""

from datetime import date as date_type

from pydantic import BaseModel, Field


class ConfidenceEntry(BaseModel):
    """Represents the trader's self-rated confidence for one calendar day."""

    id: str = Field(default="", description="Opaque store identifier")
    date: date_type = Field(..., description="Day the rating applies to")
    level: int = Field(..., ge=1, le=10, description="Confidence level (1-10)")

    model_config = {"frozen": True}
