"""Finding and InsightItem models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

Tone = Literal["good", "warning", "info"]


class Finding(BaseModel):
    """The conclusion of one pattern detector.

    ``surfaced`` is False when the detector's sample threshold was not met
    or no pattern was found; the message then says so instead of giving an
    opinion.
    """

    detector: str = Field(..., description="Detector name")
    kind: Tone = Field(..., description="Tone of the finding")
    message: str = Field(..., description="Human-readable conclusion")
    evidence: int = Field(default=0, ge=0, description="Number of supporting trades")
    surfaced: bool = Field(default=True, description="Whether a pattern was flagged")
    subject: Optional[str] = Field(default=None, description="Strategy, pattern or session")
    value: Optional[float] = Field(default=None, description="Supporting amount")

    model_config = {"frozen": True}


class InsightItem(BaseModel):
    """A presentation-ready insight."""

    section: str = Field(..., description="Panel the item belongs to")
    tone: Tone = Field(..., description="good, warning or info")
    title: str = Field(..., description="Short heading")
    body: str = Field(..., description="Plain-text body")

    model_config = {"frozen": True}
