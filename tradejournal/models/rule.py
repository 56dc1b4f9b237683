"""Rule data model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Rule(BaseModel):
    """Represents one entry of the trader's rulebook.

    The title is the key trades reference in their ``followed_rules``.
    """

    id: str = Field(default="", description="Opaque store identifier")
    title: str = Field(..., min_length=1, description="Rule title")
    description: str = Field(default="", description="Rule description")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }
