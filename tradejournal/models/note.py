"""Note data model."""

from datetime import date as date_type

from pydantic import BaseModel, Field


class Note(BaseModel):
    """Represents a free-text daily journal note."""

    id: str = Field(default="", description="Opaque store identifier")
    date: date_type = Field(..., description="Day the note was written for")
    content: str = Field(default="", description="Note text")

    model_config = {"frozen": True}

    def preview(self, limit: int = 100) -> str:
        """Return the first ``limit`` characters, with an ellipsis if cut."""
        if len(self.content) > limit:
            return self.content[:limit] + "..."
        return self.content
