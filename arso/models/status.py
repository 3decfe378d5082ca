"""Status payload models."""
from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Simple status message."""

    status: str = Field(..., alias="Status")

    class Config:
        populate_by_name = True
