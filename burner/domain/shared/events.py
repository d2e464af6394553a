"""Base domain event infrastructure.

Domain events are immutable records of something that happened to a
burner project (it was created from a template, or imported from an
existing folder). Use cases return them on success so the CLI can report
what was done without re-deriving paths and names.
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and a UTC timestamp of when it occurred.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}
