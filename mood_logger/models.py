"""
Domain models for the Mood Logger.

This module defines the single entity persisted by the application.
"""

import time

from pydantic import BaseModel, Field

from .validation import MOOD_RANGE


def _now() -> int:
    return int(time.time())


class MoodEntry(BaseModel):
    """Represents one logged mood rating."""

    id: int | None = Field(None, description="Row id, assigned on insert")
    timestamp: int = Field(
        default_factory=_now, description="Unix timestamp of the entry"
    )
    value: float = Field(
        ..., ge=MOOD_RANGE[0], le=MOOD_RANGE[1], description="The mood rating"
    )
    message: str | None = Field(None, description="Optional free-text note")
