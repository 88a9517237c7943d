"""
Shared data models for the EchoVault mood service.

This module defines the value records passed between the lexicon, the
classifier, the history store and the outer layers (relay, API, CLI).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EmotionDefinition(BaseModel):
    """A recognizable emotion with its trigger keywords and display color."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique emotion identifier")
    keywords: tuple[str, ...] = Field(
        ..., description="Lowercase trigger words, matched as substrings"
    )
    color: str = Field(..., description="Hex display color for the emotion")


class MoodData(BaseModel):
    """A single mood classification."""

    model_config = ConfigDict(frozen=True)

    emotion: str = Field(..., description="Name of the matched emotion")
    intensity: float = Field(..., ge=0.0, le=1.0, description="Strength in [0, 1]")
    timestamp: datetime = Field(..., description="When the mood was classified")
    keywords: tuple[str, ...] = Field(
        ..., min_length=1, description="Keywords that matched, never empty"
    )
    color: str = Field(..., description="Color copied from the lexicon entry")


class TimelinePoint(BaseModel):
    """One point of the mood timeline chart."""

    label: str = Field(..., description="Short date label, e.g. 'Oct 16'")
    intensity: float
    emotion: str
    color: str


class HistorySummary(BaseModel):
    """Aggregate statistics over a mood history."""

    total: int = 0
    counts: dict[str, int] = Field(default_factory=dict)
    average_intensity: float = 0.0
    dominant_emotion: str | None = None
