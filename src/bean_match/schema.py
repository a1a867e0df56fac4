"""Data models for bean-match."""

from pydantic import BaseModel, ConfigDict, Field


class MatchResult(BaseModel):
    """Best catalog entry found for a piece of free text."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    english_name: str
    confidence: int = Field(ge=0, le=100)


class CoffeeDataInput(BaseModel):
    """Raw coffee fields, typed by a user or extracted from a package image."""

    country: str | None = None
    region: str | None = None
    farm: str | None = None
    variety: str | None = None
    process: str | None = None
    roast_level: str | None = None


class CoffeeDataSuggestions(BaseModel):
    """Per-field matches for a CoffeeDataInput."""

    country: MatchResult | None = None
    region: MatchResult | None = None
    farm: MatchResult | None = None
    variety: MatchResult | None = None
    process: MatchResult | None = None
    roast_level: MatchResult | None = None
