"""Fact and source models."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .tags import TagKey


class Stance(str, Enum):
    """Qualitative relationship between a company and a cause."""

    SUPPORTS = "supports"
    OPPOSES = "opposes"
    ALLEGED_VIOLATION = "alleged_violation"
    NEUTRAL = "neutral"


class Fact(BaseModel):
    """A single scored claim linking one company to one cause tag.

    This is the shape the scorer consumes. Values are trusted as given;
    range validation happens in CompanyFact when records are loaded.
    """

    model_config = ConfigDict(frozen=True)

    tag_key: str = Field(description="Cause tag this fact is about")
    stance: Stance = Field(description="Company's stance toward the cause")
    confidence: float = Field(description="Curator confidence in the claim, expected 0-1")


class CompanyFact(BaseModel):
    """Curated fact record as stored in the catalog."""

    tag_key: TagKey
    stance: Stance
    confidence: float = Field(ge=0.0, le=1.0, description="Curator confidence in the claim")
    notes: Optional[str] = None
    source_urls: list[str] = Field(default_factory=list)

    def to_fact(self) -> Fact:
        return Fact(tag_key=self.tag_key.value, stance=self.stance, confidence=self.confidence)


class Source(BaseModel):
    """A published source backing one or more facts."""

    url: str
    title: Optional[str] = None
    publisher: Optional[str] = None
    reliability: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    published_at: Optional[datetime] = None
    claim_excerpt: Optional[str] = None
