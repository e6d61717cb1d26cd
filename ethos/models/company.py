"""Company models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from .facts import CompanyFact, Fact, Source, Stance


class Category(str, Enum):
    """Product category used to group comparable companies."""

    RESTAURANT = "RESTAURANT"
    APPAREL = "APPAREL"
    GROCERY = "GROCERY"
    TECH = "TECH"
    OTHER = "OTHER"


class Company(BaseModel):
    """A company with its curated facts and sources."""

    id: str = Field(description="Stable company identifier")
    name: str
    category: Category = Category.OTHER
    website: Optional[str] = None
    summary: Optional[str] = None
    logo_url: Optional[str] = None

    facts: list[CompanyFact] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)

    def core_facts(self) -> list[Fact]:
        """Facts in the shape the scorer consumes."""
        return [fact.to_fact() for fact in self.facts]


class ScoredCompany(BaseModel):
    """A company with its alignment score under one preference vector."""

    id: str
    name: str
    category: Category
    summary: Optional[str] = None
    score: float = Field(ge=-1.0, le=1.0, description="Alignment score -1 to +1")
    rank: Optional[int] = None


class ScoredAlternative(BaseModel):
    """A better-aligned company in the same category."""

    id: str
    name: str
    category: Category
    summary: Optional[str] = None
    logo_url: Optional[str] = None
    score: float = Field(ge=-1.0, le=1.0)


class FactBreakdown(BaseModel):
    """One fact as presented in a company report."""

    tag_key: str
    tag_name: str
    stance: Stance
    confidence: float
    notes: Optional[str] = None
    source_urls: list[str] = Field(default_factory=list)


class CompanyReport(BaseModel):
    """Everything needed to present one company to one user."""

    id: str
    name: str
    category: Category
    website: Optional[str] = None
    summary: Optional[str] = None
    logo_url: Optional[str] = None

    score: float = Field(ge=-1.0, le=1.0)
    tag_scores: dict[str, float] = Field(
        default_factory=dict,
        description="Signed share of the score per tag",
    )
    breakdown: list[FactBreakdown] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)

    top_tags: list[str] = Field(
        default_factory=list,
        description="Highest weighted tags in the user's preferences",
    )
    highlighted_facts: list[FactBreakdown] = Field(
        default_factory=list,
        description="Facts about the user's top tags, for explanation",
    )

    show_alternatives: bool = False
    alternatives: list[ScoredAlternative] = Field(default_factory=list)
