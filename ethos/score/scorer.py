"""Preference-weighted company scoring."""

import logging
import math
from enum import Enum
from typing import Iterable, Optional

from ethos.config import settings
from ethos.models import Company, Fact, Prefs, ScoredCompany
from .evidence import stance_to_evidence

logger = logging.getLogger(__name__)


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def _resolve_clamp(clamp: Optional[bool]) -> bool:
    return settings.clamp_inputs if clamp is None else clamp


def _tag_key(fact: Fact) -> str:
    tag_key = fact.tag_key
    return tag_key.value if isinstance(tag_key, Enum) else tag_key


def _contributions(
    prefs: Prefs,
    facts: Iterable[Fact],
    clamp: bool,
) -> list[tuple[str, float, float]]:
    """(tag_key, weighted evidence, weight) for every fact on a positively weighted tag."""
    contributions = []

    for fact in facts:
        tag_key = _tag_key(fact)
        weight = prefs.get(tag_key) or 0.0
        confidence = fact.confidence
        if clamp:
            weight = _clamp_unit(weight)
            confidence = _clamp_unit(confidence)

        # Zero-weight tags are left out of both numerator and denominator
        if weight <= 0:
            continue

        evidence = stance_to_evidence(fact.stance)
        contributions.append((tag_key, evidence * confidence * weight, weight))

    return contributions


def company_score(prefs: Prefs, facts: Iterable[Fact], clamp: Optional[bool] = None) -> float:
    """Score a company's facts against a preference vector.

    Returns the weighted average of per-fact evidence (stance sign times
    confidence), weighted by the preference for each fact's tag. The result
    lies in [-1, 1]; 0 means no opinion, either because no preferences were
    given or because no fact touches a weighted tag.

    Weights accumulate once per contributing fact, so a tag backed by several
    facts carries proportionally more influence.

    With ``clamp`` enabled, confidence and weight are clamped to [0, 1] first
    so malformed input cannot push the score outside its range; NaN counts
    as 0. ``clamp=None`` follows ``settings.clamp_inputs``.
    """
    if not prefs:
        return 0.0

    weighted_sum = 0.0
    total_weight = 0.0

    for _, weighted_evidence, weight in _contributions(prefs, facts, _resolve_clamp(clamp)):
        weighted_sum += weighted_evidence
        total_weight += weight

    if total_weight <= 0:
        return 0.0

    return weighted_sum / total_weight


def tag_breakdown(prefs: Prefs, facts: Iterable[Fact], clamp: Optional[bool] = None) -> dict[str, float]:
    """Split a company score into signed per-tag shares.

    Each tag's weighted evidence is divided by the same total weight the score
    uses, so the values sum to ``company_score(prefs, facts)``.
    """
    if not prefs:
        return {}

    contributions = _contributions(prefs, facts, _resolve_clamp(clamp))
    total_weight = sum(weight for _, _, weight in contributions)
    if total_weight <= 0:
        return {}

    breakdown: dict[str, float] = {}
    for tag_key, weighted_evidence, _ in contributions:
        breakdown[tag_key] = breakdown.get(tag_key, 0.0) + weighted_evidence

    return {tag_key: value / total_weight for tag_key, value in breakdown.items()}


class Scorer:
    """Score and rank companies under a single preference vector."""

    def __init__(self, prefs: Prefs, clamp: Optional[bool] = None):
        self.prefs = prefs
        self.clamp = _resolve_clamp(clamp)

    def score(self, facts: Iterable[Fact]) -> float:
        return company_score(self.prefs, facts, clamp=self.clamp)

    def breakdown(self, facts: Iterable[Fact]) -> dict[str, float]:
        return tag_breakdown(self.prefs, facts, clamp=self.clamp)

    def score_company(self, company: Company) -> ScoredCompany:
        score = self.score(company.core_facts())
        logger.debug(f"{company.name}: score {score:.3f} from {len(company.facts)} facts")
        return ScoredCompany(
            id=company.id,
            name=company.name,
            category=company.category,
            summary=company.summary,
            score=score,
        )

    def score_and_rank(self, companies: Iterable[Company]) -> list[ScoredCompany]:
        """Score all companies and return them best-aligned first."""
        scored = [self.score_company(company) for company in companies]

        # Stable on ties: equal scores keep their input order
        scored.sort(key=lambda c: c.score, reverse=True)

        for i, company in enumerate(scored):
            company.rank = i + 1

        return scored
