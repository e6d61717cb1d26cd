"""Better-aligned alternative recommendations."""

import logging
from typing import Iterable, Optional

from ethos.models import Company, Prefs, ScoredAlternative
from .scorer import company_score

logger = logging.getLogger(__name__)

DEFAULT_MAX_ALTERNATIVES = 5


def select_candidates(company: Company, companies: Iterable[Company]) -> list[Company]:
    """Companies in the same category as ``company``, excluding itself."""
    return [
        candidate for candidate in companies
        if candidate.category == company.category and candidate.id != company.id
    ]


def rank_alternatives(
    target_score: float,
    candidates: Iterable[Company],
    prefs: Prefs,
    limit: int = DEFAULT_MAX_ALTERNATIVES,
    clamp: Optional[bool] = None,
) -> list[ScoredAlternative]:
    """Rank candidates that score strictly better than the target.

    ``prefs`` must be the same preference vector the target was scored
    with. Results are sorted by score descending, equal scores keep their
    candidate order, and at most ``limit`` are returned. An empty list means
    no candidate beats the target.
    """
    if limit <= 0:
        return []

    better = []
    for candidate in candidates:
        score = company_score(prefs, candidate.core_facts(), clamp=clamp)
        if score > target_score:
            better.append(ScoredAlternative(
                id=candidate.id,
                name=candidate.name,
                category=candidate.category,
                summary=candidate.summary,
                logo_url=candidate.logo_url,
                score=score,
            ))

    better.sort(key=lambda alt: alt.score, reverse=True)

    logger.debug(f"{len(better)} alternatives beat score {target_score:.3f}")
    return better[:limit]


def recommend_alternatives(
    company: Company,
    companies: Iterable[Company],
    prefs: Prefs,
    limit: int = DEFAULT_MAX_ALTERNATIVES,
    clamp: Optional[bool] = None,
    target_score: Optional[float] = None,
) -> list[ScoredAlternative]:
    """Score ``company`` and rank its same-category alternatives under one prefs vector."""
    if target_score is None:
        target_score = company_score(prefs, company.core_facts(), clamp=clamp)
    candidates = select_candidates(company, companies)
    return rank_alternatives(target_score, candidates, prefs, limit=limit, clamp=clamp)
