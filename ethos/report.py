"""Assemble company reports and ranked search results."""

import logging
from typing import Iterable, Optional

from ethos.catalog import Catalog
from ethos.config import Settings, settings as default_settings
from ethos.models import (
    Company,
    CompanyFact,
    CompanyReport,
    FactBreakdown,
    Prefs,
    ScoredCompany,
    Source,
    tag_name,
)
from ethos.score import (
    Scorer,
    get_top_weighted_tags,
    recommend_alternatives,
    should_show_alternatives,
)

logger = logging.getLogger(__name__)


def top_sources(sources: Iterable[Source], limit: int = 5) -> list[Source]:
    """Most reliable sources first, then most recent; missing values sort last."""

    def sort_key(source: Source):
        reliability = source.reliability if source.reliability is not None else -1.0
        published = source.published_at.timestamp() if source.published_at else float("-inf")
        return (-reliability, -published)

    return sorted(sources, key=sort_key)[:limit]


def _fact_breakdown(fact: CompanyFact) -> FactBreakdown:
    return FactBreakdown(
        tag_key=fact.tag_key.value,
        tag_name=tag_name(fact.tag_key),
        stance=fact.stance,
        confidence=fact.confidence,
        notes=fact.notes,
        source_urls=fact.source_urls,
    )


def highlight_facts(company: Company, prefs: Prefs, limit: int = 3) -> list[FactBreakdown]:
    """Facts about the user's highest weighted tags, most confident first."""
    top_tags = set(get_top_weighted_tags(prefs, limit))
    facts = [f for f in company.facts if f.tag_key.value in top_tags]
    facts.sort(key=lambda f: f.confidence, reverse=True)
    return [_fact_breakdown(f) for f in facts]


def build_company_report(
    company: Company,
    catalog: Catalog,
    prefs: Prefs,
    config: Optional[Settings] = None,
) -> CompanyReport:
    """Score a company and gather its explanation and alternatives."""
    config = config or default_settings
    scorer = Scorer(prefs, clamp=config.clamp_inputs)

    facts = company.core_facts()
    score = scorer.score(facts)
    logger.info(f"Company {company.name}: score {score:.3f}")

    alternatives = recommend_alternatives(
        company,
        catalog.by_category(company.category),
        prefs,
        limit=config.max_alternatives,
        clamp=config.clamp_inputs,
        target_score=score,
    )

    return CompanyReport(
        id=company.id,
        name=company.name,
        category=company.category,
        website=company.website,
        summary=company.summary,
        logo_url=company.logo_url,
        score=score,
        tag_scores=scorer.breakdown(facts),
        breakdown=[_fact_breakdown(f) for f in company.facts],
        sources=top_sources(company.sources, config.max_sources),
        top_tags=get_top_weighted_tags(prefs, config.top_tags_limit),
        highlighted_facts=highlight_facts(company, prefs, config.top_tags_limit),
        show_alternatives=should_show_alternatives(score, config.alternatives_threshold),
        alternatives=alternatives,
    )


def search_and_rank(
    catalog: Catalog,
    query: str,
    prefs: Prefs,
    config: Optional[Settings] = None,
) -> list[ScoredCompany]:
    """Search the catalog and rank matches by score under one prefs vector."""
    config = config or default_settings
    matches = catalog.search(query, limit=config.search_limit)
    scorer = Scorer(prefs, clamp=config.clamp_inputs)
    return scorer.score_and_rank(matches)
