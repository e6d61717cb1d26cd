"""Scoring engine for ethical alignment."""

from .evidence import stance_to_evidence
from .scorer import Scorer, company_score, tag_breakdown
from .prefs import get_top_weighted_tags, should_show_alternatives
from .alternatives import rank_alternatives, recommend_alternatives, select_candidates

__all__ = [
    "stance_to_evidence",
    "Scorer",
    "company_score",
    "tag_breakdown",
    "get_top_weighted_tags",
    "should_show_alternatives",
    "rank_alternatives",
    "recommend_alternatives",
    "select_candidates",
]
