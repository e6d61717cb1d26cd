"""Data models for ethical alignment scoring."""

from .tags import TagKey, TAG_NAMES, tag_name
from .facts import Stance, Fact, CompanyFact, Source
from .prefs import (
    Prefs,
    PreferenceProfile,
    DEFAULT_GUEST_PREFS,
    default_guest_prefs,
    validate_prefs,
    is_valid_prefs,
    resolve_prefs,
)
from .company import (
    Category,
    Company,
    ScoredCompany,
    ScoredAlternative,
    FactBreakdown,
    CompanyReport,
)

__all__ = [
    "TagKey",
    "TAG_NAMES",
    "tag_name",
    "Stance",
    "Fact",
    "CompanyFact",
    "Source",
    "Prefs",
    "PreferenceProfile",
    "DEFAULT_GUEST_PREFS",
    "default_guest_prefs",
    "validate_prefs",
    "is_valid_prefs",
    "resolve_prefs",
    "Category",
    "Company",
    "ScoredCompany",
    "ScoredAlternative",
    "FactBreakdown",
    "CompanyReport",
]
