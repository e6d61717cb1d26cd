"""User preference vectors."""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .tags import TagKey

logger = logging.getLogger(__name__)

# Tag key -> weight. Missing keys count as weight 0 when scoring.
Prefs = Mapping[str, float]

GUEST_WEIGHT = 0.5

DEFAULT_GUEST_PREFS: Prefs = MappingProxyType({tag.value: GUEST_WEIGHT for tag in TagKey})


def default_guest_prefs() -> dict[str, float]:
    """Return a mutable copy of the evenly weighted guest preferences."""
    return dict(DEFAULT_GUEST_PREFS)


def _weight(description: str):
    return Field(default=GUEST_WEIGHT, ge=0.0, le=1.0, description=description)


class PreferenceProfile(BaseModel):
    """Validated preference vector covering every recognized tag.

    Unspecified tags take the guest weight; unknown tag keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    free_palestine: float = _weight("Support for Palestinian rights")
    justice_for_ukraine: float = _weight("Support for Ukraine's sovereignty")
    women_workplace: float = _weight("Gender equality in the workplace")
    child_labour: float = _weight("Opposition to child labour")
    lgbtq: float = _weight("LGBTQ+ rights and equality")
    animal_cruelty: float = _weight("Animal welfare")
    environmentally_friendly: float = _weight("Environmental sustainability")
    ethical_sourcing: float = _weight("Ethical supply chain")
    data_privacy: float = _weight("Protection of user data")

    def as_prefs(self) -> dict[str, float]:
        return {tag.value: getattr(self, tag.value) for tag in TagKey}


def validate_prefs(raw: Any) -> dict[str, float]:
    """Validate raw preferences, returning a total mapping over all tags.

    Raises pydantic.ValidationError for unknown tags or out-of-range weights.
    """
    return PreferenceProfile.model_validate(raw).as_prefs()


def is_valid_prefs(raw: Any) -> bool:
    try:
        validate_prefs(raw)
        return True
    except ValidationError:
        return False


def resolve_prefs(stored: Optional[Any]) -> dict[str, float]:
    """Pick the preferences to score with: stored user prefs or guest defaults."""
    if not stored:
        return default_guest_prefs()

    try:
        return validate_prefs(stored)
    except ValidationError as e:
        logger.warning(f"Stored preferences are invalid, using guest mode: {e.error_count()} errors")
        return default_guest_prefs()
