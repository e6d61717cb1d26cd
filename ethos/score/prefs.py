"""Preference helpers used around scoring."""

from ethos.models import Prefs

DEFAULT_ALTERNATIVES_THRESHOLD = -0.2


def get_top_weighted_tags(prefs: Prefs, limit: int = 3) -> list[str]:
    """Return the ``limit`` highest weighted tag keys.

    Ties are broken alphabetically by tag key so the selection does not
    depend on mapping order.
    """
    if limit <= 0:
        return []

    ranked = sorted(prefs.items(), key=lambda item: (-item[1], item[0]))
    return [tag_key for tag_key, _ in ranked[:limit]]


def should_show_alternatives(
    score: float,
    threshold: float = DEFAULT_ALTERNATIVES_THRESHOLD,
) -> bool:
    """Whether a score is low enough to actively suggest alternatives."""
    return score < threshold
