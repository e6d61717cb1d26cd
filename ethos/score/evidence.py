"""Evidence mapping from stances to signed values."""

from typing import Union

from ethos.models import Stance

# Alleged violations count exactly as much against a company as confirmed
# opposition. Confidence is applied separately by the scorer.
EVIDENCE_BY_STANCE: dict[str, float] = {
    Stance.SUPPORTS.value: 1.0,
    Stance.OPPOSES.value: -1.0,
    Stance.ALLEGED_VIOLATION.value: -1.0,
    Stance.NEUTRAL.value: 0.0,
}


def stance_to_evidence(stance: Union[Stance, str]) -> float:
    """Convert a stance to its evidence sign: +1, -1 or 0.

    Unrecognized stances map to 0.
    """
    if isinstance(stance, Stance):
        stance = stance.value
    if not isinstance(stance, str):
        return 0.0
    return EVIDENCE_BY_STANCE.get(stance, 0.0)
