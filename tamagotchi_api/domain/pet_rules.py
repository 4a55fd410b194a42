"""Pet lifecycle and interaction rules that are independent from HTTP and DB.

Rule of thumb:
- OK: thresholds, stat arithmetic, the death predicate.
- Not OK: touching DB sessions, FastAPI, datetime.now(), etc.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Tuple

NEGLECT_WINDOW = timedelta(days=3)
HUNGER_CEILING = 50
HAPPINESS_FLOOR = -50

DEAD_PET_MESSAGE = "This pet is dead!"

FEEDINGS = "feedings"
PLAYTIMES = "playtimes"
SCOLDINGS = "scoldings"


@dataclass(frozen=True)
class Interaction:
    """One kind of interaction and the stat deltas it applies."""

    kind: str
    hunger_delta: int
    happiness_delta: int


INTERACTIONS: Dict[str, Interaction] = {
    FEEDINGS: Interaction(FEEDINGS, hunger_delta=-5, happiness_delta=3),
    PLAYTIMES: Interaction(PLAYTIMES, hunger_delta=3, happiness_delta=5),
    SCOLDINGS: Interaction(SCOLDINGS, hunger_delta=0, happiness_delta=-5),
}


def is_dead(
    last_interacted_with_date: datetime,
    hunger_level: int,
    happiness_level: int,
    now: datetime,
) -> bool:
    """Return True if the pet was neglected too long or a stat crossed its threshold.

    All three bounds are exclusive: exactly 3 days, hunger 50 and happiness -50
    are still alive.
    """
    if now - last_interacted_with_date > NEGLECT_WINDOW:
        return True
    return hunger_level > HUNGER_CEILING or happiness_level < HAPPINESS_FLOOR


def apply_interaction(
    hunger_level: int, happiness_level: int, interaction: Interaction
) -> Tuple[int, int]:
    """Return (hunger, happiness) after the interaction. Values are not clamped."""
    return (
        hunger_level + interaction.hunger_delta,
        happiness_level + interaction.happiness_delta,
    )


def get_interaction(kind: str) -> Interaction:
    """Look up the rule for an interaction kind."""
    if kind not in INTERACTIONS:
        raise ValueError(f"Unknown interaction kind: {kind}")
    return INTERACTIONS[kind]
