from enum import Enum
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from constants import (
    LEVEL_MIN, LEVEL_MAX, CRITICAL_NEED, CRITICAL_NEED_PENALTY,
    HAPPY_THRESHOLD, GRUMPY_THRESHOLD,
)

if TYPE_CHECKING:
    from behaviors import Behavior


class Mood(Enum):
    """Coarse emotional state derived from health."""
    HAPPY = 'happy'
    GRUMPY = 'grumpy'
    DEPRESSIVE = 'depressive'


class PetAction(Enum):
    """The four care actions a player can perform."""
    FEED = 'feed'
    SHOWER = 'shower'
    SOCIALIZE = 'socialize'
    SLEEP = 'sleep'

    @property
    def need(self) -> str:
        """Name of the need this action restores."""
        return _ACTION_NEEDS[self]


_ACTION_NEEDS = {
    PetAction.FEED: 'hunger',
    PetAction.SHOWER: 'hygiene',
    PetAction.SOCIALIZE: 'social',
    PetAction.SLEEP: 'rest',
}

NEED_NAMES = ('hunger', 'hygiene', 'social', 'rest')


def clamp_level(value) -> int:
    return max(LEVEL_MIN, min(LEVEL_MAX, int(value)))


@dataclass(frozen=True)
class Needs:
    """The four needs. 100 = fully satisfied, 0 = neglected."""
    hunger: int
    hygiene: int
    social: int
    rest: int

    def as_tuple(self):
        return (self.hunger, self.hygiene, self.social, self.rest)

    def adjusted(self, need: str, amount: int) -> "Needs":
        """Return a copy with `need` shifted by `amount` and clamped."""
        return replace(self, **{need: clamp_level(getattr(self, need) + amount)})

    def decayed(self, amount: int) -> "Needs":
        return Needs(*(max(LEVEL_MIN, v - amount) for v in self.as_tuple()))

    @property
    def total(self) -> int:
        return sum(self.as_tuple())

    @property
    def critical_count(self) -> int:
        return sum(1 for v in self.as_tuple() if v < CRITICAL_NEED)

    @classmethod
    def filled(cls, value: int) -> "Needs":
        value = clamp_level(value)
        return cls(value, value, value, value)


def compute_health(needs: Needs) -> int:
    """Health is the floored average of the needs minus 10 per critical need, floored at 0."""
    penalty = needs.critical_count * CRITICAL_NEED_PENALTY
    return max(LEVEL_MIN, needs.total // len(NEED_NAMES) - penalty)


def mood_for_health(health: int) -> Mood:
    if health > HAPPY_THRESHOLD:
        return Mood.HAPPY
    if health > GRUMPY_THRESHOLD:
        return Mood.GRUMPY
    return Mood.DEPRESSIVE


@dataclass(frozen=True)
class PetStatus:
    """Read-only snapshot of everything a display needs."""
    hunger: int
    hygiene: int
    social: int
    rest: int
    health: int
    mood: Mood
    behavior: "Behavior"
    game_over: bool
    survival_seconds: int
