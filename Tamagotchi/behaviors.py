"""
Mood-dependent responses to care actions.

Each behavior is a pure mapping from (needs, action) to new needs. The
variants are a closed set, so they are enum members dispatching on a
delta table rather than a class hierarchy.
"""

from enum import Enum

from constants import BEHAVIOR_DELTAS
from errors import InvalidArgumentError
from models import Mood, Needs, PetAction


class Behavior(Enum):
    PLAYFUL = 'playful'
    GRUMPY = 'grumpy'
    DEPRESSIVE = 'depressive'

    def delta(self, action: PetAction) -> int:
        if not isinstance(action, PetAction):
            raise InvalidArgumentError(action)
        return BEHAVIOR_DELTAS[self.value][action.value]

    def apply(self, needs: Needs, action: PetAction) -> Needs:
        """Return the needs after `action`, clamped to [0, 100]. `needs` is not modified."""
        amount = self.delta(action)
        return needs.adjusted(action.need, amount)


_MOOD_BEHAVIORS = {
    Mood.HAPPY: Behavior.PLAYFUL,
    Mood.GRUMPY: Behavior.GRUMPY,
    Mood.DEPRESSIVE: Behavior.DEPRESSIVE,
}


def behavior_for(mood: Mood) -> Behavior:
    return _MOOD_BEHAVIORS[mood]
