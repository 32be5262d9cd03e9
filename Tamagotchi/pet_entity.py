import logging
from dataclasses import replace

from behaviors import behavior_for
from constants import BASELINE_NEED, BASELINE_HEALTH, NEED_DECAY_PER_TICK, LEVEL_MIN
from errors import InvalidStateError
from models import Needs, PetAction, PetStatus, clamp_level, compute_health, mood_for_health
from survival_clock import SurvivalClock

logger = logging.getLogger(__name__)


class PetEngine:
    """
    Owns the pet's levels, mood and lifecycle.

    The host calls tick() on its own cadence and perform_action() on user
    input; both run synchronously. Levels are ints clamped to [0, 100] on
    every write.
    """

    def __init__(self, clock: SurvivalClock = None):
        self.clock = clock or SurvivalClock()
        self.mood = None
        self.reset()

    # --- Levels ---
    @property
    def needs(self) -> Needs:
        return self._needs

    def _set_need(self, name, value):
        self._needs = replace(self._needs, **{name: clamp_level(value)})

    @property
    def hunger(self) -> int:
        return self._needs.hunger

    @hunger.setter
    def hunger(self, value):
        self._set_need('hunger', value)

    @property
    def hygiene(self) -> int:
        return self._needs.hygiene

    @hygiene.setter
    def hygiene(self, value):
        self._set_need('hygiene', value)

    @property
    def social(self) -> int:
        return self._needs.social

    @social.setter
    def social(self, value):
        self._set_need('social', value)

    @property
    def rest(self) -> int:
        return self._needs.rest

    @rest.setter
    def rest(self, value):
        self._set_need('rest', value)

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value):
        # Mood is reclassified on the next tick, not here.
        self._health = clamp_level(value)

    # --- Lifecycle ---
    def perform_action(self, action: PetAction):
        """Apply a care action through the active behavior. Touches needs only."""
        if self.game_over:
            logger.warning("Rejected %s: game is over", getattr(action, 'name', action))
            raise InvalidStateError()

        self._needs = self.behavior.apply(self._needs, action)
        logger.debug("%s as %s -> %s", action.name, self.behavior.name, self._needs)

    def tick(self):
        """Advance the simulation by one step."""
        # 1. Passive decay
        self._needs = self._needs.decayed(NEED_DECAY_PER_TICK)

        # 2. Health from needs
        self._health = compute_health(self._needs)

        # 3. A pet with no health has nothing left
        if self._health == LEVEL_MIN:
            self._needs = Needs.filled(LEVEL_MIN)

        # 4. Mood and behavior
        self._classify_mood()

        # 5. Game over (clock is stopped exactly once)
        if self._health == LEVEL_MIN and not self.game_over:
            self.game_over = True
            self.clock.stop()
            logger.info("Game over after %d seconds", self.survival_seconds())

        logger.debug("tick: %s health=%d", self._needs, self._health)

    def reset(self):
        self._needs = Needs.filled(BASELINE_NEED)
        self._health = BASELINE_HEALTH
        self.game_over = False

        self.clock.reset()
        self.clock.start()

        self._classify_mood()
        logger.info("Pet reset: needs=%d health=%d mood=%s", BASELINE_NEED, self._health, self.mood.name)

    def _classify_mood(self):
        new_mood = mood_for_health(self._health)
        if self.mood is not None and new_mood != self.mood:
            logger.info("Pet mood changing from %s to %s", self.mood.name, new_mood.name)
        self.mood = new_mood
        self.behavior = behavior_for(new_mood)

    # --- Queries ---
    def survival_seconds(self) -> int:
        return self.clock.elapsed_seconds()

    def status(self) -> PetStatus:
        return PetStatus(
            hunger=self.hunger,
            hygiene=self.hygiene,
            social=self.social,
            rest=self.rest,
            health=self.health,
            mood=self.mood,
            behavior=self.behavior,
            game_over=self.game_over,
            survival_seconds=self.survival_seconds(),
        )
