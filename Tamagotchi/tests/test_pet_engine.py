import pytest

from behaviors import Behavior
from errors import InvalidArgumentError, InvalidStateError
from models import Mood, Needs, PetAction
from pet_entity import PetEngine
from survival_clock import SurvivalClock


@pytest.fixture
def pet(fake_time):
    return PetEngine(clock=SurvivalClock(time_source=fake_time))


def set_needs(pet, value):
    pet.hunger = pet.hygiene = pet.social = pet.rest = value


def test_initial_state(pet):
    assert pet.needs == Needs(100, 100, 100, 100)
    assert pet.health == 100
    assert pet.mood is Mood.HAPPY
    assert pet.behavior is Behavior.PLAYFUL
    assert pet.game_over is False
    assert pet.clock.running is True
    assert pet.survival_seconds() == 0


@pytest.mark.parametrize("attr", ["hunger", "hygiene", "social", "rest", "health"])
def test_setters_clamp(pet, attr):
    setattr(pet, attr, -5)
    assert getattr(pet, attr) == 0
    setattr(pet, attr, 130)
    assert getattr(pet, attr) == 100
    setattr(pet, attr, 42)
    assert getattr(pet, attr) == 42


def test_tick_decays_every_need_by_one(pet):
    pet.hunger, pet.hygiene, pet.social, pet.rest = 80, 60, 50, 1
    pet.tick()
    assert pet.needs == Needs(79, 59, 49, 0)
    pet.tick()
    assert pet.rest == 0


def test_tick_recomputes_health(pet):
    pet.hunger, pet.hygiene, pet.social, pet.rest = 20, 32, 41, 51
    pet.tick()
    # (19, 31, 40, 50): floor(140 / 4) - 10
    assert pet.health == 25
    assert pet.mood is Mood.DEPRESSIVE


@pytest.mark.parametrize("start, health, mood, behavior", [
    (72, 71, Mood.HAPPY, Behavior.PLAYFUL),
    (71, 70, Mood.GRUMPY, Behavior.GRUMPY),
    (32, 31, Mood.GRUMPY, Behavior.GRUMPY),
    (31, 30, Mood.DEPRESSIVE, Behavior.DEPRESSIVE),
])
def test_mood_and_behavior_boundaries(pet, start, health, mood, behavior):
    set_needs(pet, start)
    pet.tick()
    assert pet.health == health
    assert pet.mood is mood
    assert pet.behavior is behavior
    assert pet.game_over is False


def test_zero_health_forces_needs_to_zero(pet):
    # (19, 19, 80, 80) -> floor(198 / 4) - 20 = 29, still alive
    pet.hunger, pet.hygiene, pet.social, pet.rest = 20, 20, 81, 81
    pet.tick()
    assert pet.health == 29
    # every need critical: 19 - 40 floors at 0
    set_needs(pet, 20)
    pet.tick()
    assert pet.health == 0
    assert pet.needs == Needs(0, 0, 0, 0)
    assert pet.mood is Mood.DEPRESSIVE
    assert pet.behavior is Behavior.DEPRESSIVE
    assert pet.game_over is True


def test_game_over_stops_clock_once(pet, fake_time):
    fake_time.advance(5)
    set_needs(pet, 0)
    pet.tick()
    assert pet.game_over is True
    assert pet.clock.running is False
    stopped_at = pet.clock.stop_time
    assert pet.survival_seconds() == 5

    fake_time.advance(10)
    pet.tick()
    pet.tick()
    assert pet.game_over is True
    assert pet.clock.stop_time == stopped_at
    assert pet.survival_seconds() == 5


def test_action_after_game_over_rejected_without_mutation(pet):
    set_needs(pet, 0)
    pet.tick()
    before = pet.status()
    with pytest.raises(InvalidStateError, match="Reset to play again"):
        pet.perform_action(PetAction.FEED)
    assert pet.status() == before


def test_unknown_action_rejected_without_mutation(pet):
    pet.hunger = 40
    before = pet.status()
    with pytest.raises(InvalidArgumentError):
        pet.perform_action("feed")
    assert pet.status() == before


def test_action_uses_active_behavior(pet):
    set_needs(pet, 50)
    pet.tick()  # health 49 -> GRUMPY
    assert pet.behavior is Behavior.GRUMPY
    pet.perform_action(PetAction.SOCIALIZE)
    assert pet.social == 49 + 30
    pet.perform_action(PetAction.FEED)
    assert pet.hunger == 49 + 15


def test_action_does_not_touch_health_or_mood(pet):
    set_needs(pet, 40)
    pet.tick()
    health, mood = pet.health, pet.mood
    for _ in range(5):
        pet.perform_action(PetAction.SLEEP)
    assert pet.rest == 100
    assert pet.health == health
    assert pet.mood is mood


def test_reset_restores_baseline(pet, fake_time):
    fake_time.advance(42)
    set_needs(pet, 0)
    pet.tick()
    assert pet.game_over is True

    fake_time.advance(3)
    pet.reset()
    assert pet.needs == Needs(100, 100, 100, 100)
    assert pet.health == 100
    assert pet.mood is Mood.HAPPY
    assert pet.behavior is Behavior.PLAYFUL
    assert pet.game_over is False
    assert pet.clock.running is True
    assert pet.survival_seconds() == 0


def test_survival_time_non_decreasing_while_alive(pet, fake_time):
    readings = []
    for _ in range(6):
        fake_time.advance(0.5)
        pet.tick()
        readings.append(pet.survival_seconds())
    assert readings == sorted(readings)
    assert readings[-1] == 3


def test_levels_stay_in_range_over_long_run(pet):
    actions = list(PetAction)
    for i in range(400):
        pet.tick()
        if not pet.game_over and i % 3 == 0:
            pet.perform_action(actions[i % len(actions)])
        for value in (pet.hunger, pet.hygiene, pet.social, pet.rest, pet.health):
            assert 0 <= value <= 100
        assert pet.behavior.value == {
            Mood.HAPPY: 'playful', Mood.GRUMPY: 'grumpy', Mood.DEPRESSIVE: 'depressive'
        }[pet.mood]


def test_status_snapshot(pet, fake_time):
    fake_time.advance(7.9)
    status = pet.status()
    assert status.health == 100
    assert status.mood is Mood.HAPPY
    assert status.behavior is Behavior.PLAYFUL
    assert status.game_over is False
    assert status.survival_seconds == 7


def test_end_to_end(pet):
    pet.hunger = 40
    pet.perform_action(PetAction.FEED)
    assert pet.hunger == 70

    pet.hygiene = 90
    pet.perform_action(PetAction.SHOWER)
    assert pet.hygiene == 100

    set_needs(pet, 0)
    pet.tick()
    assert pet.game_over is True
    assert pet.needs == Needs(0, 0, 0, 0)

    pet.reset()
    assert pet.needs == Needs(100, 100, 100, 100)
    assert pet.health == 100
    assert pet.mood is Mood.HAPPY
    assert pet.game_over is False
