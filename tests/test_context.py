from datetime import datetime

from moodo_engine.context import MOOD_ENERGY, MOOD_STRESS, derive_context
from moodo_engine.schema import Mood


def test_derive_context_from_mood_and_clock():
    context = derive_context(Mood.ENERGIZED, datetime.fromisoformat("2025-01-06T08:30:00"))
    assert context.hour == 8
    assert context.day_of_week == 0
    assert context.mood == Mood.ENERGIZED
    assert context.energy_level == 0.9
    assert context.stress_level == 0.2


def test_every_mood_has_levels_in_range():
    for mood in Mood:
        assert 0.0 <= MOOD_ENERGY[mood] <= 1.0
        assert 0.0 <= MOOD_STRESS[mood] <= 1.0


def test_stressed_levels():
    context = derive_context(Mood.STRESSED, datetime.fromisoformat("2025-01-07T21:00:00"))
    assert (context.energy_level, context.stress_level) == (0.3, 0.9)
    assert context.day_of_week == 1
