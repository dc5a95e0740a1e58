"""User context derivation from mood and wall-clock time."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType

from moodo_engine.schema import Mood, UserContext

MOOD_ENERGY = MappingProxyType(
    {
        Mood.ENERGIZED: 0.9,
        Mood.FOCUSED: 0.7,
        Mood.CREATIVE: 0.6,
        Mood.CALM: 0.4,
        Mood.TIRED: 0.2,
        Mood.STRESSED: 0.3,
        Mood.ANXIOUS: 0.4,
    }
)

MOOD_STRESS = MappingProxyType(
    {
        Mood.STRESSED: 0.9,
        Mood.ANXIOUS: 0.8,
        Mood.TIRED: 0.6,
        Mood.ENERGIZED: 0.2,
        Mood.FOCUSED: 0.3,
        Mood.CREATIVE: 0.2,
        Mood.CALM: 0.1,
    }
)


def derive_context(mood: Mood, now: datetime | None = None) -> UserContext:
    """Build the recommendation context for ``mood`` at ``now``."""

    now = now or datetime.now()
    return UserContext(
        hour=now.hour,
        day_of_week=now.weekday(),
        mood=mood,
        energy_level=MOOD_ENERGY[mood],
        stress_level=MOOD_STRESS[mood],
    )
