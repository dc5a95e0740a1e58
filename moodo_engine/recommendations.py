"""Context-triggered smart suggestions and their ranking."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Callable

from moodo_engine.schema import Category, Emotion, Priority, Recommendation, UserContext

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 2

REQUIRED_ENERGY = MappingProxyType(
    {
        Emotion.ENERGIZING: 0.8,
        Emotion.STRESSFUL: 0.8,
        Emotion.ANXIOUS: 0.8,
        Emotion.FOCUSED: 0.7,
        Emotion.CREATIVE: 0.6,
        Emotion.ROUTINE: 0.4,
        Emotion.CALMING: 0.3,
    }
)


@dataclass(frozen=True)
class SuggestionRule:
    """A predicate over the context and the suggestion it emits."""

    name: str
    applies: Callable[[UserContext], bool]
    title: str
    description: str
    category: Category
    priority: Priority
    estimated_duration: int
    emotion: Emotion

    def build(self) -> Recommendation:
        return Recommendation(
            rec_id=str(uuid.uuid4()),
            title=self.title,
            description=self.description,
            category=self.category,
            priority=self.priority,
            estimated_duration=self.estimated_duration,
            emotion=self.emotion,
        )


RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        name="high_energy",
        applies=lambda ctx: ctx.energy_level > 0.7,
        title="Tackle your most challenging task",
        description="Your energy is high. Use it for your hardest work in 25-minute sprints.",
        category=Category.WORK,
        priority=Priority.HIGH,
        estimated_duration=45,
        emotion=Emotion.FOCUSED,
    ),
    SuggestionRule(
        name="low_energy",
        applies=lambda ctx: ctx.energy_level < 0.3,
        title="Simple organizing session",
        description="Pick one small area and spend 15 minutes tidying it for an easy win.",
        category=Category.PERSONAL,
        priority=Priority.LOW,
        estimated_duration=15,
        emotion=Emotion.ROUTINE,
    ),
    SuggestionRule(
        name="high_stress",
        applies=lambda ctx: ctx.stress_level > 0.6,
        title="5-minute breathing break",
        description="Try box breathing: in for 4, hold 4, out 4, hold 4.",
        category=Category.HEALTH,
        priority=Priority.HIGH,
        estimated_duration=5,
        emotion=Emotion.CALMING,
    ),
    SuggestionRule(
        name="morning_planning",
        applies=lambda ctx: 6 <= ctx.hour <= 9,
        title="Set 3 key priorities for today",
        description="Morning planning makes the rest of the day easier.",
        category=Category.WORK,
        priority=Priority.MEDIUM,
        estimated_duration=10,
        emotion=Emotion.FOCUSED,
    ),
    SuggestionRule(
        name="afternoon_creative",
        applies=lambda ctx: 14 <= ctx.hour <= 16,
        title="Creative break session",
        description="The post-lunch window suits loose, creative thinking.",
        category=Category.CREATIVE,
        priority=Priority.MEDIUM,
        estimated_duration=20,
        emotion=Emotion.CREATIVE,
    ),
)


def score_recommendation(recommendation: Recommendation, context: UserContext) -> float:
    """Rate a suggestion by energy fit, with a bonus for short ones."""

    score = 0.5
    energy_match = 1.0 - abs(context.energy_level - REQUIRED_ENERGY[recommendation.emotion])
    score += energy_match * 0.3
    if recommendation.estimated_duration <= 30:
        score += 0.2
    return min(score, 1.0)


def recommend(
    context: UserContext,
    limit: int = MAX_RECOMMENDATIONS,
    rules: tuple[SuggestionRule, ...] = RULES,
) -> list[Recommendation]:
    """Fire the rules against ``context`` and return the top ``limit`` suggestions."""

    candidates = []
    for rule in rules:
        if rule.applies(context):
            logger.debug("Rule %s fired", rule.name)
            candidates.append(rule.build())

    scored = [replace(rec, score=score_recommendation(rec, context)) for rec in candidates]
    ranked = sorted(scored, key=lambda rec: rec.score, reverse=True)
    return ranked[:limit]
