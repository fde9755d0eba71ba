from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from pilgrimage.application.services.balance_tables import SITUATIONAL_THRESHOLD, elevation_band
from pilgrimage.domain.models.expedition import ExpeditionState, NarrativeHistory
from pilgrimage.domain.models.journey import Journey, Situation
from pilgrimage.domain.services.fragment_history import FragmentDraw, pick_unused


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Narration:
    message: str
    draws: Mapping[str, FragmentDraw] = field(default_factory=dict)

    def apply_to(self, history: NarrativeHistory) -> NarrativeHistory:
        updated = history
        for category, draw in self.draws.items():
            updated = updated.record(category, draw.index, did_reset=draw.did_reset)
        return updated


def select_situation(state: ExpeditionState) -> Situation:
    # First match wins; several conditions can hold at once.
    if state.is_blizzard:
        return Situation.BLIZZARD
    if state.health < SITUATIONAL_THRESHOLD:
        return Situation.LOW_HEALTH
    if state.hunger < SITUATIONAL_THRESHOLD:
        return Situation.STARVING
    if state.warmth < SITUATIONAL_THRESHOLD:
        return Situation.FREEZING
    if state.morale < SITUATIONAL_THRESHOLD:
        return Situation.LOW_MORALE
    return Situation.THRIVING


class CombinatorialNarrator:
    """Builds one sentence from four fragment slots without repeating a
    fragment inside a category until that category's pool is spent."""

    def __init__(self, leads: Sequence[str]) -> None:
        self.leads = tuple(leads)

    def compose(
        self,
        state: ExpeditionState,
        action: str,
        journey: Journey,
        rng: random.Random,
    ) -> Narration:
        history = state.narrative_history
        slots = (
            ("leads", self.leads),
            (action, journey.action_pool(action)),
            ("env", journey.environment_pool(elevation_band(state.distance))),
            ("status", journey.situational_pool(select_situation(state))),
        )

        draws: dict[str, FragmentDraw] = {}
        for category, pool in slots:
            draw = pick_unused(pool, history.used(category), rng)
            if draw.did_reset:
                logger.debug("Fragment pool exhausted; restarting history", extra={"category": category})
            draws[category] = draw

        message = " ".join(draw.value for draw in draws.values())
        return Narration(message=message, draws=draws)
