from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, Optional

from pilgrimage.application.services.balance_tables import (
    ACTION_DELTAS,
    BLIZZARD_CLEAR_CHANCE,
    BLIZZARD_START_CHANCE,
    FISH_EAT_HUNGER_CEILING,
    FISH_HUNGER_BONUS,
    FORAGE_FISH_MAX,
    FORAGE_FISH_MIN,
    TRAVEL_DISTANCE_MAX,
    TRAVEL_DISTANCE_MIN,
    clamp_resource,
)
from pilgrimage.application.services.narrator import CombinatorialNarrator
from pilgrimage.domain.models.expedition import ExpeditionState
from pilgrimage.domain.models.journey import Journey


BLIZZARD_CLEARED_LINE = "The screaming winds subside at last, leaving a deafening quiet. "
ATE_FISH_LINE = (
    "The taste of the dried fish is oily and rich, sending a wave of strength through your shivering frame. "
)
FORAGE_EMPTY_LINE = "The hunt is fruitless; the ice remains stubbornly empty of life. "

NarrativeOverride = Callable[[ExpeditionState, str, Journey], Optional[str]]


def forage_found_line(found: int) -> str:
    return f"Your patience is rewarded as you pull {found} silver-finned fish from the ice. "


@dataclass(frozen=True)
class ActionResolution:
    state: ExpeditionState
    action: str
    used_remote_narrative: bool = False


def _apply_deltas(state: ExpeditionState, action: str) -> ExpeditionState:
    deltas = ACTION_DELTAS[action]
    return replace(
        state,
        health=state.health + deltas["health"],
        hunger=state.hunger + deltas["hunger"],
        warmth=state.warmth + deltas["warmth"],
        morale=state.morale + deltas["morale"],
    )


def _clamp_resources(state: ExpeditionState) -> ExpeditionState:
    return replace(
        state,
        health=clamp_resource(state.health),
        hunger=clamp_resource(state.hunger),
        warmth=clamp_resource(state.warmth),
        morale=clamp_resource(state.morale),
    )


def resolve_action(
    state: ExpeditionState,
    action: str,
    journey: Journey,
    *,
    rng: random.Random,
    narrator: CombinatorialNarrator,
    narrative_override: NarrativeOverride | None = None,
) -> ActionResolution:
    """Advance one day by ``action`` and narrate the result.

    ``state`` is never mutated; the returned snapshot keeps the incoming
    status so the milestone step can decide the next one.
    """

    if action not in ACTION_DELTAS:
        raise ValueError(f"Unknown action: {action!r}")

    next_state = state
    prefix = ""

    if next_state.is_blizzard and rng.random() < BLIZZARD_CLEAR_CHANCE:
        next_state = replace(next_state, is_blizzard=False)
        prefix = BLIZZARD_CLEARED_LINE

    next_state = _apply_deltas(next_state, action)

    if action == "travel":
        gained = rng.randint(TRAVEL_DISTANCE_MIN, TRAVEL_DISTANCE_MAX)
        next_state = replace(next_state, distance=next_state.distance + gained)
        if rng.random() < BLIZZARD_START_CHANCE:
            next_state = replace(next_state, is_blizzard=True)
    elif action == "rest":
        # The meal check sees hunger after the rest delta; clamping waits until every delta is in.
        if next_state.inventory.fish > 0 and next_state.hunger < FISH_EAT_HUNGER_CEILING:
            next_state = replace(
                next_state,
                inventory=replace(next_state.inventory, fish=next_state.inventory.fish - 1),
                hunger=next_state.hunger + FISH_HUNGER_BONUS,
            )
            prefix += ATE_FISH_LINE
    else:
        found = rng.randint(FORAGE_FISH_MIN, FORAGE_FISH_MAX)
        next_state = replace(
            next_state,
            inventory=replace(next_state.inventory, fish=next_state.inventory.fish + found),
        )
        prefix = (forage_found_line(found) if found > 0 else FORAGE_EMPTY_LINE) + prefix

    next_state = replace(_clamp_resources(next_state), day=next_state.day + 1)

    override = narrative_override(next_state, action, journey) if narrative_override is not None else None
    if override:
        return ActionResolution(
            state=replace(next_state, last_message=prefix + override),
            action=action,
            used_remote_narrative=True,
        )

    narration = narrator.compose(next_state, action, journey, rng)
    next_state = replace(
        next_state,
        last_message=prefix + narration.message,
        narrative_history=narration.apply_to(next_state.narrative_history),
    )
    return ActionResolution(state=next_state, action=action)
