from __future__ import annotations

from dataclasses import replace
from typing import Optional

from pilgrimage.application.services.balance_tables import TARGET_DISTANCE, clamp_resource
from pilgrimage.domain.models.expedition import ExpeditionState, GameStatus
from pilgrimage.domain.models.journey import Choice, Journey, NarrativeEvent


def find_triggered_event(journey: Journey, distance_before: int, distance_after: int) -> Optional[NarrativeEvent]:
    """Return the first fixed event whose threshold this step crossed.

    Only one event fires per step; a second threshold crossed by the same
    step is skipped.
    """

    for beat in journey.fixed_events:
        if distance_before < beat.distance <= distance_after:
            return beat.event
    return None


def terminal_status(state: ExpeditionState) -> Optional[GameStatus]:
    if state.is_exhausted:
        return GameStatus.GAMEOVER
    if state.distance >= TARGET_DISTANCE:
        return GameStatus.WIN
    return None


def settle_status(state: ExpeditionState, event: Optional[NarrativeEvent]) -> ExpeditionState:
    """Pick the status to show after a resolved action.

    Terminal outcomes outrank a surfaced encounter, and loss outranks win.
    """

    terminal = terminal_status(state)
    if terminal is not None:
        return state.with_status(terminal)
    if event is not None:
        return state.with_status(GameStatus.EVENT, active_event=event)
    return state.with_status(GameStatus.PLAYING)


def apply_choice(state: ExpeditionState, choice: Choice) -> ExpeditionState:
    changes = choice.stat_changes
    next_state = replace(
        state,
        health=clamp_resource(state.health + changes.health),
        hunger=clamp_resource(state.hunger + changes.hunger),
        warmth=clamp_resource(state.warmth + changes.warmth),
        morale=clamp_resource(state.morale + changes.morale),
        inventory=replace(state.inventory, fish=max(0, state.inventory.fish + changes.fish)),
        last_message=choice.detailed_outcome,
    )
    return settle_status(next_state, None)
