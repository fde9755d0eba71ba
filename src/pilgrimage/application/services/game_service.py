from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from pilgrimage.application.dtos import ActionResult, ExpeditionView, MarkerView
from pilgrimage.application.mappers.expedition_mapper import (
    to_encounter_view,
    to_expedition_view,
    to_marker_view,
)
from pilgrimage.application.services.action_resolver import NarrativeOverride, resolve_action
from pilgrimage.application.services.balance_tables import ACTIONS, STARTING_FISH, TARGET_DISTANCE
from pilgrimage.application.services.event_bus import EventBus
from pilgrimage.application.services.milestones import (
    apply_choice,
    find_triggered_event,
    settle_status,
    terminal_status,
)
from pilgrimage.application.services.narrator import CombinatorialNarrator
from pilgrimage.application.services.remote_narrative import RemoteNarrativeAdapter
from pilgrimage.domain.events import ChoiceResolved, EncounterTriggered, ExpeditionEnded, TurnResolved
from pilgrimage.domain.models.expedition import ExpeditionState, GameStatus, Inventory, MarkerType
from pilgrimage.domain.models.journey import Journey
from pilgrimage.domain.repositories import JourneyRepository
from pilgrimage.domain.services.markers import DEFAULT_MARKER_LABEL, add_marker, remove_marker


logger = logging.getLogger(__name__)

RngFactory = Callable[[int], random.Random]


class GameService:
    """Owns the single authoritative expedition and serialises every turn.

    Input is accepted one action or one choice at a time; anything arriving
    while a turn is in flight, while an encounter waits for a choice, or
    after the expedition ended is rejected without touching the state.
    """

    def __init__(
        self,
        journey_repo: JourneyRepository,
        *,
        rng_factory: RngFactory | None = None,
        narrator: CombinatorialNarrator | None = None,
        remote_narrative: RemoteNarrativeAdapter | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.journey_repo = journey_repo
        self.rng_factory = rng_factory or (lambda _run_index: random.Random())
        self.narrator = narrator or CombinatorialNarrator(journey_repo.narrative_leads())
        self.remote_narrative = remote_narrative or RemoteNarrativeAdapter(enabled=False)
        self.event_bus = event_bus or EventBus()
        self._busy = False
        self._run_index = 0
        self._rng = self.rng_factory(self._run_index)
        self._state = self._new_state()

    @property
    def state(self) -> ExpeditionState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def journey(self) -> Journey:
        return self.journey_repo.require(self._state.journey_id)

    def _new_state(self, journey_id: int | None = None) -> ExpeditionState:
        if journey_id is None:
            journeys = self.journey_repo.list_all()
            if not journeys:
                raise RuntimeError("Journey catalog is empty.")
            journey_id = self._rng.choice(journeys).id
        else:
            self.journey_repo.require(journey_id)
        return ExpeditionState(journey_id=journey_id, inventory=Inventory(fish=STARTING_FISH))

    def restart(self, journey_id: int | None = None) -> ExpeditionView:
        self._run_index += 1
        self._rng = self.rng_factory(self._run_index)
        self._state = self._new_state(journey_id)
        self._busy = False
        logger.info("New pilgrimage started", extra={"journey_id": self._state.journey_id})
        return self.get_expedition_view()

    def resume(self, state: ExpeditionState) -> ExpeditionView:
        self.journey_repo.require(state.journey_id)
        self._state = state
        return self.get_expedition_view()

    def get_expedition_view(self) -> ExpeditionView:
        return to_expedition_view(self._state, self.journey)

    def available_actions(self) -> list[str]:
        if self._busy or self._state.status not in {GameStatus.START, GameStatus.PLAYING}:
            return []
        return list(ACTIONS)

    def _rejected(self, reason: str) -> ActionResult:
        logger.debug("Input rejected: %s", reason)
        return ActionResult(
            accepted=False,
            status=self._state.status.value,
            messages=[],
            game_over=self._state.status.is_terminal,
            encounter=to_encounter_view(self._state.active_event),
        )

    def _accepted(self) -> ActionResult:
        return ActionResult(
            accepted=True,
            status=self._state.status.value,
            messages=[self._state.last_message],
            game_over=self._state.status.is_terminal,
            encounter=to_encounter_view(self._state.active_event),
        )

    def _narrative_override(self) -> NarrativeOverride | None:
        if not self.remote_narrative.active:
            return None
        return self.remote_narrative.fetch_narrative_line

    def perform_action(self, action: str) -> ActionResult:
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action!r}")
        if self._busy:
            return self._rejected("turn in flight")
        if self._state.status not in {GameStatus.START, GameStatus.PLAYING}:
            return self._rejected(f"status {self._state.status.value}")

        self._busy = True
        try:
            before = self._state
            journey = self.journey
            resolution = resolve_action(
                before,
                action,
                journey,
                rng=self._rng,
                narrator=self.narrator,
                narrative_override=self._narrative_override(),
            )
            after = resolution.state
            event = find_triggered_event(journey, before.distance, after.distance)
            source = "fixed"
            if event is None and terminal_status(after) is None and self.remote_narrative.wants_generated_event(self._rng):
                event = self.remote_narrative.fetch_generated_event(after)
                source = "remote"
            self._state = settle_status(after, event)
        finally:
            self._busy = False

        state = self._state
        self.event_bus.publish(
            TurnResolved(
                day=state.day,
                action=action,
                distance_before=before.distance,
                distance_after=state.distance,
                status=state.status.value,
                used_remote_narrative=resolution.used_remote_narrative,
            )
        )
        if state.status == GameStatus.EVENT and state.active_event is not None:
            self.event_bus.publish(
                EncounterTriggered(
                    day=state.day,
                    distance=state.distance,
                    title=state.active_event.title,
                    source=source,
                )
            )
        self._publish_if_ended()
        return self._accepted()

    def perform_choice(self, choice_index: int) -> ActionResult:
        if self._busy:
            return self._rejected("turn in flight")
        event = self._state.active_event
        if self._state.status != GameStatus.EVENT or event is None:
            return self._rejected("no encounter awaiting a choice")
        if not 0 <= int(choice_index) < len(event.options):
            return self._rejected(f"choice {choice_index} out of range")

        self._busy = True
        try:
            choice = event.options[int(choice_index)]
            self._state = apply_choice(self._state, choice)
        finally:
            self._busy = False

        self.event_bus.publish(
            ChoiceResolved(
                day=self._state.day,
                event_title=event.title,
                choice_text=choice.text,
                status=self._state.status.value,
            )
        )
        self._publish_if_ended()
        return self._accepted()

    def _publish_if_ended(self) -> None:
        state = self._state
        if not state.status.is_terminal:
            return
        self.event_bus.publish(
            ExpeditionEnded(
                journey_id=state.journey_id,
                day=state.day,
                distance=state.distance,
                outcome=state.status.value,
            )
        )

    def add_marker(
        self,
        distance: int,
        label: str = DEFAULT_MARKER_LABEL,
        marker_type: MarkerType | str = MarkerType.WAYPOINT,
    ) -> MarkerView:
        self._state, marker = add_marker(
            self._state,
            distance,
            track_length=TARGET_DISTANCE,
            label=label,
            marker_type=marker_type,
        )
        return to_marker_view(marker)

    def remove_marker(self, marker_id: str) -> Optional[MarkerView]:
        existing = next(
            (marker for marker in self._state.markers + self._state.discovered_landmarks if marker.id == marker_id),
            None,
        )
        if existing is None:
            return None
        self._state = remove_marker(self._state, marker_id)
        return to_marker_view(existing)
