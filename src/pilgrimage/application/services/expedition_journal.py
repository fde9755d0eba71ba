from __future__ import annotations

import logging

from pilgrimage.application.services.event_bus import EventBus
from pilgrimage.domain.events import ChoiceResolved, EncounterTriggered, ExpeditionEnded


logger = logging.getLogger(__name__)


class ExpeditionJournal:
    """Writes encounters, choices and endings to the application log."""

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus

    def register_handlers(self) -> None:
        self.event_bus.subscribe(EncounterTriggered, self.on_encounter_triggered, priority=80)
        self.event_bus.subscribe(ChoiceResolved, self.on_choice_resolved, priority=80)
        self.event_bus.subscribe(ExpeditionEnded, self.on_expedition_ended, priority=80)

    def on_encounter_triggered(self, event: EncounterTriggered) -> None:
        logger.info("Encounter surfaced on day %s at mile %s: %s (%s)", event.day, event.distance, event.title, event.source)

    def on_choice_resolved(self, event: ChoiceResolved) -> None:
        logger.info("Chose %r at %s; status %s", event.choice_text, event.event_title, event.status)

    def on_expedition_ended(self, event: ExpeditionEnded) -> None:
        logger.info(
            "Pilgrimage ended: %s on day %s at %s miles (journey %s)",
            event.outcome,
            event.day,
            event.distance,
            event.journey_id,
        )
