from __future__ import annotations

import logging
import random
from typing import Any, Mapping, Optional, Protocol

from pilgrimage.application.services.balance_tables import BAND_DESCRIPTIONS, elevation_band
from pilgrimage.domain.models.expedition import ExpeditionState
from pilgrimage.domain.models.journey import Journey, NarrativeEvent


logger = logging.getLogger(__name__)

EVENT_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "eventType": {"type": "STRING"},
        "options": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "text": {"type": "STRING"},
                    "outcome": {"type": "STRING"},
                    "detailedOutcome": {"type": "STRING"},
                    "statChanges": {
                        "type": "OBJECT",
                        "properties": {
                            "health": {"type": "NUMBER"},
                            "hunger": {"type": "NUMBER"},
                            "warmth": {"type": "NUMBER"},
                            "morale": {"type": "NUMBER"},
                            "fish": {"type": "NUMBER"},
                        },
                    },
                },
                "required": ["text", "outcome", "detailedOutcome", "statChanges"],
            },
        },
    },
    "required": ["title", "description", "options"],
}


class GenerativeTextClient(Protocol):
    def generate_text(self, prompt: str, *, temperature: float = 0.9, top_p: float = 0.95) -> str: ...

    def generate_json(self, prompt: str, *, schema: dict[str, Any]) -> dict[str, Any]: ...


def build_narrative_prompt(state: ExpeditionState, action: str, journey: Journey) -> str:
    weather = "A violent, blinding blizzard" if state.is_blizzard else "Freezing and clear"
    return "\n".join(
        [
            "You are the narrator for 'Pips' Pilgrimage', a survival game about a lone penguin.",
            "",
            f"THEME: {journey.title}",
            f"VOICE: {journey.voice}",
            "",
            "CURRENT SITUATION:",
            f"- Distance: {state.distance} miles ascended.",
            f"- Environment: {BAND_DESCRIPTIONS[elevation_band(state.distance)]}",
            f"- Weather: {weather}",
            f"- Stats: Health {state.health}%, Hunger {state.hunger}%, Warmth {state.warmth}%, Morale {state.morale}%",
            "",
            f"ACTION TAKEN: Pips chose to {action}.",
            "",
            "TASK: Write a unique, evocative narrative paragraph (2-4 sentences).",
            "Focus on the sensory details of the environment and Pips' internal monologue.",
            "Use the journey's specific 'Voice' to flavor the text.",
            "Maintain a melancholy, atmospheric, and cinematic tone.",
        ]
    )


def build_event_prompt(state: ExpeditionState) -> str:
    return (
        "Generate a random encounter for a penguin in snowy mountains. "
        f"Context: Day {state.day}, {state.distance} miles covered. "
        "Categories: Hazards, animal encounters, or discoveries. "
        "Provide a title, a description, and 2 logical choices with outcomes. "
        "The choices should NOT show their stat consequences to the user in the text, "
        "but you must provide the stat changes in the JSON."
    )


def parse_generated_event(payload: Mapping[str, Any]) -> NarrativeEvent:
    event = NarrativeEvent.from_mapping(payload)
    if len(event.options) < 2:
        raise ValueError("Generated event needs at least two options")
    return event


class RemoteNarrativeAdapter:
    """Optional remote source of narration and encounters.

    Every failure is a miss for that call only: the caller gets ``None`` and
    falls back to the local narrator or the fixed events.
    """

    def __init__(
        self,
        client: GenerativeTextClient | None = None,
        enabled: bool = False,
        event_chance: float = 0.0,
    ) -> None:
        self.client = client
        self.enabled = enabled
        self.event_chance = max(0.0, min(1.0, float(event_chance)))

    @property
    def active(self) -> bool:
        return self.enabled and self.client is not None

    def fetch_narrative_line(self, state: ExpeditionState, action: str, journey: Journey) -> Optional[str]:
        if not self.active:
            return None
        try:
            text = self.client.generate_text(build_narrative_prompt(state, action, journey))
        except Exception as exc:
            logger.warning("Remote narrative unavailable; using local narrator: %s", exc)
            return None
        text = str(text or "").strip()
        return text or None

    def wants_generated_event(self, rng: random.Random) -> bool:
        if not self.active or self.event_chance <= 0:
            return False
        return rng.random() < self.event_chance

    def fetch_generated_event(self, state: ExpeditionState) -> Optional[NarrativeEvent]:
        if not self.active:
            return None
        try:
            payload = self.client.generate_json(build_event_prompt(state), schema=EVENT_RESPONSE_SCHEMA)
            return parse_generated_event(payload)
        except Exception as exc:
            logger.warning("Remote encounter unavailable: %s", exc)
            return None
