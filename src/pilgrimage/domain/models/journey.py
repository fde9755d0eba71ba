from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ElevationBand(str, Enum):
    LOWLANDS = "lowlands"
    HIGH_PASSES = "highPasses"
    SUMMIT = "summit"


class Situation(str, Enum):
    THRIVING = "thriving"
    LOW_HEALTH = "lowHealth"
    STARVING = "starving"
    FREEZING = "freezing"
    LOW_MORALE = "lowMorale"
    BLIZZARD = "blizzard"


STAT_CHANGE_KEYS = ("health", "hunger", "warmth", "morale", "fish")


def _required_text(payload: Mapping[str, Any], key: str) -> str:
    value = str(payload.get(key, "") or "").strip()
    if not value:
        raise ValueError(f"Missing required field '{key}'")
    return value


@dataclass(frozen=True)
class StatChanges:
    health: int = 0
    hunger: int = 0
    warmth: int = 0
    morale: int = 0
    fish: int = 0

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object] | None) -> "StatChanges":
        values: dict[str, int] = {}
        for key in STAT_CHANGE_KEYS:
            raw = (payload or {}).get(key)
            if raw is None:
                continue
            values[key] = int(round(float(raw)))
        return cls(**values)


@dataclass(frozen=True)
class Choice:
    text: str
    outcome: str
    detailed_outcome: str
    stat_changes: StatChanges = field(default_factory=StatChanges)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Choice":
        stats = payload.get("statChanges")
        return cls(
            text=_required_text(payload, "text"),
            outcome=_required_text(payload, "outcome"),
            detailed_outcome=_required_text(payload, "detailedOutcome"),
            stat_changes=StatChanges.from_mapping(stats if isinstance(stats, Mapping) else None),
        )


@dataclass(frozen=True)
class NarrativeEvent:
    title: str
    description: str
    options: tuple[Choice, ...]
    event_type: str = "Event"

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "NarrativeEvent":
        raw_options = payload.get("options")
        if not isinstance(raw_options, (list, tuple)):
            raise ValueError("Event payload has no options list")
        options = []
        for row in raw_options:
            if not isinstance(row, Mapping):
                raise ValueError("Event option is not an object")
            options.append(Choice.from_mapping(row))
        return cls(
            title=_required_text(payload, "title"),
            description=_required_text(payload, "description"),
            options=tuple(options),
            event_type=str(payload.get("eventType") or "Event").strip() or "Event",
        )


@dataclass(frozen=True)
class JourneyBeat:
    distance: int
    event: NarrativeEvent


@dataclass(frozen=True)
class Journey:
    """Themed content bundle chosen once per playthrough.

    Pools are keyed by the wire names used throughout the narrator:
    ``narrative_pool`` by action (travel/rest/forage), ``environment`` by
    :class:`ElevationBand` value and ``situational`` by :class:`Situation`
    value.
    """

    id: int
    title: str
    flavor: str
    voice: str
    narrative_pool: Mapping[str, tuple[str, ...]]
    environment: Mapping[str, tuple[str, ...]]
    situational: Mapping[str, tuple[str, ...]]
    fixed_events: tuple[JourneyBeat, ...] = ()

    def action_pool(self, action: str) -> tuple[str, ...]:
        return tuple(self.narrative_pool.get(action, ()))

    def environment_pool(self, band: ElevationBand | str) -> tuple[str, ...]:
        key = band.value if isinstance(band, ElevationBand) else str(band)
        return tuple(self.environment.get(key, ()))

    def situational_pool(self, situation: Situation | str) -> tuple[str, ...]:
        key = situation.value if isinstance(situation, Situation) else str(situation)
        return tuple(self.situational.get(key, ()))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Journey":
        def _pools(key: str) -> dict[str, tuple[str, ...]]:
            raw = payload.get(key) or {}
            return {str(name): tuple(str(line) for line in lines) for name, lines in raw.items()}

        beats = tuple(
            JourneyBeat(distance=int(row["distance"]), event=NarrativeEvent.from_mapping(row["event"]))
            for row in payload.get("fixedEvents") or ()
        )
        return cls(
            id=int(payload["id"]),
            title=_required_text(payload, "title"),
            flavor=str(payload.get("flavor", "") or ""),
            voice=str(payload.get("voice", "") or ""),
            narrative_pool=_pools("narrativePool"),
            environment=_pools("environmentalSnippets"),
            situational=_pools("situationalSnippets"),
            fixed_events=beats,
        )
