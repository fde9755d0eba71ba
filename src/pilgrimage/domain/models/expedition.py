from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from pilgrimage.domain.models.journey import NarrativeEvent


HISTORY_CATEGORIES = ("leads", "travel", "rest", "forage", "env", "status")

OPENING_MESSAGE = (
    "You make the decision to head into the mountains and leave your colony behind. "
    "Why? Does there need to be a reason?"
)


class GameStatus(str, Enum):
    START = "START"
    PLAYING = "PLAYING"
    EVENT = "EVENT"
    GAMEOVER = "GAMEOVER"
    WIN = "WIN"

    @property
    def is_terminal(self) -> bool:
        return self in {GameStatus.GAMEOVER, GameStatus.WIN}


class MarkerType(str, Enum):
    WAYPOINT = "waypoint"
    SHELTER = "shelter"
    FISHING = "fishing"
    HAZARD = "hazard"
    INTEREST = "interest"


@dataclass(frozen=True)
class MapMarker:
    id: str
    distance: int
    label: str
    type: MarkerType = MarkerType.WAYPOINT
    day_discovered: Optional[int] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Inventory:
    fish: int = 0
    stones: int = 0
    wood: int = 0


@dataclass(frozen=True)
class NarrativeHistory:
    """Used fragment indices per narration category for one playthrough."""

    leads: tuple[int, ...] = ()
    travel: tuple[int, ...] = ()
    rest: tuple[int, ...] = ()
    forage: tuple[int, ...] = ()
    env: tuple[int, ...] = ()
    status: tuple[int, ...] = ()

    def used(self, category: str) -> tuple[int, ...]:
        if category not in HISTORY_CATEGORIES:
            raise ValueError(f"Unknown narrative category: {category}")
        return getattr(self, category)

    def record(self, category: str, index: int, *, did_reset: bool) -> "NarrativeHistory":
        # An exhausted pool restarts its window with only the fresh draw.
        if did_reset:
            updated = (int(index),)
        else:
            updated = self.used(category) + (int(index),)
        return replace(self, **{category: updated})


@dataclass(frozen=True)
class ExpeditionState:
    journey_id: int
    distance: int = 0
    day: int = 1
    health: int = 100
    hunger: int = 100
    warmth: int = 100
    morale: int = 100
    inventory: Inventory = field(default_factory=Inventory)
    status: GameStatus = GameStatus.START
    last_message: str = OPENING_MESSAGE
    is_blizzard: bool = False
    markers: tuple[MapMarker, ...] = ()
    discovered_landmarks: tuple[MapMarker, ...] = ()
    narrative_history: NarrativeHistory = field(default_factory=NarrativeHistory)
    active_event: Optional[NarrativeEvent] = None

    @property
    def is_exhausted(self) -> bool:
        return self.health <= 0 or self.hunger <= 0 or self.warmth <= 0

    def with_status(self, status: GameStatus, *, active_event: Optional[NarrativeEvent] = None) -> "ExpeditionState":
        return replace(self, status=status, active_event=active_event)
