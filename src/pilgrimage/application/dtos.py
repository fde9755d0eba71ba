from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ChoiceView:
    index: int
    text: str


@dataclass
class EncounterView:
    title: str
    description: str
    event_type: str
    choices: List[ChoiceView] = field(default_factory=list)


@dataclass
class ActionResult:
    accepted: bool
    status: str
    messages: List[str] = field(default_factory=list)
    game_over: bool = False
    encounter: Optional[EncounterView] = None


@dataclass
class MarkerView:
    id: str
    distance: int
    label: str
    type: str
    landmark: bool = False


@dataclass
class ExpeditionView:
    journey_title: str
    journey_flavor: str
    day: int
    distance: int
    target_distance: int
    progress_percent: int
    band_label: str
    health: int
    hunger: int
    warmth: int
    morale: int
    fish: int
    stones: int
    wood: int
    is_blizzard: bool
    status: str
    last_message: str
    encounter: Optional[EncounterView] = None
    markers: List[MarkerView] = field(default_factory=list)
