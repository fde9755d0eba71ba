from dataclasses import dataclass


@dataclass
class TurnResolved:
    day: int
    action: str
    distance_before: int
    distance_after: int
    status: str
    used_remote_narrative: bool = False


@dataclass
class EncounterTriggered:
    day: int
    distance: int
    title: str
    source: str


@dataclass
class ChoiceResolved:
    day: int
    event_title: str
    choice_text: str
    status: str


@dataclass
class ExpeditionEnded:
    journey_id: int
    day: int
    distance: int
    outcome: str
