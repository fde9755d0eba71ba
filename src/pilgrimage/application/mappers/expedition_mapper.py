from __future__ import annotations

from typing import Optional

from pilgrimage.application.dtos import ChoiceView, EncounterView, ExpeditionView, MarkerView
from pilgrimage.application.services.balance_tables import (
    BAND_LABELS,
    TARGET_DISTANCE,
    elevation_band,
    progress_percent,
)
from pilgrimage.domain.models.expedition import ExpeditionState, MapMarker
from pilgrimage.domain.models.journey import Journey, NarrativeEvent


def to_encounter_view(event: Optional[NarrativeEvent]) -> Optional[EncounterView]:
    if event is None:
        return None
    return EncounterView(
        title=event.title,
        description=event.description,
        event_type=event.event_type,
        choices=[ChoiceView(index=idx, text=option.text) for idx, option in enumerate(event.options)],
    )


def to_marker_view(marker: MapMarker, *, landmark: bool = False) -> MarkerView:
    return MarkerView(
        id=marker.id,
        distance=marker.distance,
        label=marker.label,
        type=marker.type.value,
        landmark=landmark,
    )


def to_expedition_view(state: ExpeditionState, journey: Journey) -> ExpeditionView:
    markers = [to_marker_view(marker) for marker in state.markers]
    markers.extend(to_marker_view(marker, landmark=True) for marker in state.discovered_landmarks)
    markers.sort(key=lambda row: row.distance)
    return ExpeditionView(
        journey_title=journey.title,
        journey_flavor=journey.flavor,
        day=state.day,
        distance=state.distance,
        target_distance=TARGET_DISTANCE,
        progress_percent=progress_percent(state.distance),
        band_label=BAND_LABELS[elevation_band(state.distance)],
        health=state.health,
        hunger=state.hunger,
        warmth=state.warmth,
        morale=state.morale,
        fish=state.inventory.fish,
        stones=state.inventory.stones,
        wood=state.inventory.wood,
        is_blizzard=state.is_blizzard,
        status=state.status.value,
        last_message=state.last_message,
        encounter=to_encounter_view(state.active_event),
        markers=markers,
    )
