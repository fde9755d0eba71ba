from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Optional

from pilgrimage.domain.models.expedition import ExpeditionState, MapMarker, MarkerType


DEFAULT_MARKER_LABEL = "Expedition Waypoint"


def add_marker(
    state: ExpeditionState,
    distance: int,
    *,
    track_length: int,
    label: str = DEFAULT_MARKER_LABEL,
    marker_type: MarkerType | str = MarkerType.WAYPOINT,
    description: Optional[str] = None,
) -> tuple[ExpeditionState, MapMarker]:
    if not 0 <= int(distance) <= int(track_length):
        raise ValueError(f"Marker distance {distance} is off the track (0..{track_length}).")
    marker = MapMarker(
        id=uuid.uuid4().hex[:8],
        distance=int(distance),
        label=str(label or DEFAULT_MARKER_LABEL),
        type=MarkerType(marker_type),
        day_discovered=state.day,
        description=description,
    )
    return replace(state, markers=state.markers + (marker,)), marker


def remove_marker(state: ExpeditionState, marker_id: str) -> ExpeditionState:
    return replace(
        state,
        markers=tuple(marker for marker in state.markers if marker.id != marker_id),
        discovered_landmarks=tuple(marker for marker in state.discovered_landmarks if marker.id != marker_id),
    )
