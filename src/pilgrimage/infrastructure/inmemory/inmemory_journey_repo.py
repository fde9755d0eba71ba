from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from pilgrimage.domain.models.journey import Journey
from pilgrimage.domain.repositories import JourneyRepository
from pilgrimage.infrastructure.inmemory.journey_fragments import JOURNEY_DEFINITIONS, NARRATIVE_LEADS
from pilgrimage.infrastructure.journey_content_validator import JourneyContentError, validate_catalog


class InMemoryJourneyRepository(JourneyRepository):
    def __init__(
        self,
        definitions: Sequence[Mapping[str, Any]] | None = None,
        leads: Sequence[str] | None = None,
    ) -> None:
        payloads = list(JOURNEY_DEFINITIONS if definitions is None else definitions)
        lead_lines = list(NARRATIVE_LEADS if leads is None else leads)
        errors = validate_catalog(lead_lines, payloads)
        if errors:
            raise JourneyContentError(errors)
        self._leads = tuple(str(line) for line in lead_lines)
        self._journeys: dict[int, Journey] = {}
        for payload in payloads:
            journey = Journey.from_mapping(payload)
            self._journeys[journey.id] = journey

    def get(self, journey_id: int) -> Optional[Journey]:
        return self._journeys.get(int(journey_id))

    def list_all(self) -> List[Journey]:
        return list(self._journeys.values())

    def narrative_leads(self) -> tuple[str, ...]:
        return self._leads
