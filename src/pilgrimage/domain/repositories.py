from abc import ABC, abstractmethod
from typing import List, Optional

from pilgrimage.domain.models.journey import Journey


class JourneyRepository(ABC):
    @abstractmethod
    def get(self, journey_id: int) -> Optional[Journey]:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Journey]:
        raise NotImplementedError

    @abstractmethod
    def narrative_leads(self) -> tuple[str, ...]:
        raise NotImplementedError

    def require(self, journey_id: int) -> Journey:
        """Return the journey or fail loudly; a dangling id is a content bug."""
        journey = self.get(journey_id)
        if journey is None:
            raise KeyError(f"Unknown journey id: {journey_id}")
        return journey
