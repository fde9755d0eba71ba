import os
import random

from pilgrimage.application.services.event_bus import EventBus
from pilgrimage.application.services.expedition_journal import ExpeditionJournal
from pilgrimage.application.services.game_service import GameService
from pilgrimage.application.services.remote_narrative import RemoteNarrativeAdapter
from pilgrimage.application.services.seed_policy import expedition_seed
from pilgrimage.infrastructure.gemini_client import GeminiNarrativeClient
from pilgrimage.infrastructure.inmemory.inmemory_journey_repo import InMemoryJourneyRepository


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


def _build_rng_factory():
    raw_seed = os.getenv("PILGRIMAGE_SEED", "").strip()
    if not raw_seed:
        return None
    base_seed = int(raw_seed)
    return lambda run_index: random.Random(expedition_seed(base_seed, run_index))


def _build_remote_narrative() -> RemoteNarrativeAdapter:
    if not _env_flag("PILGRIMAGE_REMOTE_NARRATIVE_ENABLED"):
        return RemoteNarrativeAdapter(enabled=False)

    api_key = (os.getenv("PILGRIMAGE_GEMINI_API_KEY") or os.getenv("GEMINI_API_KEY") or "").strip()
    if not api_key:
        return RemoteNarrativeAdapter(enabled=False)

    timeout = float(os.getenv("PILGRIMAGE_REMOTE_TIMEOUT_S", "4"))
    event_chance = float(os.getenv("PILGRIMAGE_REMOTE_EVENT_CHANCE", "0.15"))
    model = os.getenv("PILGRIMAGE_GEMINI_MODEL", GeminiNarrativeClient.DEFAULT_MODEL).strip() or GeminiNarrativeClient.DEFAULT_MODEL

    client = GeminiNarrativeClient(api_key=api_key, model=model, timeout=timeout)
    return RemoteNarrativeAdapter(client=client, enabled=True, event_chance=event_chance)


def create_game_service() -> GameService:
    journey_repo = InMemoryJourneyRepository()
    event_bus = EventBus()
    ExpeditionJournal(event_bus).register_handlers()
    return GameService(
        journey_repo,
        rng_factory=_build_rng_factory(),
        remote_narrative=_build_remote_narrative(),
        event_bus=event_bus,
    )
