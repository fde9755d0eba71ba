import os
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pilgrimage import bootstrap
from pilgrimage.domain.models.expedition import ExpeditionState, GameStatus, Inventory
from pilgrimage.infrastructure.gemini_client import GeminiNarrativeClient


_CLEAN_ENV = {
    "PILGRIMAGE_SEED": "",
    "PILGRIMAGE_REMOTE_NARRATIVE_ENABLED": "0",
    "PILGRIMAGE_GEMINI_API_KEY": "",
    "GEMINI_API_KEY": "",
}


class BootstrapTests(unittest.TestCase):
    def test_default_service_is_offline_and_ready(self) -> None:
        with mock.patch.dict(os.environ, _CLEAN_ENV, clear=False):
            service = bootstrap.create_game_service()
        self.assertFalse(service.remote_narrative.active)
        self.assertEqual("START", service.get_expedition_view().status)

    def test_expedition_end_is_written_to_the_journal_log(self) -> None:
        with mock.patch.dict(os.environ, _CLEAN_ENV, clear=False):
            service = bootstrap.create_game_service()
        service.resume(
            ExpeditionState(
                journey_id=service.state.journey_id,
                distance=40,
                hunger=10,
                status=GameStatus.PLAYING,
                inventory=Inventory(fish=0),
            )
        )

        with self.assertLogs("pilgrimage.application.services.expedition_journal", level="INFO") as captured:
            service.perform_action("travel")

        self.assertEqual(GameStatus.GAMEOVER, service.state.status)
        self.assertTrue(any("Pilgrimage ended: GAMEOVER" in line for line in captured.output))

    def test_seed_makes_runs_reproducible(self) -> None:
        env = dict(_CLEAN_ENV, PILGRIMAGE_SEED="1234")
        with mock.patch.dict(os.environ, env, clear=False):
            first = bootstrap.create_game_service()
            second = bootstrap.create_game_service()

        for action in ("travel", "forage", "rest", "travel"):
            first.perform_action(action)
            second.perform_action(action)
        self.assertEqual(first.state, second.state)

    def test_remote_requires_enable_flag_and_key(self) -> None:
        env = dict(_CLEAN_ENV, PILGRIMAGE_REMOTE_NARRATIVE_ENABLED="1")
        with mock.patch.dict(os.environ, env, clear=False):
            self.assertFalse(bootstrap._build_remote_narrative().active)

    def test_remote_adapter_reads_env_configuration(self) -> None:
        env = dict(
            _CLEAN_ENV,
            PILGRIMAGE_REMOTE_NARRATIVE_ENABLED="true",
            GEMINI_API_KEY="fallback-key",
            PILGRIMAGE_GEMINI_MODEL="custom-model",
            PILGRIMAGE_REMOTE_EVENT_CHANCE="0.4",
        )
        with mock.patch.dict(os.environ, env, clear=False):
            adapter = bootstrap._build_remote_narrative()

        self.assertTrue(adapter.active)
        self.assertEqual(0.4, adapter.event_chance)
        self.assertIsInstance(adapter.client, GeminiNarrativeClient)
        self.assertEqual("custom-model", adapter.client.model)
        adapter.client.close()


if __name__ == "__main__":
    unittest.main()
