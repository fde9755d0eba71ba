import random
import sys
from dataclasses import replace
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pilgrimage.application.services.narrator import CombinatorialNarrator, select_situation
from pilgrimage.domain.models.expedition import ExpeditionState
from pilgrimage.domain.models.journey import Journey, Situation


class _FirstChoiceRandom(random.Random):
    def choice(self, seq):
        return seq[0]


def _journey() -> Journey:
    return Journey.from_mapping(
        {
            "id": 4,
            "title": "Test Trail",
            "narrativePool": {
                "travel": ["Travel-0.", "Travel-1."],
                "rest": ["Rest-0."],
                "forage": ["Forage-0."],
            },
            "environmentalSnippets": {
                "lowlands": ["Low-0.", "Low-1."],
                "highPasses": ["Pass-0."],
                "summit": ["Peak-0."],
            },
            "situationalSnippets": {
                "thriving": ["Thriving-0."],
                "lowHealth": ["Hurt-0."],
                "starving": ["Starving-0."],
                "freezing": ["Freezing-0."],
                "lowMorale": ["Gloom-0."],
                "blizzard": ["Storm-0."],
            },
        }
    )


class SituationSelectionTests(unittest.TestCase):
    def test_defaults_to_thriving(self) -> None:
        self.assertEqual(Situation.THRIVING, select_situation(ExpeditionState(journey_id=1)))

    def test_blizzard_outranks_every_low_stat(self) -> None:
        state = ExpeditionState(journey_id=1, is_blizzard=True, health=5, hunger=5, warmth=5, morale=5)
        self.assertEqual(Situation.BLIZZARD, select_situation(state))

    def test_priority_runs_health_hunger_warmth_morale(self) -> None:
        state = ExpeditionState(journey_id=1, health=29, hunger=10, warmth=10, morale=10)
        self.assertEqual(Situation.LOW_HEALTH, select_situation(state))
        self.assertEqual(Situation.STARVING, select_situation(replace(state, health=30)))
        self.assertEqual(Situation.FREEZING, select_situation(replace(state, health=30, hunger=30)))
        self.assertEqual(Situation.LOW_MORALE, select_situation(replace(state, health=30, hunger=30, warmth=30)))

    def test_threshold_is_strictly_below_thirty(self) -> None:
        state = ExpeditionState(journey_id=1, health=30, hunger=30, warmth=30, morale=30)
        self.assertEqual(Situation.THRIVING, select_situation(state))


class CombinatorialNarratorTests(unittest.TestCase):
    def test_message_joins_lead_action_environment_status_in_order(self) -> None:
        narrator = CombinatorialNarrator(["Lead-0.", "Lead-1."])
        narration = narrator.compose(ExpeditionState(journey_id=4), "travel", _journey(), _FirstChoiceRandom())
        self.assertEqual("Lead-0. Travel-0. Low-0. Thriving-0.", narration.message)
        self.assertEqual(["leads", "travel", "env", "status"], list(narration.draws))

    def test_environment_follows_elevation_band(self) -> None:
        narrator = CombinatorialNarrator(["Lead."])
        rng = _FirstChoiceRandom()
        journey = _journey()
        self.assertIn("Low-0.", narrator.compose(ExpeditionState(journey_id=4, distance=149), "rest", journey, rng).message)
        self.assertIn("Pass-0.", narrator.compose(ExpeditionState(journey_id=4, distance=150), "rest", journey, rng).message)
        self.assertIn("Peak-0.", narrator.compose(ExpeditionState(journey_id=4, distance=350), "rest", journey, rng).message)

    def test_used_fragments_are_skipped_until_pool_is_spent(self) -> None:
        narrator = CombinatorialNarrator(["Lead-0.", "Lead-1."])
        journey = _journey()
        state = ExpeditionState(journey_id=4)
        first = narrator.compose(state, "travel", journey, _FirstChoiceRandom())
        state = replace(state, narrative_history=first.apply_to(state.narrative_history))
        second = narrator.compose(state, "travel", journey, _FirstChoiceRandom())

        self.assertEqual("Lead-1. Travel-1. Low-1. Thriving-0.", second.message)
        self.assertTrue(second.draws["status"].did_reset)

        state = replace(state, narrative_history=second.apply_to(state.narrative_history))
        self.assertEqual((0, 1), state.narrative_history.leads)
        self.assertEqual((0,), state.narrative_history.status)

    def test_status_fragment_tracks_situation(self) -> None:
        narrator = CombinatorialNarrator(["Lead."])
        state = ExpeditionState(journey_id=4, warmth=12)
        message = narrator.compose(state, "forage", _journey(), _FirstChoiceRandom()).message
        self.assertTrue(message.endswith("Freezing-0."))


if __name__ == "__main__":
    unittest.main()
