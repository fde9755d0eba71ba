import random
import sys
from dataclasses import replace
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pilgrimage.application.services.game_service import GameService
from pilgrimage.application.services.remote_narrative import RemoteNarrativeAdapter
from pilgrimage.domain.events import ChoiceResolved, EncounterTriggered, ExpeditionEnded, TurnResolved
from pilgrimage.domain.models.expedition import (
    HISTORY_CATEGORIES,
    OPENING_MESSAGE,
    ExpeditionState,
    GameStatus,
    Inventory,
)
from pilgrimage.infrastructure.inmemory.inmemory_journey_repo import InMemoryJourneyRepository


class _ScriptedRandom(random.Random):
    def __init__(self, roll: float = 0.99, high: bool = True) -> None:
        super().__init__(0)
        self.roll = roll
        self.high = high

    def random(self) -> float:
        return self.roll

    def randint(self, a: int, b: int) -> int:
        return b if self.high else a

    def choice(self, seq):
        return seq[0]


def _journey_payload(journey_id: int = 7, fixed_events=()) -> dict:
    situational = {
        name: [f"{name} one.", f"{name} two."]
        for name in ("thriving", "lowHealth", "starving", "freezing", "lowMorale", "blizzard")
    }
    return {
        "id": journey_id,
        "title": "Test Trail",
        "flavor": "A trail for tests.",
        "voice": "Plain.",
        "narrativePool": {
            "travel": ["You walk.", "You stride."],
            "rest": ["You sleep.", "You doze."],
            "forage": ["You dig.", "You wait."],
        },
        "environmentalSnippets": {
            "lowlands": ["Slush.", "Brine."],
            "highPasses": ["Rock.", "Wind."],
            "summit": ["Cloud.", "Silence."],
        },
        "situationalSnippets": situational,
        "fixedEvents": list(fixed_events),
    }


_RIDGE_EVENT = {
    "distance": 100,
    "event": {
        "title": "The Ridge",
        "description": "A ridge blocks the way.",
        "options": [
            {"text": "Climb", "outcome": "Up", "detailedOutcome": "You climb the ridge.", "statChanges": {"health": -10}},
            {"text": "Skirt", "outcome": "Around", "detailedOutcome": "You skirt the ridge.", "statChanges": {"warmth": -5}},
        ],
    },
}


class _FakeRemoteClient:
    def __init__(self, text: str = "Remote words.", event: dict | None = None) -> None:
        self.text = text
        self.event = event
        self.on_text = None

    def generate_text(self, prompt: str, **_kwargs) -> str:
        if self.on_text is not None:
            self.on_text()
        return self.text

    def generate_json(self, prompt: str, *, schema) -> dict:
        if self.event is None:
            raise RuntimeError("no event scripted")
        return self.event


def _service(fixed_events=(), rng_kwargs=None, **kwargs) -> GameService:
    repo = InMemoryJourneyRepository(definitions=[_journey_payload(fixed_events=fixed_events)], leads=["Dawn.", "Dusk."])
    rng_kwargs = rng_kwargs or {}
    return GameService(repo, rng_factory=lambda _run: _ScriptedRandom(**rng_kwargs), **kwargs)


class GameServiceStartTests(unittest.TestCase):
    def test_new_expedition_starts_fresh(self) -> None:
        view = _service().get_expedition_view()
        self.assertEqual("START", view.status)
        self.assertEqual(1, view.day)
        self.assertEqual(0, view.distance)
        self.assertEqual(5, view.fish)
        self.assertEqual(100, view.health)
        self.assertEqual(OPENING_MESSAGE, view.last_message)
        self.assertEqual("Test Trail", view.journey_title)
        self.assertEqual("Lowlands", view.band_label)

    def test_first_action_moves_to_playing(self) -> None:
        service = _service()
        result = service.perform_action("travel")
        self.assertTrue(result.accepted)
        self.assertEqual("PLAYING", result.status)
        self.assertEqual(2, service.state.day)
        self.assertEqual([service.state.last_message], result.messages)

    def test_unknown_action_raises(self) -> None:
        with self.assertRaises(ValueError):
            _service().perform_action("fly")

    def test_available_actions_follow_status(self) -> None:
        service = _service()
        self.assertEqual(["travel", "rest", "forage"], service.available_actions())
        service.resume(replace(service.state, status=GameStatus.GAMEOVER))
        self.assertEqual([], service.available_actions())


class GameServiceEncounterTests(unittest.TestCase):
    def _service_near_ridge(self) -> GameService:
        service = _service(fixed_events=[_RIDGE_EVENT], rng_kwargs={"high": False})
        service.resume(
            ExpeditionState(journey_id=7, distance=95, status=GameStatus.PLAYING, inventory=Inventory(fish=5))
        )
        return service

    def test_crossing_a_threshold_raises_the_encounter_once(self) -> None:
        service = self._service_near_ridge()

        result = service.perform_action("travel")
        self.assertEqual(110, service.state.distance)
        self.assertEqual("EVENT", result.status)
        self.assertEqual("The Ridge", result.encounter.title)
        self.assertEqual(["Climb", "Skirt"], [choice.text for choice in result.encounter.choices])

        choice = service.perform_choice(1)
        self.assertTrue(choice.accepted)
        self.assertEqual("PLAYING", choice.status)
        self.assertEqual(["You skirt the ridge."], choice.messages)

        follow_up = service.perform_action("travel")
        self.assertEqual(125, service.state.distance)
        self.assertEqual("PLAYING", follow_up.status)
        self.assertIsNone(follow_up.encounter)

    def test_actions_are_rejected_while_encounter_waits(self) -> None:
        service = self._service_near_ridge()
        service.perform_action("travel")
        before = service.state

        result = service.perform_action("rest")

        self.assertFalse(result.accepted)
        self.assertEqual("EVENT", result.status)
        self.assertIs(before, service.state)

    def test_choice_out_of_range_or_without_encounter_is_rejected(self) -> None:
        service = self._service_near_ridge()
        self.assertFalse(service.perform_choice(0).accepted)
        service.perform_action("travel")
        self.assertFalse(service.perform_choice(5).accepted)
        self.assertEqual(GameStatus.EVENT, service.state.status)

    def test_choice_stat_changes_apply(self) -> None:
        service = self._service_near_ridge()
        service.perform_action("travel")
        health_before = service.state.health
        service.perform_choice(0)
        self.assertEqual(health_before - 10, service.state.health)

    def test_choice_does_not_advance_the_day(self) -> None:
        service = self._service_near_ridge()
        service.perform_action("travel")
        day_before = service.state.day
        distance_before = service.state.distance

        service.perform_choice(0)

        self.assertEqual(day_before, service.state.day)
        self.assertEqual(distance_before, service.state.distance)


class GameServiceOutcomeTests(unittest.TestCase):
    def test_pure_travel_starves_on_day_eight_and_locks_input(self) -> None:
        service = _service()
        results = [service.perform_action("travel") for _ in range(8)]

        self.assertTrue(all(result.accepted for result in results))
        self.assertEqual(["PLAYING"] * 7 + ["GAMEOVER"], [result.status for result in results])
        self.assertEqual(0, service.state.hunger)
        self.assertEqual(272, service.state.distance)
        self.assertTrue(results[-1].game_over)

        rejected = service.perform_action("travel")
        self.assertFalse(rejected.accepted)
        self.assertEqual(272, service.state.distance)
        self.assertEqual(9, service.state.day)

    def test_balanced_routine_reaches_the_summit(self) -> None:
        service = _service()
        routine = ["forage", "travel", "rest", "travel", "rest"]
        outcome = None
        for turn in range(60):
            result = service.perform_action(routine[turn % len(routine)])
            self.assertTrue(result.accepted)
            if result.game_over:
                outcome = result.status
                break
            self.assertGreater(service.state.hunger, 0)

        self.assertEqual("WIN", outcome)
        self.assertEqual(510, service.state.distance)
        self.assertEqual(38, service.state.day)
        self.assertFalse(service.perform_action("rest").accepted)

    def test_events_are_published_for_turns_encounters_and_endings(self) -> None:
        service = _service(fixed_events=[_RIDGE_EVENT])
        seen: list[object] = []
        for event_type in (TurnResolved, EncounterTriggered, ChoiceResolved, ExpeditionEnded):
            service.event_bus.subscribe(event_type, seen.append)

        service.perform_action("travel")
        service.perform_action("travel")
        service.perform_action("travel")
        service.perform_choice(0)

        kinds = [type(event).__name__ for event in seen]
        self.assertEqual(
            ["TurnResolved", "TurnResolved", "TurnResolved", "EncounterTriggered", "ChoiceResolved"],
            kinds,
        )
        encounter = seen[3]
        self.assertEqual("fixed", encounter.source)
        self.assertEqual(102, encounter.distance)

        for _ in range(5):
            service.perform_action("travel")
        self.assertIsInstance(seen[-1], ExpeditionEnded)
        self.assertEqual("GAMEOVER", seen[-1].outcome)

    def test_restart_builds_a_new_expedition_with_next_generator(self) -> None:
        runs: list[int] = []
        repo = InMemoryJourneyRepository(definitions=[_journey_payload()], leads=["Dawn."])

        def factory(run_index: int) -> random.Random:
            runs.append(run_index)
            return _ScriptedRandom()

        service = GameService(repo, rng_factory=factory)
        service.perform_action("travel")
        view = service.restart()

        self.assertEqual([0, 1], runs)
        self.assertEqual("START", view.status)
        self.assertEqual(0, view.distance)
        self.assertEqual((), service.state.narrative_history.leads)


class GameServiceMarkerTests(unittest.TestCase):
    def test_add_and_remove_marker(self) -> None:
        service = _service()
        marker = service.add_marker(40, "Cache", "fishing")
        self.assertEqual("fishing", marker.type)
        self.assertEqual(["Cache"], [row.label for row in service.get_expedition_view().markers])

        removed = service.remove_marker(marker.id)
        self.assertEqual(marker.id, removed.id)
        self.assertEqual([], service.get_expedition_view().markers)
        self.assertIsNone(service.remove_marker(marker.id))

    def test_default_label_and_track_bounds(self) -> None:
        service = _service()
        self.assertEqual("Expedition Waypoint", service.add_marker(0).label)
        with self.assertRaises(ValueError):
            service.add_marker(501)

    def test_markers_do_not_change_simulation(self) -> None:
        service = _service()
        service.add_marker(10, "Shelter", "shelter")
        service.perform_action("travel")
        self.assertEqual(34, service.state.distance)
        self.assertEqual(1, len(service.state.markers))


class GameServiceRemoteNarrativeTests(unittest.TestCase):
    def test_remote_line_replaces_narration_without_touching_history(self) -> None:
        client = _FakeRemoteClient(text="The remote sky speaks.")
        service = _service(remote_narrative=RemoteNarrativeAdapter(client=client, enabled=True))
        turns: list[TurnResolved] = []
        service.event_bus.subscribe(TurnResolved, turns.append)

        service.perform_action("travel")

        self.assertEqual("The remote sky speaks.", service.state.last_message)
        self.assertEqual((), service.state.narrative_history.leads)
        self.assertTrue(turns[0].used_remote_narrative)

    def test_remote_failure_falls_back_to_local_narration(self) -> None:
        class _BrokenClient(_FakeRemoteClient):
            def generate_text(self, prompt: str, **_kwargs) -> str:
                raise RuntimeError("offline")

        service = _service(remote_narrative=RemoteNarrativeAdapter(client=_BrokenClient(), enabled=True))
        result = service.perform_action("rest")

        self.assertTrue(result.accepted)
        self.assertTrue(service.state.last_message.startswith("Dawn."))
        self.assertEqual((0,), service.state.narrative_history.leads)

    def test_generated_encounter_surfaces_when_no_fixed_event_fires(self) -> None:
        client = _FakeRemoteClient(event=dict(_RIDGE_EVENT["event"], title="Skua Ambush"))
        service = _service(remote_narrative=RemoteNarrativeAdapter(client=client, enabled=True, event_chance=1.0))
        encounters: list[EncounterTriggered] = []
        service.event_bus.subscribe(EncounterTriggered, encounters.append)

        result = service.perform_action("forage")

        self.assertEqual("EVENT", result.status)
        self.assertEqual("Skua Ambush", result.encounter.title)
        self.assertEqual("remote", encounters[0].source)

    def test_reentrant_action_during_turn_is_rejected(self) -> None:
        client = _FakeRemoteClient()
        service = _service(remote_narrative=RemoteNarrativeAdapter(client=client, enabled=True))
        nested: list[bool] = []
        client.on_text = lambda: nested.append(service.perform_action("rest").accepted)

        result = service.perform_action("travel")

        self.assertTrue(result.accepted)
        self.assertEqual([False], nested)
        self.assertEqual(2, service.state.day)
        self.assertFalse(service.busy)


class GameServiceSeededPlaythroughTests(unittest.TestCase):
    """Random mixes of actions and choices through the shipped catalog."""

    SEEDS = range(60)
    MAX_STEPS = 150

    def _assert_bounded(self, state: ExpeditionState) -> None:
        for resource in ("health", "hunger", "warmth", "morale"):
            value = getattr(state, resource)
            self.assertGreaterEqual(value, 0, resource)
            self.assertLessEqual(value, 100, resource)
        self.assertGreaterEqual(state.inventory.fish, 0)

    def _assert_history_unique(self, state: ExpeditionState) -> None:
        for category in HISTORY_CATEGORIES:
            used = state.narrative_history.used(category)
            self.assertEqual(len(used), len(set(used)), category)

    def _play(self, seed: int) -> None:
        driver = random.Random(seed)
        service = GameService(
            InMemoryJourneyRepository(),
            rng_factory=lambda run_index: random.Random(seed * 1000 + run_index),
        )

        for _ in range(self.MAX_STEPS):
            before = service.state
            if before.status.is_terminal:
                break
            if before.status == GameStatus.EVENT:
                result = service.perform_choice(driver.randrange(len(before.active_event.options)))
                expected_day = before.day
            else:
                result = service.perform_action(driver.choice(["travel", "rest", "forage"]))
                expected_day = before.day + 1

            self.assertTrue(result.accepted)
            after = service.state
            self.assertEqual(expected_day, after.day)
            self.assertGreaterEqual(after.distance, before.distance)
            self._assert_bounded(after)
            self._assert_history_unique(after)

    def test_invariants_hold_after_every_step(self) -> None:
        for seed in self.SEEDS:
            with self.subTest(seed=seed):
                self._play(seed)


if __name__ == "__main__":
    unittest.main()
