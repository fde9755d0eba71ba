from __future__ import annotations

from pilgrimage.domain.models.journey import ElevationBand


TARGET_DISTANCE = 500

RESOURCE_MIN = 0
RESOURCE_MAX = 100
STARTING_RESOURCE = 100
STARTING_FISH = 5

LOWLANDS_CEILING = 150
HIGH_PASSES_CEILING = 350

SITUATIONAL_THRESHOLD = 30

BLIZZARD_CLEAR_CHANCE = 0.6
BLIZZARD_START_CHANCE = 0.2

TRAVEL_DISTANCE_MIN = 15
TRAVEL_DISTANCE_MAX = 34

FORAGE_FISH_MIN = 0
FORAGE_FISH_MAX = 3

FISH_EAT_HUNGER_CEILING = 70
FISH_HUNGER_BONUS = 35

ACTION_DELTAS = {
    "travel": {"hunger": -14, "warmth": -12, "health": 0, "morale": -6},
    "rest": {"hunger": -10, "warmth": 35, "health": 8, "morale": 12},
    "forage": {"hunger": -12, "warmth": -18, "health": 0, "morale": 0},
}

ACTIONS = tuple(ACTION_DELTAS.keys())

BAND_DESCRIPTIONS = {
    ElevationBand.LOWLANDS: "Lowlands (near the sea, slushy snow, heavy air)",
    ElevationBand.HIGH_PASSES: "High Passes (jagged obsidian, blue ice, whistling winds)",
    ElevationBand.SUMMIT: "Summit Range (thin air, clouds below, crystalline silence)",
}

BAND_LABELS = {
    ElevationBand.LOWLANDS: "Lowlands",
    ElevationBand.HIGH_PASSES: "High Passes",
    ElevationBand.SUMMIT: "Summit Range",
}


def clamp_resource(value: int) -> int:
    return max(RESOURCE_MIN, min(RESOURCE_MAX, int(value)))


def elevation_band(distance: int) -> ElevationBand:
    if distance < LOWLANDS_CEILING:
        return ElevationBand.LOWLANDS
    if distance < HIGH_PASSES_CEILING:
        return ElevationBand.HIGH_PASSES
    return ElevationBand.SUMMIT


def progress_percent(distance: int) -> int:
    return max(0, min(100, int(distance * 100 // TARGET_DISTANCE)))
