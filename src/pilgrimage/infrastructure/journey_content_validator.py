"""Validate journey catalog content.

Usage examples:
    python -m pilgrimage.infrastructure.journey_content_validator
    python -m pilgrimage.infrastructure.journey_content_validator --path journeys.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Mapping, Sequence

from pilgrimage.application.services.balance_tables import ACTIONS, TARGET_DISTANCE, TRAVEL_DISTANCE_MAX
from pilgrimage.domain.models.journey import STAT_CHANGE_KEYS, ElevationBand, Situation


class JourneyContentError(ValueError):
    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Journey content invalid ({len(self.errors)} errors): " + "; ".join(self.errors))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate journey catalog JSON and fragment pools")
    parser.add_argument(
        "--path",
        default=None,
        help="Path to a JSON file with 'leads' and 'journeys' keys (defaults to the built-in catalog)",
    )
    return parser


def _check_pool_group(label: str, pools: Any, required: Sequence[str]) -> list[str]:
    if not isinstance(pools, Mapping):
        return [f"{label}: must be an object"]
    errors: list[str] = []
    for key in required:
        lines = pools.get(key)
        if not isinstance(lines, (list, tuple)) or not lines:
            errors.append(f"{label}.{key}: pool must be a non-empty list")
            continue
        if any(not str(line or "").strip() for line in lines):
            errors.append(f"{label}.{key}: pool contains blank fragments")
    return errors


def _check_event(label: str, event: Any) -> list[str]:
    if not isinstance(event, Mapping):
        return [f"{label}: event must be an object"]
    errors: list[str] = []
    for key in ("title", "description"):
        if not str(event.get(key, "") or "").strip():
            errors.append(f"{label}: missing {key}")
    options = event.get("options")
    if not isinstance(options, (list, tuple)) or len(options) < 2:
        errors.append(f"{label}: needs at least two options")
        return errors
    for index, option in enumerate(options):
        option_label = f"{label}.options[{index}]"
        if not isinstance(option, Mapping):
            errors.append(f"{option_label}: must be an object")
            continue
        for key in ("text", "outcome", "detailedOutcome"):
            if not str(option.get(key, "") or "").strip():
                errors.append(f"{option_label}: missing {key}")
        stats = option.get("statChanges") or {}
        if not isinstance(stats, Mapping):
            errors.append(f"{option_label}: statChanges must be an object")
            continue
        stray = sorted(set(stats) - set(STAT_CHANGE_KEYS))
        if stray:
            errors.append(f"{option_label}: unknown stat keys {stray}")
        for key, value in stats.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{option_label}: stat '{key}' must be numeric")
    return errors


def validate_journey(payload: Mapping[str, Any]) -> list[str]:
    label = f"journey {payload.get('id', '?')}"
    errors: list[str] = []
    if not isinstance(payload.get("id"), int):
        errors.append(f"{label}: id must be an integer")
    if not str(payload.get("title", "") or "").strip():
        errors.append(f"{label}: missing title")

    errors.extend(_check_pool_group(f"{label}.narrativePool", payload.get("narrativePool"), ACTIONS))
    errors.extend(
        _check_pool_group(
            f"{label}.environmentalSnippets",
            payload.get("environmentalSnippets"),
            [band.value for band in ElevationBand],
        )
    )
    errors.extend(
        _check_pool_group(
            f"{label}.situationalSnippets",
            payload.get("situationalSnippets"),
            [situation.value for situation in Situation],
        )
    )

    previous = 0
    for index, beat in enumerate(payload.get("fixedEvents") or ()):
        beat_label = f"{label}.fixedEvents[{index}]"
        if not isinstance(beat, Mapping):
            errors.append(f"{beat_label}: must be an object")
            continue
        distance = beat.get("distance")
        if isinstance(distance, bool) or not isinstance(distance, int):
            errors.append(f"{beat_label}: distance must be an integer")
        else:
            if not 0 < distance < TARGET_DISTANCE:
                errors.append(f"{beat_label}: distance {distance} outside (0, {TARGET_DISTANCE})")
            if distance <= previous:
                errors.append(f"{beat_label}: distances must be strictly ascending")
            elif previous and distance - previous <= TRAVEL_DISTANCE_MAX:
                # One travel step must never cross two thresholds.
                errors.append(
                    f"{beat_label}: distance {distance} within {TRAVEL_DISTANCE_MAX} miles of the previous threshold"
                )
            previous = distance
        errors.extend(_check_event(beat_label, beat.get("event")))
    return errors


def validate_catalog(leads: Sequence[str], journeys: Sequence[Mapping[str, Any]]) -> list[str]:
    errors: list[str] = []
    if not leads:
        errors.append("leads: pool must be a non-empty list")
    elif any(not str(line or "").strip() for line in leads):
        errors.append("leads: pool contains blank fragments")
    if not journeys:
        errors.append("catalog has no journeys")

    seen: set[Any] = set()
    for payload in journeys:
        if not isinstance(payload, Mapping):
            errors.append("journey entry must be an object")
            continue
        journey_id = payload.get("id")
        if journey_id in seen:
            errors.append(f"journey {journey_id}: duplicate id")
        seen.add(journey_id)
        errors.extend(validate_journey(payload))
    return errors


def validate_catalog_file(path: str | Path) -> list[str]:
    source = Path(path)
    if not source.exists():
        return [f"File not found: {source}"]

    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        return [f"Invalid JSON: {exc}"]
    if not isinstance(payload, dict):
        return ["Catalog root must be an object"]

    return validate_catalog(payload.get("leads") or [], payload.get("journeys") or [])


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.path:
        errors = validate_catalog_file(args.path)
    else:
        from pilgrimage.infrastructure.inmemory.journey_fragments import JOURNEY_DEFINITIONS, NARRATIVE_LEADS

        errors = validate_catalog(NARRATIVE_LEADS, JOURNEY_DEFINITIONS)
    if errors:
        print(f"Journey content invalid ({len(errors)} errors):")
        for message in errors:
            print(f"- {message}")
        return 1

    print("Journey content valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
