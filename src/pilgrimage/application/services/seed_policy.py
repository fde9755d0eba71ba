from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _normalize(val) for key, val in sorted(value.items(), key=lambda item: str(item[0]))}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def derive_seed(namespace: str, context: Mapping[str, Any]) -> int:
    """Stable 32-bit seed for ``namespace`` under ``context``.

    Used to give each restart of a seeded session its own reproducible
    generator.
    """

    payload = {"namespace": namespace, "context": _normalize(context)}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(serialized.encode("utf-8")).hexdigest()
    return int(digest, 16) % (2**32)


def expedition_seed(base_seed: int, run_index: int) -> int:
    return derive_seed("expedition.run", {"base_seed": int(base_seed), "run": int(run_index)})
