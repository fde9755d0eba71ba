from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class FragmentDraw:
    index: int
    value: str
    did_reset: bool = False


def pick_unused(pool: Sequence[str], used_indices: Sequence[int], rng: random.Random) -> FragmentDraw:
    """Draw a fragment whose index is not in ``used_indices``.

    When every index has been used the draw falls back to the whole pool and
    flags ``did_reset`` so the caller can restart that category's history.
    """

    if not pool:
        raise ValueError("Cannot draw a fragment from an empty pool.")

    used = {int(index) for index in used_indices}
    remaining = [index for index in range(len(pool)) if index not in used]
    if remaining:
        index = rng.choice(remaining)
        return FragmentDraw(index=index, value=pool[index], did_reset=False)

    index = rng.choice(list(range(len(pool))))
    return FragmentDraw(index=index, value=pool[index], did_reset=True)
