from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from threading import Lock


@dataclass
class HandPicker:
    """Uniform server-hand source. Seeded once; ``seed=None`` uses OS entropy."""

    seed: int | None = None
    _random: random.Random = field(init=False, repr=False)
    _lock: Lock = field(init=False, repr=False, default_factory=Lock)

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def pick(self, accepted_hands: Sequence[str]) -> str:
        if not accepted_hands:
            raise ValueError("cannot pick from an empty hand set")
        with self._lock:
            return self._random.choice(accepted_hands)
