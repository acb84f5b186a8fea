from __future__ import annotations

import random
from typing import List

from justdivide.components.difficulty import DIFFICULTY_VALUES, Difficulty
from justdivide.constants import QUEUE_LENGTH


class TileSource:
    """Draws tile values for a difficulty tier, independently and uniformly per call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def next_value(self, difficulty: Difficulty) -> int:
        return self._rng.choice(DIFFICULTY_VALUES[difficulty])

    def refill_queue(self, queue: List[int], difficulty: Difficulty) -> List[int]:
        """Append fresh values until the queue holds QUEUE_LENGTH tiles; returns the new values."""
        added: List[int] = []
        while len(queue) < QUEUE_LENGTH:
            value = self.next_value(difficulty)
            queue.append(value)
            added.append(value)
        return added
