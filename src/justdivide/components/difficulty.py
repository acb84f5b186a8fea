"""Difficulty tiers and the tile values each one can spawn."""
from enum import Enum
from typing import Dict, Tuple


class Difficulty(Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


DIFFICULTY_VALUES: Dict[Difficulty, Tuple[int, ...]] = {
    Difficulty.EASY: (2, 3, 4, 5, 6, 8, 9, 10),
    Difficulty.MEDIUM: (2, 3, 4, 5, 6, 8, 9, 10, 12, 15, 16, 20),
    Difficulty.HARD: (3, 4, 5, 6, 8, 9, 10, 12, 15, 16, 20, 24, 25, 30, 32),
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM
