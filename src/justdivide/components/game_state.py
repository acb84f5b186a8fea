"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto

from justdivide.components.difficulty import DEFAULT_DIFFICULTY, Difficulty


class GameMode(Enum):
    """High-level modes; only PLAYING accepts board actions."""
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing mode, difficulty and elapsed play time."""
    mode: GameMode = GameMode.PLAYING
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    elapsed_seconds: float = 0.0
