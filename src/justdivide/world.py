import random

from esper import World

from justdivide.components.board import Board
from justdivide.components.difficulty import DEFAULT_DIFFICULTY, Difficulty
from justdivide.components.game_state import GameMode, GameState
from justdivide.components.hint_state import HintState
from justdivide.components.keep_slot import KeepSlot
from justdivide.components.progress import Progress
from justdivide.components.tile_queue import TileQueue
from justdivide.components.undo_history import UndoHistory
from justdivide.constants import MAX_UNDO
from justdivide.events.bus import EventBus
from justdivide.systems.tile_source import TileSource


def create_world(
    event_bus: EventBus,
    *,
    difficulty: Difficulty = DEFAULT_DIFFICULTY,
    history_capacity: int = MAX_UNDO,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding one game entity with every piece of puzzle state.

    The queue starts full; everything else starts empty. Systems look the
    components up through justdivide.utils.game_state.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    queue = TileQueue()
    TileSource(world.random).refill_queue(queue.values, difficulty)

    world.create_entity(
        GameState(mode=GameMode.PLAYING, difficulty=difficulty),
        Board(),
        queue,
        KeepSlot(),
        Progress(),
        HintState(),
        UndoHistory(capacity=history_capacity),
    )
    return world
