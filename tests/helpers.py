from __future__ import annotations

import random
from typing import Optional, Sequence

from justdivide.components.difficulty import Difficulty
from justdivide.events.bus import EventBus
from justdivide.systems.best_score_store import InMemoryBestScoreStore
from justdivide.systems.game_controller import GameController
from justdivide.utils.game_state import get_board, get_keep, get_progress, get_queue
from justdivide.world import create_world


def make_game(
    *,
    queue: Sequence[int] | None = None,
    cells: Sequence[Optional[int]] | None = None,
    keep: int | None = None,
    score: int | None = None,
    trash_uses: int | None = None,
    difficulty: Difficulty = Difficulty.MEDIUM,
    history_capacity: int = 10,
    best_score: int = 0,
    seed: int = 1234,
):
    """Build a bus, world and controller, then overwrite whichever state was given."""

    bus = EventBus()
    world = create_world(bus, difficulty=difficulty, history_capacity=history_capacity, rng=random.Random(seed))
    store = InMemoryBestScoreStore(best_score)
    controller = GameController(world, bus, best_score_store=store)
    if queue is not None:
        get_queue(world).values = list(queue)
    if cells is not None:
        get_board(world).cells = list(cells)
    if keep is not None:
        get_keep(world).value = keep
    progress = get_progress(world)
    if score is not None:
        progress.score = score
        progress.level = score // 10 + 1
    if trash_uses is not None:
        progress.trash_uses = trash_uses
    controller.hints.refresh()
    return bus, world, controller, store
