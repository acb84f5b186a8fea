from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from esper import World

from justdivide.components.progress import Progress
from justdivide.constants import POINTS_PER_LEVEL
from justdivide.events.bus import (
    EVENT_BEST_SCORE_CHANGED,
    EVENT_LEVEL_UP,
    EVENT_SCORE_CHANGED,
    EVENT_TRASH_USES_CHANGED,
    EventBus,
)
from justdivide.systems.best_score_store import BestScoreStore
from justdivide.systems.board_ops import can_merge, is_full
from justdivide.utils.game_state import get_progress

logger = logging.getLogger(__name__)


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def is_game_over(cells: Sequence[Optional[int]], candidates: Iterable[int]) -> bool:
    """True when the grid is full and no candidate tile resolves against any cell."""
    if not is_full(cells):
        return False
    active = [value for value in candidates if value is not None]
    if not active:
        return True
    return not any(can_merge(a, cell) for cell in cells for a in active)


class ProgressTracker:
    """Score, level thresholds, trash allowance and best score.

    Logic:
      - Each level-up grants exactly one extra trash use, even when a single
        placement jumps several levels.
      - Level only goes down through an undo restoring an earlier snapshot.
      - Whenever score passes the best score, the store is told immediately.
    """

    def __init__(self, world: World, event_bus: EventBus, best_score_store: BestScoreStore | None = None):
        self.world = world
        self.event_bus = event_bus
        self._store = best_score_store

    def _progress(self) -> Progress:
        return get_progress(self.world)

    def apply_score_delta(self, delta: int) -> int:
        assert delta >= 0, "score deltas from placements are never negative"
        progress = self._progress()
        if delta:
            progress.score += delta
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=progress.score, delta=delta)
        return progress.score

    def recompute_level(self) -> bool:
        progress = self._progress()
        new_level = level_for_score(progress.score)
        if new_level <= progress.level:
            return False
        progress.level = new_level
        progress.trash_uses += 1
        logger.info("level up to %d (trash uses %d)", progress.level, progress.trash_uses)
        self.event_bus.emit(EVENT_LEVEL_UP, level=progress.level, trash_uses=progress.trash_uses)
        self.event_bus.emit(EVENT_TRASH_USES_CHANGED, trash_uses=progress.trash_uses, delta=1)
        return True

    def use_trash(self) -> bool:
        progress = self._progress()
        if progress.trash_uses <= 0:
            return False
        progress.trash_uses -= 1
        self.event_bus.emit(EVENT_TRASH_USES_CHANGED, trash_uses=progress.trash_uses, delta=-1)
        return True

    def update_best_score(self) -> bool:
        progress = self._progress()
        if progress.score <= progress.best_score:
            return False
        progress.best_score = progress.score
        if self._store is not None:
            self._store.save_best_score(progress.best_score)
        self.event_bus.emit(EVENT_BEST_SCORE_CHANGED, best_score=progress.best_score)
        return True

    def load_best_score(self) -> int:
        progress = self._progress()
        if self._store is not None:
            progress.best_score = max(0, int(self._store.load_best_score()))
        return progress.best_score

    def is_game_over(self, cells: Sequence[Optional[int]], candidates: Iterable[int]) -> bool:
        return is_game_over(cells, candidates)
