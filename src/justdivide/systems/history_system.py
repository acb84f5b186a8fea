from __future__ import annotations

from esper import World

from justdivide.components.snapshot import Snapshot
from justdivide.components.undo_history import UndoHistory
from justdivide.utils.game_state import (
    get_board,
    get_game_state,
    get_history,
    get_keep,
    get_progress,
    get_queue,
)


class HistoryManager:
    """Bounded undo stack of full state snapshots.

    Callers push before mutating and call discard_last() when the action turns out
    to be a no-op, so every stored snapshot corresponds to a real change.
    """

    def __init__(self, world: World) -> None:
        self.world = world

    def _history(self) -> UndoHistory:
        return get_history(self.world)

    @property
    def depth(self) -> int:
        return len(self._history().snapshots)

    @property
    def capacity(self) -> int:
        return self._history().capacity

    def capture(self) -> Snapshot:
        board = get_board(self.world)
        progress = get_progress(self.world)
        return Snapshot(
            cells=tuple(board.cells),
            queue=tuple(get_queue(self.world).values),
            keep=get_keep(self.world).value,
            score=progress.score,
            level=progress.level,
            trash_uses=progress.trash_uses,
            elapsed_seconds=get_game_state(self.world).elapsed_seconds,
        )

    def push_snapshot(self) -> Snapshot:
        snapshot = self.capture()
        # deque(maxlen=capacity) drops the oldest entry on overflow.
        self._history().snapshots.append(snapshot)
        return snapshot

    def discard_last(self) -> None:
        snapshots = self._history().snapshots
        if snapshots:
            snapshots.pop()

    def undo(self) -> Snapshot | None:
        snapshots = self._history().snapshots
        if not snapshots:
            return None
        return snapshots.pop()

    def restore(self, snapshot: Snapshot) -> None:
        board = get_board(self.world)
        assert len(snapshot.cells) == len(board.cells)
        board.cells = list(snapshot.cells)
        get_queue(self.world).values = list(snapshot.queue)
        get_keep(self.world).value = snapshot.keep
        progress = get_progress(self.world)
        progress.score = snapshot.score
        progress.level = snapshot.level
        progress.trash_uses = snapshot.trash_uses
        get_game_state(self.world).elapsed_seconds = snapshot.elapsed_seconds

    def clear(self) -> None:
        self._history().snapshots.clear()
