from __future__ import annotations

from typing import FrozenSet, Optional, Sequence

from esper import World

from justdivide.constants import GRID_COLS, GRID_ROWS
from justdivide.events.bus import EVENT_HINTS_UPDATED, EventBus
from justdivide.systems.board_ops import can_merge, empty_indices, neighbour_indices
from justdivide.utils.game_state import get_board, get_hints, get_keep, get_queue


def compute_hint_cells(
    cells: Sequence[Optional[int]],
    active_value: Optional[int],
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> FrozenSet[int]:
    """Empty cells with at least one orthogonal neighbour the active tile can resolve against."""
    if active_value is None:
        return frozenset()
    hinted = set()
    for index in empty_indices(cells):
        if any(can_merge(active_value, cells[n]) for n in neighbour_indices(index, rows, cols)):
            hinted.add(index)
    return frozenset(hinted)


class HintSystem:
    """Keeps HintState in sync with the board and the active tile.

    The active tile is the queue front, falling back to the kept tile. Hints are
    advisory only; disabling them empties the cell set without touching the board.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def active_value(self) -> Optional[int]:
        front = get_queue(self.world).front()
        if front is not None:
            return front
        return get_keep(self.world).value

    def refresh(self) -> FrozenSet[int]:
        hints = get_hints(self.world)
        active = self.active_value()
        if hints.enabled:
            board = get_board(self.world)
            hints.cells = compute_hint_cells(board.cells, active, rows=board.rows, cols=board.cols)
        else:
            hints.cells = frozenset()
        self.event_bus.emit(EVENT_HINTS_UPDATED, cells=hints.cells, enabled=hints.enabled, active_value=active)
        return hints.cells

    def set_enabled(self, enabled: bool) -> FrozenSet[int]:
        get_hints(self.world).enabled = bool(enabled)
        return self.refresh()

    def toggle(self) -> bool:
        hints = get_hints(self.world)
        self.set_enabled(not hints.enabled)
        return hints.enabled
