from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from justdivide.components.board import Board
from justdivide.constants import GRID_COLS, GRID_ROWS

Position = Tuple[int, int]


class PlacementOutcome(Enum):
    PLACED = "placed"
    MATCHED = "matched"
    DIVIDED = "divided"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class PlacementResult:
    outcome: PlacementOutcome
    cell_index: int
    value: int
    previous: Optional[int]
    result_value: Optional[int]
    score_delta: int = 0

    @property
    def accepted(self) -> bool:
        return self.outcome is not PlacementOutcome.REJECTED


def index_to_position(index: int, cols: int = GRID_COLS) -> Position:
    return divmod(index, cols)


def position_to_index(row: int, col: int, cols: int = GRID_COLS) -> int:
    return row * cols + col


def can_merge(a: Optional[int], b: Optional[int]) -> bool:
    """True when two tiles resolve: equal values, or the larger divisible by the smaller."""
    if a is None or b is None:
        return False
    if a == b:
        return True
    larger, smaller = max(a, b), min(a, b)
    return larger % smaller == 0


def neighbour_indices(index: int, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> List[int]:
    """Orthogonal neighbours in up, down, left, right order, bounds-checked."""
    row, col = index_to_position(index, cols)
    found: List[int] = []
    if row > 0:
        found.append(position_to_index(row - 1, col, cols))
    if row < rows - 1:
        found.append(position_to_index(row + 1, col, cols))
    if col > 0:
        found.append(position_to_index(row, col - 1, cols))
    if col < cols - 1:
        found.append(position_to_index(row, col + 1, cols))
    return found


def empty_indices(cells: Sequence[Optional[int]]) -> List[int]:
    return [i for i, value in enumerate(cells) if value is None]


def is_full(cells: Sequence[Optional[int]]) -> bool:
    return not empty_indices(cells)


def resolve(current: Optional[int], value: int) -> Tuple[PlacementOutcome, Optional[int], int]:
    """Return (outcome, new cell value, score delta) for dropping value onto current."""
    if current is None:
        return PlacementOutcome.PLACED, value, 0
    if value == current:
        return PlacementOutcome.MATCHED, None, value * 2
    larger, smaller = max(value, current), min(value, current)
    if larger % smaller == 0:
        # Quotient is always > 1 here: equal values took the MATCHED path above.
        return PlacementOutcome.DIVIDED, larger // smaller, larger
    return PlacementOutcome.REJECTED, current, 0


def place(board: Board, cell_index: int, value: int) -> PlacementResult:
    """Drop value onto a cell, mutating the board only when the move is legal."""
    assert len(board.cells) == board.rows * board.cols
    if not 0 <= cell_index < len(board.cells):
        raise IndexError(f"cell index {cell_index} outside board")
    if value <= 0:
        raise ValueError(f"tile values must be positive, got {value}")
    current = board.cells[cell_index]
    outcome, new_value, delta = resolve(current, value)
    if outcome is not PlacementOutcome.REJECTED:
        board.cells[cell_index] = new_value
    return PlacementResult(
        outcome=outcome,
        cell_index=cell_index,
        value=value,
        previous=current,
        result_value=board.cells[cell_index],
        score_delta=delta,
    )
