from dataclasses import dataclass, field
from typing import List, Optional

from justdivide.constants import GRID_COLS, GRID_ROWS, GRID_SIZE


def _empty_cells() -> List[Optional[int]]:
    return [None] * GRID_SIZE


@dataclass(slots=True)
class Board:
    """The 4x4 grid, stored row-major.

    cells: tile value per cell, None when empty. Index i maps to (i // cols, i % cols).
    """
    cells: List[Optional[int]] = field(default_factory=_empty_cells)
    rows: int = GRID_ROWS
    cols: int = GRID_COLS

    def __post_init__(self) -> None:
        assert len(self.cells) == self.rows * self.cols, "board must hold exactly rows*cols cells"
