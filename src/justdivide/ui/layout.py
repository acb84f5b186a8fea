from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from justdivide.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CELL_GAP,
    GRID_COLS,
    GRID_ROWS,
    HEADER_HEIGHT,
    SIDE_GAP,
    SIDE_PANEL_WIDTH,
    SIDE_SLOT_SIZE,
    TILE_COLOR_BANDS,
)

# (left, bottom, width, height) in window coordinates, origin bottom-left.
Rect = Tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    cell_size: int
    start_x: float
    start_y: float
    gap: int = CELL_GAP

    def cell_rect(self, index: int) -> Rect:
        row, col = divmod(index, GRID_COLS)
        # Row 0 is drawn at the top of the board.
        left = self.start_x + col * (self.cell_size + self.gap)
        bottom = self.start_y + (GRID_ROWS - 1 - row) * (self.cell_size + self.gap)
        return left, bottom, self.cell_size, self.cell_size

    @property
    def width(self) -> float:
        return GRID_COLS * self.cell_size + (GRID_COLS - 1) * self.gap

    @property
    def height(self) -> float:
        return GRID_ROWS * self.cell_size + (GRID_ROWS - 1) * self.gap


@dataclass(frozen=True, slots=True)
class SidePanelGeometry:
    keep: Rect
    queue: Rect
    trash: Rect


def compute_board_geometry(window_width: int, window_height: int) -> BoardGeometry:
    """Return the board placement, capped to a share of the window on both axes.

    The board sits left of the side panel and below the header.
    """
    max_board_w = min(window_width - SIDE_PANEL_WIDTH - 2 * SIDE_GAP, window_width * BOARD_MAX_WIDTH_PCT)
    max_board_h = min(window_height - HEADER_HEIGHT - BOTTOM_MARGIN, window_height * BOARD_MAX_HEIGHT_PCT)
    cell_by_w = (max_board_w - (GRID_COLS - 1) * CELL_GAP) / GRID_COLS
    cell_by_h = (max_board_h - (GRID_ROWS - 1) * CELL_GAP) / GRID_ROWS
    cell_size = int(min(cell_by_w, cell_by_h))
    if cell_size < 20:
        cell_size = 20
    total_width = GRID_COLS * cell_size + (GRID_COLS - 1) * CELL_GAP
    total_height = GRID_ROWS * cell_size + (GRID_ROWS - 1) * CELL_GAP
    start_x = (window_width - SIDE_PANEL_WIDTH - SIDE_GAP - total_width) / 2
    start_y = max(BOTTOM_MARGIN, (window_height - HEADER_HEIGHT - total_height) / 2)
    return BoardGeometry(cell_size=cell_size, start_x=start_x, start_y=start_y)


def compute_side_panel(window_width: int, window_height: int) -> SidePanelGeometry:
    center_x = window_width - SIDE_PANEL_WIDTH / 2 - SIDE_GAP / 2
    left = center_x - SIDE_SLOT_SIZE / 2
    usable = window_height - HEADER_HEIGHT
    keep_bottom = usable * 0.70
    queue_bottom = usable * 0.38
    trash_bottom = usable * 0.06
    return SidePanelGeometry(
        keep=(left, keep_bottom, SIDE_SLOT_SIZE, SIDE_SLOT_SIZE),
        queue=(left, queue_bottom, SIDE_SLOT_SIZE, SIDE_SLOT_SIZE),
        trash=(left, trash_bottom, SIDE_SLOT_SIZE, SIDE_SLOT_SIZE),
    )


def _contains(rect: Rect, x: float, y: float) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height


def cell_at_point(geometry: BoardGeometry, x: float, y: float) -> Optional[int]:
    for index in range(GRID_ROWS * GRID_COLS):
        if _contains(geometry.cell_rect(index), x, y):
            return index
    return None


def target_at_point(window_width: int, window_height: int, x: float, y: float) -> Tuple[str, Optional[int]] | None:
    """Classify a click as ('cell', index), ('keep', None), ('queue', None) or ('trash', None)."""
    index = cell_at_point(compute_board_geometry(window_width, window_height), x, y)
    if index is not None:
        return "cell", index
    panel = compute_side_panel(window_width, window_height)
    for name in ("keep", "queue", "trash"):
        if _contains(getattr(panel, name), x, y):
            return name, None
    return None


def tile_color(value: int) -> Tuple[int, int, int]:
    for upper, color in TILE_COLOR_BANDS:
        if upper is None or value <= upper:
            return color
    return TILE_COLOR_BANDS[-1][1]
