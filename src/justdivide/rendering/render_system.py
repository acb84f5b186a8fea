from __future__ import annotations

from dataclasses import dataclass
from typing import List

from esper import World

from justdivide.components.game_state import GameMode
from justdivide.components.tile_origin import TileOrigin
from justdivide.constants import (
    HEADER_HEIGHT,
    HINT_COLOR,
    PANEL_COLOR,
    SLOT_BORDER_COLOR,
    SLOT_COLOR,
    TEXT_COLOR,
)
from justdivide.events.bus import EVENT_ACTION_REJECTED, EVENT_TICK, EVENT_TILE_PLACED, EventBus
from justdivide.systems.board_ops import PlacementOutcome
from justdivide.systems.timer_system import format_elapsed
from justdivide.ui.layout import compute_board_geometry, compute_side_panel, tile_color
from justdivide.utils.game_state import get_board, get_game_state, get_hints, get_keep, get_progress, get_queue

FLOAT_DURATION = 0.8
OUTCOME_LABELS = {
    PlacementOutcome.MATCHED: "MATCH!",
    PlacementOutcome.DIVIDED: "DIVIDE!",
}


@dataclass(slots=True)
class FloatingText:
    text: str
    cell_index: int
    remaining: float = FLOAT_DURATION


class RenderSystem:
    """Draws the board, side panel and header from world state.

    Reads state only; flat shapes and text, no textures.
    """

    def __init__(self, world: World, event_bus: EventBus, window, input_system=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.input_system = input_system
        self.floating: List[FloatingText] = []
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_TILE_PLACED, self.on_tile_placed)
        self.event_bus.subscribe(EVENT_ACTION_REJECTED, self.on_action_rejected)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 0.0) or 0.0
        for item in self.floating:
            item.remaining -= dt
        self.floating = [item for item in self.floating if item.remaining > 0]

    def on_tile_placed(self, sender, **kwargs):
        label = OUTCOME_LABELS.get(kwargs.get('outcome'))
        if label is not None:
            self.floating.append(FloatingText(label, kwargs['cell_index']))

    def on_action_rejected(self, sender, **kwargs):
        cell_index = kwargs.get('cell_index')
        if cell_index is not None:
            self.floating.append(FloatingText("NO!", cell_index))

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade

        width, height = self.window.width, self.window.height
        geometry = compute_board_geometry(width, height)
        panel = compute_side_panel(width, height)
        board = get_board(self.world)
        hints = get_hints(self.world)
        progress = get_progress(self.world)
        state = get_game_state(self.world)

        # Header
        top = height - 40
        arcade.draw_text("JUST DIVIDE", 40, top, TEXT_COLOR, 32, bold=True)
        arcade.draw_text(
            f"LEVEL {progress.level}    SCORE {progress.score}    BEST {progress.best_score}    "
            f"{format_elapsed(state.elapsed_seconds)}    {state.difficulty.name}",
            40, top - 45, TEXT_COLOR, 16,
        )
        arcade.draw_text(
            "Click a cell to place. Z undo  G hints  P pause  R restart  1/2/3 difficulty  K keep  T trash",
            40, height - HEADER_HEIGHT + 10, TEXT_COLOR, 11,
        )

        # Board
        for index, value in enumerate(board.cells):
            left, bottom, w, h = geometry.cell_rect(index)
            arcade.draw_lbwh_rectangle_filled(left, bottom, w, h, SLOT_COLOR)
            arcade.draw_lbwh_rectangle_outline(left, bottom, w, h, SLOT_BORDER_COLOR, 3)
            if value is not None:
                self._draw_tile(arcade, left, bottom, w, value)
            if index in hints.cells:
                arcade.draw_lbwh_rectangle_outline(left, bottom, w, h, HINT_COLOR, 4)

        # Side panel
        self._draw_slot(arcade, "KEEP", panel.keep, get_keep(self.world).value,
                        selected=self._selected() is TileOrigin.KEEP)
        queue = get_queue(self.world).values
        self._draw_slot(arcade, "NEXT", panel.queue, queue[0] if queue else None,
                        selected=self._selected() is TileOrigin.QUEUE)
        left, bottom, w, h = panel.queue
        arcade.draw_text("then " + "  ".join(str(v) for v in queue[1:]), left, bottom - 22, TEXT_COLOR, 12)
        self._draw_slot(arcade, f"TRASH x{progress.trash_uses}", panel.trash, None)

        for item in self.floating:
            left, bottom, w, h = geometry.cell_rect(item.cell_index)
            rise = (FLOAT_DURATION - item.remaining) * 60
            arcade.draw_text(item.text, left + w / 2, bottom + h / 2 + rise, TEXT_COLOR, 18,
                             anchor_x="center", bold=True)

        if state.mode != GameMode.PLAYING:
            self._draw_overlay(arcade, width, height, state.mode, progress.score, progress.best_score)

    def _selected(self):
        return getattr(self.input_system, "selected", TileOrigin.QUEUE)

    def _draw_tile(self, arcade, left, bottom, size, value):
        pad = 6
        arcade.draw_lbwh_rectangle_filled(left + pad, bottom + pad, size - 2 * pad, size - 2 * pad, tile_color(value))
        arcade.draw_text(str(value), left + size / 2, bottom + size / 2, (255, 255, 255), size * 0.3,
                         anchor_x="center", anchor_y="center", bold=True)

    def _draw_slot(self, arcade, label, rect, value, selected=False):
        left, bottom, w, h = rect
        arcade.draw_lbwh_rectangle_filled(left - 10, bottom - 10, w + 20, h + 40, PANEL_COLOR)
        arcade.draw_text(label, left + w / 2, bottom + h + 8, TEXT_COLOR, 14, anchor_x="center", bold=True)
        arcade.draw_lbwh_rectangle_filled(left, bottom, w, h, SLOT_COLOR)
        if value is not None:
            self._draw_tile(arcade, left, bottom, w, value)
        border = HINT_COLOR if selected and value is not None else SLOT_BORDER_COLOR
        arcade.draw_lbwh_rectangle_outline(left, bottom, w, h, border, 3)

    def _draw_overlay(self, arcade, width, height, mode, score, best):
        arcade.draw_lbwh_rectangle_filled(0, 0, width, height, (0, 0, 0, 180))
        title = "GAME OVER" if mode == GameMode.GAME_OVER else "PAUSED"
        arcade.draw_text(title, width / 2, height / 2 + 40, (255, 255, 255), 56, anchor_x="center", bold=True)
        arcade.draw_text(f"Score: {score} (Best: {best})", width / 2, height / 2 - 20, (255, 255, 255), 28,
                         anchor_x="center")
        hint = "Press R to Restart" if mode == GameMode.GAME_OVER else "Press P to Resume"
        arcade.draw_text(hint, width / 2, height / 2 - 80, (255, 255, 0), 24, anchor_x="center")
