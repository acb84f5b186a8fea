"""Atomic player actions over the puzzle state."""
from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Tuple

from esper import World

from justdivide.components.difficulty import DEFAULT_DIFFICULTY, Difficulty
from justdivide.components.game_state import GameMode
from justdivide.components.tile_origin import TileOrigin
from justdivide.constants import STARTING_TRASH_USES
from justdivide.events.bus import (
    EVENT_ACTION_REJECTED,
    EVENT_BOARD_CHANGED,
    EVENT_DIFFICULTY_CHANGED,
    EVENT_DIFFICULTY_REQUEST,
    EVENT_GAME_OVER,
    EVENT_GAME_RESTARTED,
    EVENT_HINTS_TOGGLE_REQUEST,
    EVENT_KEEP_CHANGED,
    EVENT_KEEP_SWAP_REQUEST,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_PLACE_REQUEST,
    EVENT_QUEUE_CHANGED,
    EVENT_RESTART_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_PLACED,
    EVENT_TILE_TRASHED,
    EVENT_TIMER_UPDATED,
    EVENT_TRASH_REQUEST,
    EVENT_TRASH_USES_CHANGED,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from justdivide.systems import board_ops
from justdivide.systems.best_score_store import BestScoreStore
from justdivide.systems.hint_system import HintSystem
from justdivide.systems.history_system import HistoryManager
from justdivide.systems.progress_system import ProgressTracker
from justdivide.systems.results import ActionResult, PlayerAction, RejectionReason
from justdivide.systems.tile_source import TileSource
from justdivide.systems.timer_system import TimerSystem
from justdivide.utils.game_state import (
    get_board,
    get_game_state,
    get_hints,
    get_keep,
    get_progress,
    get_queue,
    set_game_mode,
)

logger = logging.getLogger(__name__)


class GameController:
    """Orchestrates board, queue, keep, history, hints and progress.

    Every grid-affecting action snapshots first and drops the snapshot again if
    the action turns out to be rejected, so an action is either fully applied
    or leaves no trace. Board actions are only accepted while PLAYING; once the
    game is over only restart() brings it back.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        best_score_store: BestScoreStore | None = None,
        tile_source: TileSource | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.tile_source = tile_source or TileSource(getattr(world, "random", None))
        self.history = HistoryManager(world)
        self.hints = HintSystem(world, event_bus)
        self.progress = ProgressTracker(world, event_bus, best_score_store)
        self.timer = TimerSystem(world, event_bus)

        self.event_bus.subscribe(EVENT_PLACE_REQUEST, self.on_place_request)
        self.event_bus.subscribe(EVENT_KEEP_SWAP_REQUEST, self.on_keep_swap_request)
        self.event_bus.subscribe(EVENT_TRASH_REQUEST, self.on_trash_request)
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self.on_undo_request)
        self.event_bus.subscribe(EVENT_DIFFICULTY_REQUEST, self.on_difficulty_request)
        self.event_bus.subscribe(EVENT_HINTS_TOGGLE_REQUEST, self.on_hints_toggle_request)
        self.event_bus.subscribe(EVENT_PAUSE_TOGGLE_REQUEST, self.on_pause_toggle_request)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)

        self.progress.load_best_score()
        self.hints.refresh()

    # Read-only views ----------------------------------------------------

    @property
    def grid(self) -> Tuple[Optional[int], ...]:
        return tuple(get_board(self.world).cells)

    @property
    def queue(self) -> Tuple[int, ...]:
        return tuple(get_queue(self.world).values)

    @property
    def active_value(self) -> Optional[int]:
        return get_queue(self.world).front()

    @property
    def keep(self) -> Optional[int]:
        return get_keep(self.world).value

    @property
    def score(self) -> int:
        return get_progress(self.world).score

    @property
    def level(self) -> int:
        return get_progress(self.world).level

    @property
    def trash_uses(self) -> int:
        return get_progress(self.world).trash_uses

    @property
    def best_score(self) -> int:
        return get_progress(self.world).best_score

    @property
    def hint_cells(self) -> FrozenSet[int]:
        return get_hints(self.world).cells

    @property
    def hints_enabled(self) -> bool:
        return get_hints(self.world).enabled

    @property
    def mode(self) -> GameMode:
        return get_game_state(self.world).mode

    @property
    def difficulty(self) -> Difficulty:
        return get_game_state(self.world).difficulty

    @property
    def elapsed_seconds(self) -> float:
        return get_game_state(self.world).elapsed_seconds

    @property
    def is_game_over(self) -> bool:
        return self.mode == GameMode.GAME_OVER

    @property
    def history_depth(self) -> int:
        return self.history.depth

    # Player actions -----------------------------------------------------

    def place_active(self, cell_index: int) -> ActionResult:
        return self.place(TileOrigin.QUEUE, cell_index)

    def place_keep(self, cell_index: int) -> ActionResult:
        return self.place(TileOrigin.KEEP, cell_index)

    def place(self, origin: TileOrigin, cell_index: int) -> ActionResult:
        board = get_board(self.world)
        if not 0 <= cell_index < len(board.cells):
            raise IndexError(f"cell index {cell_index} outside board")
        if self.mode != GameMode.PLAYING:
            return self._reject(PlayerAction.PLACE, RejectionReason.NOT_PLAYING, cell_index=cell_index, origin=origin)
        if origin is TileOrigin.QUEUE:
            value = get_queue(self.world).front()
            missing = RejectionReason.NO_ACTIVE_TILE
        else:
            value = get_keep(self.world).value
            missing = RejectionReason.KEEP_EMPTY
        if value is None:
            return self._reject(PlayerAction.PLACE, missing, cell_index=cell_index, origin=origin)

        self.history.push_snapshot()
        placement = board_ops.place(board, cell_index, value)
        if not placement.accepted:
            self.history.discard_last()
            return self._reject(
                PlayerAction.PLACE,
                RejectionReason.INVALID_PLACEMENT,
                cell_index=cell_index,
                origin=origin,
                placement=placement,
            )

        if origin is TileOrigin.QUEUE:
            self._consume_queue_front(reason="placed")
        else:
            get_keep(self.world).value = None
            self.event_bus.emit(EVENT_KEEP_CHANGED, value=None)

        self.event_bus.emit(
            EVENT_TILE_PLACED,
            cell_index=cell_index,
            value=value,
            origin=origin,
            outcome=placement.outcome,
            result_value=placement.result_value,
            score_delta=placement.score_delta,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=placement.outcome.value, cells=list(board.cells))
        logger.debug(
            "%s %d from %s at cell %d -> %s (+%d)",
            placement.outcome.value, value, origin.value, cell_index, placement.result_value, placement.score_delta,
        )

        self.progress.apply_score_delta(placement.score_delta)
        self.progress.recompute_level()
        self.progress.update_best_score()
        game_over = self._after_mutation()
        return ActionResult.ok(PlayerAction.PLACE, placement=placement, origin=origin, game_over=game_over)

    def swap_active_with_keep(self) -> ActionResult:
        if self.mode != GameMode.PLAYING:
            return self._reject(PlayerAction.SWAP_KEEP, RejectionReason.NOT_PLAYING)
        queue = get_queue(self.world)
        if queue.front() is None:
            return self._reject(PlayerAction.SWAP_KEEP, RejectionReason.NO_ACTIVE_TILE)

        self.history.push_snapshot()
        keep = get_keep(self.world)
        previous_keep = keep.value
        keep.value = queue.values.pop(0)
        if previous_keep is not None:
            queue.values.insert(0, previous_keep)
        self.tile_source.refill_queue(queue.values, self.difficulty)
        self.event_bus.emit(EVENT_KEEP_CHANGED, value=keep.value)
        self.event_bus.emit(EVENT_QUEUE_CHANGED, values=list(queue.values), reason="keep_swap")
        game_over = self._after_mutation()
        return ActionResult.ok(PlayerAction.SWAP_KEEP, game_over=game_over)

    def trash_active(self) -> ActionResult:
        if self.mode != GameMode.PLAYING:
            return self._reject(PlayerAction.TRASH, RejectionReason.NOT_PLAYING)
        queue = get_queue(self.world)
        if queue.front() is None:
            return self._reject(PlayerAction.TRASH, RejectionReason.NO_ACTIVE_TILE)

        self.history.push_snapshot()
        if not self.progress.use_trash():
            self.history.discard_last()
            return self._reject(PlayerAction.TRASH, RejectionReason.TRASH_EXHAUSTED)
        value = self._consume_queue_front(reason="trashed")
        self.event_bus.emit(EVENT_TILE_TRASHED, value=value, trash_uses=self.trash_uses)
        game_over = self._after_mutation()
        return ActionResult.ok(PlayerAction.TRASH, game_over=game_over)

    def undo(self) -> ActionResult:
        if self.mode != GameMode.PLAYING:
            return self._reject(PlayerAction.UNDO, RejectionReason.NOT_PLAYING)
        previous_score = self.score
        previous_trash = self.trash_uses
        snapshot = self.history.undo()
        if snapshot is None:
            return self._reject(PlayerAction.UNDO, RejectionReason.UNDO_UNAVAILABLE)

        self.history.restore(snapshot)
        self.event_bus.emit(EVENT_UNDO_APPLIED, remaining=self.history.depth)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="undo", cells=list(self.grid))
        self.event_bus.emit(EVENT_QUEUE_CHANGED, values=list(self.queue), reason="undo")
        self.event_bus.emit(EVENT_KEEP_CHANGED, value=self.keep)
        if self.score != previous_score:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=self.score, delta=self.score - previous_score)
        if self.trash_uses != previous_trash:
            self.event_bus.emit(EVENT_TRASH_USES_CHANGED, trash_uses=self.trash_uses, delta=self.trash_uses - previous_trash)
        self.event_bus.emit(EVENT_TIMER_UPDATED, seconds=int(self.elapsed_seconds))
        game_over = self._after_mutation()
        return ActionResult.ok(PlayerAction.UNDO, game_over=game_over)

    def set_difficulty(self, difficulty: Difficulty) -> ActionResult:
        if self.mode != GameMode.PLAYING:
            return self._reject(PlayerAction.SET_DIFFICULTY, RejectionReason.NOT_PLAYING)
        state = get_game_state(self.world)
        previous = state.difficulty
        state.difficulty = difficulty
        queue = get_queue(self.world)
        queue.values = []
        self.tile_source.refill_queue(queue.values, difficulty)
        self.event_bus.emit(EVENT_DIFFICULTY_CHANGED, previous=previous, difficulty=difficulty)
        self.event_bus.emit(EVENT_QUEUE_CHANGED, values=list(queue.values), reason="difficulty")
        game_over = self._after_mutation()
        return ActionResult.ok(PlayerAction.SET_DIFFICULTY, game_over=game_over)

    def toggle_hints(self) -> ActionResult:
        self.hints.toggle()
        return ActionResult.ok(PlayerAction.TOGGLE_HINTS)

    def toggle_pause(self) -> ActionResult:
        if self.mode == GameMode.PLAYING:
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)
        elif self.mode == GameMode.PAUSED:
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        else:
            return self._reject(PlayerAction.TOGGLE_PAUSE, RejectionReason.NOT_PLAYING)
        return ActionResult.ok(PlayerAction.TOGGLE_PAUSE)

    def restart(self, difficulty: Difficulty | None = None) -> ActionResult:
        """Start a fresh run; only the best score carries over."""
        tier = difficulty or DEFAULT_DIFFICULTY
        board = get_board(self.world)
        board.cells = [None] * (board.rows * board.cols)
        get_keep(self.world).value = None
        progress = get_progress(self.world)
        progress.score = 0
        progress.level = 1
        progress.trash_uses = STARTING_TRASH_USES
        self.history.clear()
        get_game_state(self.world).difficulty = tier
        queue = get_queue(self.world)
        queue.values = []
        self.tile_source.refill_queue(queue.values, tier)
        get_hints(self.world).enabled = True
        self.timer.reset()
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("restarted on %s", tier.name.lower())

        self.event_bus.emit(EVENT_GAME_RESTARTED, difficulty=tier)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="restart", cells=list(board.cells))
        self.event_bus.emit(EVENT_QUEUE_CHANGED, values=list(queue.values), reason="restart")
        self.event_bus.emit(EVENT_KEEP_CHANGED, value=None)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=0)
        self.event_bus.emit(EVENT_TRASH_USES_CHANGED, trash_uses=progress.trash_uses, delta=0)
        self.hints.refresh()
        return ActionResult.ok(PlayerAction.RESTART)

    # Event handlers -----------------------------------------------------

    def on_place_request(self, sender, **kwargs):
        cell_index = kwargs.get('cell_index')
        if cell_index is None:
            return
        origin = kwargs.get('origin') or TileOrigin.QUEUE
        self.place(origin, int(cell_index))

    def on_keep_swap_request(self, sender, **kwargs):
        self.swap_active_with_keep()

    def on_trash_request(self, sender, **kwargs):
        self.trash_active()

    def on_undo_request(self, sender, **kwargs):
        self.undo()

    def on_difficulty_request(self, sender, **kwargs):
        difficulty = kwargs.get('difficulty')
        if not isinstance(difficulty, Difficulty):
            return
        self.set_difficulty(difficulty)

    def on_hints_toggle_request(self, sender, **kwargs):
        self.toggle_hints()

    def on_pause_toggle_request(self, sender, **kwargs):
        self.toggle_pause()

    def on_restart_request(self, sender, **kwargs):
        difficulty = kwargs.get('difficulty')
        if difficulty is not None and not isinstance(difficulty, Difficulty):
            return
        self.restart(difficulty)

    # Internals ----------------------------------------------------------

    def _consume_queue_front(self, *, reason: str) -> int:
        queue = get_queue(self.world)
        value = queue.values.pop(0)
        self.tile_source.refill_queue(queue.values, self.difficulty)
        self.event_bus.emit(EVENT_QUEUE_CHANGED, values=list(queue.values), reason=reason)
        return value

    def _after_mutation(self) -> bool:
        """Refresh hints and move to GAME_OVER when no candidate tile can go anywhere."""
        self.hints.refresh()
        if self.mode != GameMode.PLAYING:
            return False
        candidates = [v for v in (get_queue(self.world).front(), get_keep(self.world).value) if v is not None]
        if not self.progress.is_game_over(get_board(self.world).cells, candidates):
            return False
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("game over at score %d (best %d)", self.score, self.best_score)
        self.event_bus.emit(EVENT_GAME_OVER, score=self.score, best_score=self.best_score)
        return True

    def _reject(self, action: PlayerAction, reason: RejectionReason, *, cell_index: int | None = None, **kwargs) -> ActionResult:
        logger.debug("%s rejected: %s", action.value, reason.value)
        self.event_bus.emit(EVENT_ACTION_REJECTED, action=action, reason=reason, cell_index=cell_index)
        return ActionResult.rejected(action, reason, **kwargs)
