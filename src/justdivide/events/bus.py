from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float
EVENT_TIMER_UPDATED = "timer_updated"        # payload: seconds=int


# ============================================================================
# INPUT & INTERACTION (requests routed to GameController)
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                      # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                          # payload: key=str
EVENT_PLACE_REQUEST = "place_request"                  # payload: origin=TileOrigin, cell_index=int
EVENT_KEEP_SWAP_REQUEST = "keep_swap_request"          # payload: None
EVENT_TRASH_REQUEST = "trash_request"                  # payload: None
EVENT_UNDO_REQUEST = "undo_request"                    # payload: None
EVENT_DIFFICULTY_REQUEST = "difficulty_request"        # payload: difficulty=Difficulty
EVENT_HINTS_TOGGLE_REQUEST = "hints_toggle_request"    # payload: None
EVENT_PAUSE_TOGGLE_REQUEST = "pause_toggle_request"    # payload: None
EVENT_RESTART_REQUEST = "restart_request"              # payload: difficulty=Difficulty|None


# ============================================================================
# BOARD & TILES
# ============================================================================
EVENT_TILE_PLACED = "tile_placed"            # payload: cell_index=int, value=int, origin=TileOrigin, outcome=PlacementOutcome, result_value=int|None, score_delta=int
EVENT_BOARD_CHANGED = "board_changed"        # payload: reason=str, cells=list[int|None]
EVENT_QUEUE_CHANGED = "queue_changed"        # payload: values=list[int], reason=str
EVENT_KEEP_CHANGED = "keep_changed"          # payload: value=int|None
EVENT_TILE_TRASHED = "tile_trashed"          # payload: value=int, trash_uses=int
EVENT_HINTS_UPDATED = "hints_updated"        # payload: cells=frozenset[int], enabled=bool, active_value=int|None


# ============================================================================
# PROGRESS
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_LEVEL_UP = "level_up"                        # payload: level=int, trash_uses=int
EVENT_TRASH_USES_CHANGED = "trash_uses_changed"    # payload: trash_uses=int, delta=int
EVENT_BEST_SCORE_CHANGED = "best_score_changed"    # payload: best_score=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_ACTION_REJECTED = "action_rejected"          # payload: action=str, reason=RejectionReason, cell_index=int|None
EVENT_UNDO_APPLIED = "undo_applied"                # payload: remaining=int
EVENT_DIFFICULTY_CHANGED = "difficulty_changed"    # payload: previous=Difficulty, difficulty=Difficulty
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: score=int, best_score=int
EVENT_GAME_RESTARTED = "game_restarted"            # payload: difficulty=Difficulty
