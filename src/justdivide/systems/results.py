"""Values returned by GameController actions.

Rejections are ordinary results, not exceptions: the presentation layer uses
them to snap a dragged tile back or bounce the trash can.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from justdivide.components.tile_origin import TileOrigin
from justdivide.systems.board_ops import PlacementOutcome, PlacementResult


class PlayerAction(Enum):
    PLACE = "place"
    SWAP_KEEP = "swap_keep"
    TRASH = "trash"
    UNDO = "undo"
    SET_DIFFICULTY = "set_difficulty"
    TOGGLE_HINTS = "toggle_hints"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


class RejectionReason(Enum):
    INVALID_PLACEMENT = "invalid_placement"
    TRASH_EXHAUSTED = "trash_exhausted"
    UNDO_UNAVAILABLE = "undo_unavailable"
    KEEP_EMPTY = "keep_empty"
    NO_ACTIVE_TILE = "no_active_tile"
    NOT_PLAYING = "not_playing"


@dataclass(frozen=True, slots=True)
class ActionResult:
    action: PlayerAction
    accepted: bool
    reason: Optional[RejectionReason] = None
    placement: Optional[PlacementResult] = None
    origin: Optional[TileOrigin] = None
    game_over: bool = False

    @classmethod
    def ok(cls, action: PlayerAction, **kwargs) -> "ActionResult":
        return cls(action=action, accepted=True, **kwargs)

    @classmethod
    def rejected(cls, action: PlayerAction, reason: RejectionReason, **kwargs) -> "ActionResult":
        return cls(action=action, accepted=False, reason=reason, **kwargs)

    @property
    def outcome(self) -> Optional[PlacementOutcome]:
        return self.placement.outcome if self.placement is not None else None

    @property
    def score_delta(self) -> int:
        if self.placement is None or not self.accepted:
            return 0
        return self.placement.score_delta

    @property
    def cell_index(self) -> Optional[int]:
        return self.placement.cell_index if self.placement is not None else None
