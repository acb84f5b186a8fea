from __future__ import annotations

import logging
from typing import Type, TypeVar

from esper import World

from justdivide.components.board import Board
from justdivide.components.game_state import GameMode, GameState
from justdivide.components.hint_state import HintState
from justdivide.components.keep_slot import KeepSlot
from justdivide.components.progress import Progress
from justdivide.components.tile_queue import TileQueue
from justdivide.components.undo_history import UndoHistory
from justdivide.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

logger = logging.getLogger(__name__)

C = TypeVar("C")


def _singleton(world: World, component_type: Type[C]) -> C:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} component not found")


def get_game_state(world: World) -> GameState:
    return _singleton(world, GameState)


def get_board(world: World) -> Board:
    return _singleton(world, Board)


def get_queue(world: World) -> TileQueue:
    return _singleton(world, TileQueue)


def get_keep(world: World) -> KeepSlot:
    return _singleton(world, KeepSlot)


def get_progress(world: World) -> Progress:
    return _singleton(world, Progress)


def get_hints(world: World) -> HintState:
    return _singleton(world, HintState)


def get_history(world: World) -> UndoHistory:
    return _singleton(world, UndoHistory)


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the game mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return False
    state.mode = mode
    logger.debug("game mode %s -> %s", previous_mode.name, mode.name)
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True
