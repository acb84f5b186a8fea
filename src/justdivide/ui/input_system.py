from esper import World

from justdivide.components.difficulty import Difficulty
from justdivide.components.tile_origin import TileOrigin
from justdivide.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from justdivide.events.bus import (
    EventBus,
    EVENT_DIFFICULTY_REQUEST,
    EVENT_HINTS_TOGGLE_REQUEST,
    EVENT_KEEP_SWAP_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_PLACE_REQUEST,
    EVENT_RESTART_REQUEST,
    EVENT_TRASH_REQUEST,
    EVENT_UNDO_REQUEST,
)
from justdivide.ui.layout import target_at_point
from justdivide.utils.game_state import get_keep

KEY_BINDINGS = {
    "R": (EVENT_RESTART_REQUEST, {}),
    "Z": (EVENT_UNDO_REQUEST, {}),
    "G": (EVENT_HINTS_TOGGLE_REQUEST, {}),
    "P": (EVENT_PAUSE_TOGGLE_REQUEST, {}),
    "K": (EVENT_KEEP_SWAP_REQUEST, {}),
    "T": (EVENT_TRASH_REQUEST, {}),
    "1": (EVENT_DIFFICULTY_REQUEST, {"difficulty": Difficulty.EASY}),
    "2": (EVENT_DIFFICULTY_REQUEST, {"difficulty": Difficulty.MEDIUM}),
    "3": (EVENT_DIFFICULTY_REQUEST, {"difficulty": Difficulty.HARD}),
}


class InputSystem:
    """Turns clicks and key names into controller requests.

    Click flow replaces dragging: the queue tile is selected by default, clicking
    a filled keep slot selects the kept tile instead, clicking an empty keep slot
    parks the active tile there, and clicking a cell places whatever is selected.
    """

    def __init__(self, event_bus: EventBus, world: World, window_size=None):
        self.event_bus = event_bus
        self.world = world
        # Callable returning (width, height); defaults to the window constants.
        self._window_size = window_size
        self.selected: TileOrigin = TileOrigin.QUEUE
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def _size(self):
        if self._window_size is not None:
            return self._window_size()
        return WINDOW_WIDTH, WINDOW_HEIGHT

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', 1)
        if x is None or y is None or button != 1:
            return
        width, height = self._size()
        hit = target_at_point(width, height, x, y)
        if hit is None:
            self.selected = TileOrigin.QUEUE
            return
        target, index = hit
        if target == "cell":
            origin = self.selected
            self.selected = TileOrigin.QUEUE
            self.event_bus.emit(EVENT_PLACE_REQUEST, origin=origin, cell_index=index)
        elif target == "queue":
            self.selected = TileOrigin.QUEUE
        elif target == "keep":
            if get_keep(self.world).value is None:
                self.event_bus.emit(EVENT_KEEP_SWAP_REQUEST)
            elif self.selected is TileOrigin.KEEP:
                self.selected = TileOrigin.QUEUE
                self.event_bus.emit(EVENT_KEEP_SWAP_REQUEST)
            else:
                self.selected = TileOrigin.KEEP
        elif target == "trash":
            self.selected = TileOrigin.QUEUE
            self.event_bus.emit(EVENT_TRASH_REQUEST)

    def on_key_press(self, sender, **kwargs):
        key = kwargs.get('key')
        if not key:
            return
        binding = KEY_BINDINGS.get(str(key).upper())
        if binding is None:
            return
        name, payload = binding
        self.event_bus.emit(name, **payload)
