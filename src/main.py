"""Entry point for the Just Divide puzzle.

Sets up world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from justdivide.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from justdivide.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from justdivide.rendering.render_system import RenderSystem
from justdivide.systems.best_score_store import JsonBestScoreStore
from justdivide.systems.game_controller import GameController
from justdivide.ui.input_system import InputSystem
from justdivide.world import create_world


class JustDivideWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.controller = GameController(self.world, self.event_bus, best_score_store=JsonBestScoreStore())
        self.input_system = InputSystem(self.event_bus, self.world, window_size=lambda: (self.width, self.height))
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.input_system)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        # Printable arcade key codes match their ASCII values.
        if 32 <= symbol < 127:
            self.event_bus.emit(EVENT_KEY_PRESS, key=chr(symbol).upper())


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    JustDivideWindow()
    run()


if __name__ == "__main__":
    main()
