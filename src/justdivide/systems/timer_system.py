from esper import World

from justdivide.components.game_state import GameMode
from justdivide.events.bus import EVENT_TICK, EVENT_TIMER_UPDATED, EventBus
from justdivide.utils.game_state import get_game_state


def format_elapsed(seconds: float) -> str:
    whole = max(0, int(seconds))
    return f"{whole // 60:02d}:{whole % 60:02d}"


class TimerSystem:
    """Accumulates play time from tick events while the game is PLAYING."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt')
        if dt is None or dt <= 0:
            return
        state = get_game_state(self.world)
        if state.mode != GameMode.PLAYING:
            return
        before = int(state.elapsed_seconds)
        state.elapsed_seconds += float(dt)
        after = int(state.elapsed_seconds)
        if after != before:
            self.event_bus.emit(EVENT_TIMER_UPDATED, seconds=after)

    def reset(self) -> None:
        get_game_state(self.world).elapsed_seconds = 0.0
        self.event_bus.emit(EVENT_TIMER_UPDATED, seconds=0)
