from justdivide.events.bus import EVENT_TICK, EVENT_TIMER_UPDATED
from justdivide.systems.timer_system import format_elapsed
from tests.helpers import make_game


def test_ticks_accumulate_while_playing():
    bus, _, controller, _ = make_game()
    seconds = []
    bus.subscribe(EVENT_TIMER_UPDATED, lambda sender, **payload: seconds.append(payload["seconds"]))
    for _ in range(25):
        bus.emit(EVENT_TICK, dt=0.1)
    assert abs(controller.elapsed_seconds - 2.5) < 1e-6
    assert seconds == [1, 2]


def test_ticks_ignored_while_paused():
    bus, _, controller, _ = make_game()
    controller.toggle_pause()
    bus.emit(EVENT_TICK, dt=5.0)
    assert controller.elapsed_seconds == 0
    controller.toggle_pause()
    bus.emit(EVENT_TICK, dt=1.5)
    assert controller.elapsed_seconds == 1.5


def test_undo_restores_elapsed_time():
    bus, _, controller, _ = make_game(queue=[4, 8, 2])
    bus.emit(EVENT_TICK, dt=3.0)
    controller.place_active(0)
    bus.emit(EVENT_TICK, dt=4.0)
    controller.undo()
    assert controller.elapsed_seconds == 3.0


def test_format_elapsed():
    assert format_elapsed(0) == "00:00"
    assert format_elapsed(65.7) == "01:05"
    assert format_elapsed(3600) == "60:00"
