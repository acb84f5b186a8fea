import pytest

from justdivide.components.undo_history import UndoHistory
from justdivide.events.bus import EventBus
from justdivide.systems.history_system import HistoryManager
from justdivide.utils.game_state import get_board, get_keep, get_progress, get_queue
from justdivide.world import create_world


def test_push_captures_copy_of_live_state():
    world = create_world(EventBus())
    history = HistoryManager(world)
    board = get_board(world)
    board.cells[0] = 4
    snapshot = history.push_snapshot()
    board.cells[0] = 8
    get_queue(world).values.append(99)
    assert snapshot.cells[0] == 4
    assert 99 not in snapshot.queue
    assert history.depth == 1


def test_undo_on_empty_history_returns_none():
    history = HistoryManager(create_world(EventBus()))
    assert history.undo() is None
    assert history.depth == 0


def test_history_is_bounded_and_evicts_oldest():
    world = create_world(EventBus(), history_capacity=10)
    history = HistoryManager(world)
    progress = get_progress(world)
    for score in range(25):
        progress.score = score
        history.push_snapshot()
        assert history.depth <= 10
    assert history.depth == 10
    popped = [history.undo().score for _ in range(10)]
    assert popped == list(range(24, 14, -1))
    assert history.undo() is None


def test_capacity_is_configurable():
    world = create_world(EventBus(), history_capacity=3)
    history = HistoryManager(world)
    for _ in range(5):
        history.push_snapshot()
    assert history.capacity == 3
    assert history.depth == 3


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        UndoHistory(capacity=0)


def test_discard_last_drops_most_recent_snapshot():
    world = create_world(EventBus())
    history = HistoryManager(world)
    get_progress(world).score = 1
    history.push_snapshot()
    get_progress(world).score = 2
    history.push_snapshot()
    history.discard_last()
    assert history.depth == 1
    assert history.undo().score == 1
    history.discard_last()
    assert history.depth == 0


def test_restore_writes_fresh_lists_back():
    world = create_world(EventBus())
    history = HistoryManager(world)
    get_board(world).cells[2] = 5
    get_keep(world).value = 9
    snapshot = history.push_snapshot()
    get_board(world).cells[2] = None
    get_keep(world).value = None
    history.restore(history.undo())
    assert get_board(world).cells[2] == 5
    assert get_keep(world).value == 9
    get_board(world).cells[2] = 1
    assert snapshot.cells[2] == 5
