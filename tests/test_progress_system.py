import pytest

from justdivide.events.bus import (
    EVENT_BEST_SCORE_CHANGED,
    EVENT_LEVEL_UP,
    EVENT_TRASH_USES_CHANGED,
    EventBus,
)
from justdivide.systems.best_score_store import InMemoryBestScoreStore
from justdivide.systems.progress_system import ProgressTracker, is_game_over, level_for_score
from justdivide.utils.game_state import get_progress
from justdivide.world import create_world


def _tracker(store=None):
    bus = EventBus()
    world = create_world(bus)
    return bus, world, ProgressTracker(world, bus, store)


def test_level_for_score_thresholds():
    assert level_for_score(0) == 1
    assert level_for_score(9) == 1
    assert level_for_score(10) == 2
    assert level_for_score(19) == 2
    assert level_for_score(20) == 3


def test_reaching_ten_levels_up_once():
    bus, world, tracker = _tracker()
    levels = []
    bus.subscribe(EVENT_LEVEL_UP, lambda sender, **payload: levels.append(payload))
    progress = get_progress(world)
    assert progress.trash_uses == 2

    tracker.apply_score_delta(10)
    assert tracker.recompute_level()
    assert progress.level == 2
    assert progress.trash_uses == 3

    for _ in range(9):
        tracker.apply_score_delta(1)
        assert not tracker.recompute_level()
    assert progress.score == 19
    assert progress.level == 2
    assert progress.trash_uses == 3
    assert levels == [{"level": 2, "trash_uses": 3}]


def test_skipping_levels_grants_a_single_trash_use():
    bus, world, tracker = _tracker()
    tracker.apply_score_delta(32)
    tracker.recompute_level()
    progress = get_progress(world)
    assert progress.level == 4
    assert progress.trash_uses == 3


def test_negative_score_delta_is_a_defect():
    _, _, tracker = _tracker()
    with pytest.raises(AssertionError):
        tracker.apply_score_delta(-1)


def test_use_trash_until_exhausted():
    bus, world, tracker = _tracker()
    changes = []
    bus.subscribe(EVENT_TRASH_USES_CHANGED, lambda sender, **payload: changes.append(payload["trash_uses"]))
    assert tracker.use_trash()
    assert tracker.use_trash()
    assert not tracker.use_trash()
    assert get_progress(world).trash_uses == 0
    assert changes == [1, 0]


def test_best_score_saved_only_when_beaten():
    store = InMemoryBestScoreStore(15)
    bus, world, tracker = _tracker(store)
    best_events = []
    bus.subscribe(EVENT_BEST_SCORE_CHANGED, lambda sender, **payload: best_events.append(payload["best_score"]))
    assert tracker.load_best_score() == 15

    tracker.apply_score_delta(12)
    assert not tracker.update_best_score()
    assert store.saves == 0

    tracker.apply_score_delta(8)
    assert tracker.update_best_score()
    assert store.best_score == 20
    assert get_progress(world).best_score == 20
    assert best_events == [20]


def test_game_over_requires_full_board():
    cells = [7] * 16
    cells[4] = None
    assert not is_game_over(cells, [11])


def test_game_over_when_no_candidate_fits():
    cells = [7, 11, 13, 17] * 4
    assert is_game_over(cells, [6, 10])


def test_not_game_over_when_keep_fits():
    cells = [7, 11, 13, 17] * 4
    assert not is_game_over(cells, [6, 14])


def test_game_over_with_no_candidates():
    assert is_game_over([3] * 16, [])
