from justdivide.events.bus import EVENT_HINTS_UPDATED
from justdivide.systems.hint_system import compute_hint_cells
from tests.helpers import make_game


def _grid(**cells):
    grid = [None] * 16
    for key, value in cells.items():
        grid[int(key[1:])] = value
    return grid


def test_no_hints_on_empty_board():
    assert compute_hint_cells([None] * 16, 4) == frozenset()


def test_hints_mark_empty_neighbours_of_mergeable_tiles():
    grid = _grid(c5=8)
    assert compute_hint_cells(grid, 4) == frozenset({1, 4, 6, 9})


def test_hints_ignore_non_mergeable_neighbours():
    grid = _grid(c5=9)
    assert compute_hint_cells(grid, 4) == frozenset()


def test_hints_never_include_occupied_cells():
    grid = _grid(c0=4, c1=4)
    assert compute_hint_cells(grid, 2) == frozenset({2, 4, 5})


def test_hints_do_not_wrap_rows():
    grid = _grid(c3=6)
    assert compute_hint_cells(grid, 3) == frozenset({2, 7})


def test_no_active_value_means_no_hints():
    assert compute_hint_cells(_grid(c5=8), None) == frozenset()


def test_hint_system_falls_back_to_kept_tile():
    bus, world, controller, _ = make_game(queue=[], keep=5, cells=_grid(c0=10))
    assert controller.hints.active_value() == 5
    assert controller.hint_cells == frozenset({1, 4})


def test_toggle_hides_and_restores_hints():
    bus, world, controller, _ = make_game(queue=[4, 4, 4], cells=_grid(c5=8))
    updates = []
    bus.subscribe(EVENT_HINTS_UPDATED, lambda sender, **payload: updates.append(payload))
    assert controller.hint_cells == frozenset({1, 4, 6, 9})
    controller.toggle_hints()
    assert not controller.hints_enabled
    assert controller.hint_cells == frozenset()
    controller.toggle_hints()
    assert controller.hint_cells == frozenset({1, 4, 6, 9})
    assert [u["enabled"] for u in updates] == [False, True]
