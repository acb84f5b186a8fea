from justdivide.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from justdivide.ui.layout import (
    cell_at_point,
    compute_board_geometry,
    compute_side_panel,
    target_at_point,
    tile_color,
)


def _overlaps(a, b):
    al, ab, aw, ah = a
    bl, bb, bw, bh = b
    return al < bl + bw and bl < al + aw and ab < bb + bh and bb < ab + ah


def test_board_fits_inside_window():
    geometry = compute_board_geometry(WINDOW_WIDTH, WINDOW_HEIGHT)
    assert geometry.cell_size >= 20
    assert geometry.start_x >= 0
    assert geometry.start_y >= 0
    assert geometry.start_x + geometry.width <= WINDOW_WIDTH
    assert geometry.start_y + geometry.height <= WINDOW_HEIGHT


def test_row_zero_is_drawn_on_top():
    geometry = compute_board_geometry(WINDOW_WIDTH, WINDOW_HEIGHT)
    assert geometry.cell_rect(0)[1] > geometry.cell_rect(12)[1]
    assert geometry.cell_rect(0)[0] < geometry.cell_rect(3)[0]


def test_cell_hit_testing_matches_rects():
    geometry = compute_board_geometry(WINDOW_WIDTH, WINDOW_HEIGHT)
    for index in range(16):
        left, bottom, w, h = geometry.cell_rect(index)
        assert cell_at_point(geometry, left + w / 2, bottom + h / 2) == index
    gap_x = geometry.cell_rect(0)[0] + geometry.cell_size + geometry.gap / 2
    gap_y = geometry.cell_rect(0)[1] + geometry.cell_size / 2
    assert cell_at_point(geometry, gap_x, gap_y) is None


def test_side_panel_does_not_overlap_board():
    geometry = compute_board_geometry(WINDOW_WIDTH, WINDOW_HEIGHT)
    board_rect = (geometry.start_x, geometry.start_y, geometry.width, geometry.height)
    panel = compute_side_panel(WINDOW_WIDTH, WINDOW_HEIGHT)
    for rect in (panel.keep, panel.queue, panel.trash):
        assert not _overlaps(rect, board_rect)
    assert not _overlaps(panel.keep, panel.queue)
    assert not _overlaps(panel.queue, panel.trash)


def test_target_at_point_classifies_regions():
    panel = compute_side_panel(WINDOW_WIDTH, WINDOW_HEIGHT)
    left, bottom, w, h = panel.trash
    assert target_at_point(WINDOW_WIDTH, WINDOW_HEIGHT, left + 1, bottom + 1) == ("trash", None)
    assert target_at_point(WINDOW_WIDTH, WINDOW_HEIGHT, 1, WINDOW_HEIGHT - 1) is None


def test_tile_color_bands():
    assert tile_color(2) == tile_color(8)
    assert tile_color(9) == tile_color(15)
    assert tile_color(16) == tile_color(25)
    assert tile_color(30) == tile_color(32)
    assert len({tile_color(2), tile_color(12), tile_color(20), tile_color(32)}) == 4
