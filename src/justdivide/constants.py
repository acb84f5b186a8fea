GRID_ROWS = 4
GRID_COLS = 4
GRID_SIZE = GRID_ROWS * GRID_COLS

# Number of upcoming tiles shown to the player; the front one is playable.
QUEUE_LENGTH = 3
MAX_UNDO = 10
STARTING_TRASH_USES = 2
POINTS_PER_LEVEL = 10

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
WINDOW_TITLE = "Just Divide"

# Board footprint relative to window, same capping rule as the side panel layout.
BOARD_MAX_WIDTH_PCT = 0.55
BOARD_MAX_HEIGHT_PCT = 0.70
CELL_GAP = 12
BOTTOM_MARGIN = 40
HEADER_HEIGHT = 150

# Right hand column holding keep slot, queue previews and trash.
SIDE_PANEL_WIDTH = 220
SIDE_GAP = 40
SIDE_SLOT_SIZE = 110

# Tile backgrounds keyed by the largest value in each band.
TILE_COLOR_BANDS = (
    (8, (80, 150, 230)),     # blue
    (15, (240, 150, 60)),    # orange
    (25, (235, 110, 160)),   # pink
    (None, (150, 100, 200)), # purple
)
SLOT_COLOR = (63, 195, 195)
SLOT_BORDER_COLOR = (255, 255, 255)
HINT_COLOR = (255, 255, 0)
PANEL_COLOR = (255, 204, 128)
BACKGROUND_COLOR = (255, 238, 242)
TEXT_COLOR = (51, 51, 51)
