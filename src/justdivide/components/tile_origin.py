from enum import Enum


class TileOrigin(Enum):
    """Where a tile being placed came from."""
    QUEUE = "queue"
    KEEP = "keep"
