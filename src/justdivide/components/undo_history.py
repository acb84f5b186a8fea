from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from justdivide.components.snapshot import Snapshot
from justdivide.constants import MAX_UNDO


@dataclass(slots=True)
class UndoHistory:
    """Bounded stack of snapshots; the oldest entry falls off when full."""
    capacity: int = MAX_UNDO
    snapshots: Deque[Snapshot] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("undo capacity must be at least 1")
        self.snapshots = deque(self.snapshots, maxlen=self.capacity)
