from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable copy of everything an undo restores."""
    cells: Tuple[Optional[int], ...]
    queue: Tuple[int, ...]
    keep: Optional[int]
    score: int
    level: int
    trash_uses: int
    elapsed_seconds: float
