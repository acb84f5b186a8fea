from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class TileQueue:
    """Upcoming tiles; values[0] is the active tile available for play."""
    values: List[int] = field(default_factory=list)

    def front(self) -> Optional[int]:
        return self.values[0] if self.values else None
