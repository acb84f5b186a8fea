from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class KeepSlot:
    """Single holding slot the player can park a tile in."""
    value: Optional[int] = None
