from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(slots=True)
class HintState:
    """Advisory highlight cells for the active tile.

    enabled: player toggle; when False cells is always empty.
    """
    enabled: bool = True
    cells: FrozenSet[int] = field(default_factory=frozenset)
