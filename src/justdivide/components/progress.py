from dataclasses import dataclass

from justdivide.constants import STARTING_TRASH_USES


@dataclass(slots=True)
class Progress:
    """Score and derived progression counters for the current run.

    best_score is loaded from the persistence collaborator and survives restarts.
    """
    score: int = 0
    level: int = 1
    trash_uses: int = STARTING_TRASH_USES
    best_score: int = 0
