"""Persistence collaborators for the single best-score integer."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    def load_best_score(self) -> int: ...

    def save_best_score(self, score: int) -> None: ...


class InMemoryBestScoreStore:
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, best_score: int = 0) -> None:
        self.best_score = int(best_score)
        self.saves = 0

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> None:
        self.best_score = int(score)
        self.saves += 1


class JsonBestScoreStore:
    """Stores {"best_score": n} in a JSON file; unreadable files count as zero."""

    def __init__(self, save_path: Path | str | None = None) -> None:
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()

    @staticmethod
    def _default_save_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "best_score.json"

    @property
    def save_path(self) -> Path:
        return self._save_path

    def load_best_score(self) -> int:
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return 0
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("could not read best score from %s: %s", self._save_path, exc)
            return 0
        if not isinstance(payload, dict):
            logger.warning("ignoring malformed best score file %s", self._save_path)
            return 0
        try:
            return max(0, int(payload.get("best_score", 0)))
        except (TypeError, ValueError):
            logger.warning("ignoring non-integer best score in %s", self._save_path)
            return 0

    def save_best_score(self, score: int) -> None:
        try:
            self._save_path.parent.mkdir(parents=True, exist_ok=True)
            with self._save_path.open("w", encoding="utf-8") as handle:
                json.dump({"best_score": int(score)}, handle, indent=2)
        except OSError as exc:
            logger.warning("could not save best score to %s: %s", self._save_path, exc)
