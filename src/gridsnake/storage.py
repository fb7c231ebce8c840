"""High-score persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...
    def set_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the life of the process only."""

    def __init__(self, value: int = 0):
        self.value = value
        self.writes = 0

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = int(value)
        self.writes += 1


class JsonHighScoreStore:
    """
    High score kept in a small JSON file: ``{"high_score": 12}``.

    A missing or unreadable file counts as 0. Failed writes are logged
    and otherwise ignored so a read-only home directory never stops a game.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path) as f:
                data = json.load(f)
            return max(int(data.get("high_score", 0)), 0)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0

    def set_high_score(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp, "w") as f:
                json.dump({"high_score": int(value)}, f)
            tmp.replace(self.path)
        except OSError as e:
            logger.error("Could not save high score to %s: %s", self.path, e)
