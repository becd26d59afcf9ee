"""
Best-score persistence for Archery Pop.

The session engine never touches storage directly. It talks to a
HighScoreStore, which holds a single integer under a fixed storage key.

Stores:
- MemoryHighScoreStore: in-process only (tests, throwaway sessions)
- JsonHighScoreStore: JSON object on disk, keyed by storage key, so several
  keys can share one file

Usage:
    store = JsonHighScoreStore()            # <user data dir>/highscores.json
    best = store.load()
    if score > best:
        store.save(score)
    store.reset()
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from aps.logging import get_logger, get_user_data_dir

log = get_logger('highscore')

DEFAULT_STORAGE_KEY = 'archerypop_highscore'


def get_data_dir() -> Path:
    """Directory for persisted data, respecting APS_DATA_DIR."""
    env_dir = os.environ.get('APS_DATA_DIR')
    if env_dir:
        return Path(env_dir).expanduser()
    return get_user_data_dir()


class HighScoreStore(ABC):
    """Holds one best-score integer. Values are never negative."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY):
        self.key = key

    @abstractmethod
    def load(self) -> int:
        """Return the stored best score (0 when nothing is stored)."""
        pass

    @abstractmethod
    def save(self, score: int) -> None:
        """Store a new best score."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Forget the stored best score."""
        pass


class MemoryHighScoreStore(HighScoreStore):
    """In-memory store.

    Examples:
        >>> store = MemoryHighScoreStore(initial=20)
        >>> store.load()
        20
        >>> store.save(25)
        >>> store.writes
        1
    """

    def __init__(self, initial: int = 0, key: str = DEFAULT_STORAGE_KEY):
        super().__init__(key)
        self._value = max(0, int(initial))
        self.writes = 0

    def load(self) -> int:
        return self._value

    def save(self, score: int) -> None:
        self._value = max(0, int(score))
        self.writes += 1

    def reset(self) -> None:
        self._value = 0


class JsonHighScoreStore(HighScoreStore):
    """
    JSON-file store.

    The file holds a JSON object mapping storage keys to integers. Missing,
    unreadable or malformed files read as 0; the next save rewrites them.

    Args:
        path: File to use (default: <data dir>/highscores.json)
        key: Storage key inside the file
    """

    FILENAME = 'highscores.json'

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        key: str = DEFAULT_STORAGE_KEY,
    ):
        super().__init__(key)
        self.path = Path(path) if path else get_data_dir() / self.FILENAME

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring malformed high score file %s", self.path)
            return {}
        return data

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)

    def load(self) -> int:
        value = self._read_all().get(self.key, 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            log.warning("Ignoring non-numeric high score %r for %s", value, self.key)
            return 0

    def save(self, score: int) -> None:
        data = self._read_all()
        data[self.key] = max(0, int(score))
        self._write_all(data)
        log.info("Saved high score %d to %s", data[self.key], self.path)

    def reset(self) -> None:
        data = self._read_all()
        if self.key in data:
            del data[self.key]
            self._write_all(data)
        log.info("Reset high score for %s", self.key)
