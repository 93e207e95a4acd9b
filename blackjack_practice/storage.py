"""Storage for balance, settings and statistics, with in-memory fallback."""

import contextlib
import logging
import os
from abc import ABC, abstractmethod

from pydantic import ValidationError

from config import config
from blackjack_practice.schemas import SavedState

logger = logging.getLogger(__name__)


class GameStore(ABC):
    """
    Abstract store for state that outlives a session.

    ``load`` and ``save`` are the whole contract. Implementations report
    their own failures by logging; the engine keeps playing from memory.
    """

    @abstractmethod
    def load(self) -> SavedState | None:
        """Return the saved state, or None if there is nothing usable."""
        ...

    @abstractmethod
    def save(self, state: SavedState) -> None:
        """Persist the given state, replacing what was there."""
        ...


class InMemoryStore(GameStore):
    """In-memory store for tests and throwaway sessions."""

    def __init__(self, state: SavedState | None = None) -> None:
        self._state = state
        self.save_count = 0

    def load(self) -> SavedState | None:
        """Return a copy of the stored state."""
        if self._state is None:
            return None
        return self._state.model_copy(deep=True)

    def save(self, state: SavedState) -> None:
        """Keep a copy of the state."""
        self._state = state.model_copy(deep=True)
        self.save_count += 1

    @property
    def state(self) -> SavedState | None:
        """Return the last saved state."""
        return self._state


class JsonFileStore(GameStore):
    """Store backed by a single JSON file."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path or config.storage.path

    def load(self) -> SavedState | None:
        """Load state from disk; a missing or corrupt file yields None."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return SavedState.model_validate_json(f.read())
        except (OSError, ValidationError) as exc:
            logger.warning("Could not load saved game from %s: %s", self.path, exc)
            return None

    def save(self, state: SavedState) -> None:
        """Write state to disk, replacing the file atomically."""
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(state.model_dump_json(indent=2))
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not save game to %s: %s", self.path, exc)
            with contextlib.suppress(OSError):
                os.remove(tmp_path)
