"""Storage abstraction interface for saved panel state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StateStore(ABC):
    """Abstract keyed store for JSON-shaped records.

    Records are replaced wholesale; there are no partial updates.
    """

    @abstractmethod
    def load(self, key: str) -> dict[str, Any] | None:
        """Get the record stored under ``key``, or None."""
        pass

    @abstractmethod
    def save(self, key: str, data: dict[str, Any]) -> None:
        """Insert or overwrite the record under ``key``."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the record under ``key`` if present."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the storage connection."""
        pass
