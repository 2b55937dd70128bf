"""
Key-value slot backends.

A slot is a single named persistence unit, the equivalent of a world
dynamic property in the game host. Backends store opaque values; they do
not know anything about the roster format.
"""

import json
import os
from abc import ABC, abstractmethod
from contextlib import suppress
from pathlib import Path
from typing import Any

from player_roster.config import DEFAULT_MAX_SLOT_SIZE
from player_roster.core.exceptions import SlotCapacityError, SlotWriteError


class SlotBackend(ABC):
    """Abstract key-value slot storage."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under key, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Store value under key.

        Raises:
            SlotWriteError: If the host storage rejects the write
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""

    @abstractmethod
    def keys(self) -> list[str]:
        """List all keys currently holding a value."""


def _check_capacity(key: str, value: Any, limit: int) -> None:
    if isinstance(value, str) and len(value) > limit:
        raise SlotCapacityError(
            f"Value for slot '{key}' exceeds {limit} characters",
            key=key,
            size=len(value),
            limit=limit,
        )


class MemorySlotBackend(SlotBackend):
    """
    In-process slot storage.

    Values are kept as given, so tests can plant non-string or corrupt
    values the way a damaged world save would present them.
    """

    def __init__(
        self,
        initial: dict[str, Any] | None = None,
        max_value_size: int = DEFAULT_MAX_SLOT_SIZE,
    ):
        self._values: dict[str, Any] = dict(initial or {})
        self.max_value_size = max_value_size

    def get(self, key: str) -> Any:
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        _check_capacity(key, value, self.max_value_size)
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


class FileSlotBackend(SlotBackend):
    """
    Slot storage persisted as one JSON object on disk.

    Every write rewrites the whole file atomically using the
    write-replace pattern. A missing or corrupt file reads as empty.
    """

    def __init__(self, path: Path, max_value_size: int = DEFAULT_MAX_SLOT_SIZE):
        self.path = Path(path)
        self.max_value_size = max_value_size

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, values: dict[str, Any], key: str) -> None:
        temp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(values, indent=2), encoding="utf-8")
            os.replace(temp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise SlotWriteError(
                f"Failed to write slot file {self.path}: {e}", key=key
            ) from e

    def get(self, key: str) -> Any:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        _check_capacity(key, value, self.max_value_size)
        values = self._read_all()
        values[key] = value
        self._write_all(values, key)

    def delete(self, key: str) -> None:
        values = self._read_all()
        if key in values:
            del values[key]
            self._write_all(values, key)

    def keys(self) -> list[str]:
        return list(self._read_all())
