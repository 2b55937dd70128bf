"""
Registry Store - the persisted list of known player names.

The whole registry lives in one key-value slot as a JSON array of
strings. The store is the only reader and writer of that slot. Reads go
straight to the slot every time, so the store never drifts from what is
persisted.

Failures never reach the caller: a slot that is missing, holds a
non-string, or does not parse as an array of strings reads as empty, and
a rejected write is logged and dropped.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from player_roster.config import DEFAULT_SLOT_KEY
from player_roster.core.exceptions import SlotWriteError
from player_roster.host.slots import SlotBackend

logger = logging.getLogger(__name__)


def _is_name_list(data: Any) -> bool:
    return isinstance(data, (list, tuple)) and all(isinstance(n, str) for n in data)


class SlotOutcome(Enum):
    """Outcome kinds for slot reads and writes."""

    OK = "ok"
    ABSENT = "absent"
    NOT_A_STRING = "not_a_string"
    MALFORMED = "malformed"
    INVALID_DATA = "invalid_data"
    WRITE_FAILED = "write_failed"


@dataclass
class LoadResult:
    """Result of reading the registry slot."""

    outcome: SlotOutcome
    names: list[str] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome in (SlotOutcome.OK, SlotOutcome.ABSENT)


@dataclass
class SaveResult:
    """Result of writing the registry slot."""

    outcome: SlotOutcome
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == SlotOutcome.OK


class RegistryStore:
    """
    Owner of the registry slot.

    Mutators re-serialize the full list on every change; there is no
    batching and no in-memory copy.
    """

    def __init__(self, slots: SlotBackend, key: str = DEFAULT_SLOT_KEY):
        self._slots = slots
        self.key = key

    def read(self) -> LoadResult:
        """Deserialize the slot and report how it went."""
        raw = self._slots.get(self.key)
        if raw is None or raw == "":
            return LoadResult(SlotOutcome.ABSENT)
        if not isinstance(raw, str):
            return LoadResult(
                SlotOutcome.NOT_A_STRING,
                error=f"expected str, got {type(raw).__name__}",
            )

        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            return LoadResult(SlotOutcome.MALFORMED, error=str(e))

        if not _is_name_list(parsed):
            return LoadResult(
                SlotOutcome.INVALID_DATA,
                error=f"expected a JSON array of strings, got {type(parsed).__name__}",
            )

        return LoadResult(SlotOutcome.OK, names=parsed)

    def load(self) -> list[str]:
        """Return the stored names, or an empty list if the slot is unusable."""
        result = self.read()
        if result.outcome == SlotOutcome.ABSENT:
            logger.debug(f"Registry slot '{self.key}' is empty")
        elif not result.ok:
            logger.warning(
                f"Failed to load registry slot '{self.key}' "
                f"({result.outcome.value}): {result.error}"
            )
        return result.names

    def save(self, data: Any) -> SaveResult:
        """
        Serialize data and write it to the slot.

        data must be a list or tuple of strings. Anything else is logged and
        nothing is written. Host write errors are logged and reported in the
        result; the caller's in-memory state is left as is.
        """
        if not _is_name_list(data):
            message = f"Data must be a sequence of strings, got {type(data).__name__}"
            logger.warning(f"Failed to save registry slot '{self.key}': {message}")
            return SaveResult(SlotOutcome.INVALID_DATA, error=message)

        # Lone surrogates stay as is; file backends escape them on disk.
        payload = json.dumps(list(data), ensure_ascii=False, separators=(",", ":"))
        try:
            self._slots.set(self.key, payload)
        except SlotWriteError as e:
            logger.warning(f"Failed to save registry slot '{self.key}': {e}")
            return SaveResult(SlotOutcome.WRITE_FAILED, error=str(e))

        return SaveResult(SlotOutcome.OK)

    def has(self, name: Any) -> bool:
        """True if name is a registered player name."""
        if not isinstance(name, str):
            return False
        return name in self.load()

    def add(self, name: Any) -> None:
        """Append name unless it is already registered."""
        if not isinstance(name, str):
            return
        names = self.load()
        if name not in names:
            names.append(name)
            self.save(names)

    def delete(self, name: Any) -> None:
        """Remove every exact match of name. Always rewrites the slot."""
        if not isinstance(name, str):
            return
        self.save([n for n in self.load() if n != name])

    def list(self) -> list[str]:
        """All registered names in insertion order."""
        return self.load()

    def clear(self) -> None:
        """Drop every registered name."""
        self.save([])

    def dump_json(self) -> str:
        """Pretty-printed JSON of the current registry."""
        return json.dumps(self.list(), indent=2, ensure_ascii=False)
