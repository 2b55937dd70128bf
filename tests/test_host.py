"""Tests for slot backends and the host runtime."""

import json
from pathlib import Path

import pytest

from player_roster.core.exceptions import SlotCapacityError, SlotWriteError
from player_roster.host.runtime import ChatSendEvent, EventSignal, HostRuntime, Player
from player_roster.host.slots import FileSlotBackend, MemorySlotBackend
from player_roster.registry.store import RegistryStore


class TestMemorySlotBackend:
    """Tests for MemorySlotBackend."""

    def test_get_set_delete(self) -> None:
        slots = MemorySlotBackend()
        assert slots.get("list") is None
        slots.set("list", "[]")
        assert slots.get("list") == "[]"
        slots.delete("list")
        assert slots.keys() == []

    def test_capacity_limit(self) -> None:
        slots = MemorySlotBackend(max_value_size=4)
        with pytest.raises(SlotCapacityError) as exc_info:
            slots.set("list", "12345")
        assert exc_info.value.limit == 4
        assert exc_info.value.size == 5
        assert exc_info.value.to_dict()["error_type"] == "SlotCapacityError"

    def test_error_str_names_slot(self) -> None:
        """Error text carries the slot key and limits for the warning log."""
        error = SlotCapacityError("too big", key="list", size=9, limit=4)
        assert str(error) == "too big (size=9, limit=4, key=list, operation=write)"
        assert str(SlotWriteError("plain")) == "plain (operation=write)"

    def test_stores_non_string_values(self) -> None:
        slots = MemorySlotBackend({"list": 7})
        assert slots.get("list") == 7


class TestFileSlotBackend:
    """Tests for FileSlotBackend."""

    def test_creates_file_and_parents(self, temp_dir: Path) -> None:
        path = temp_dir / "nested" / "slots.json"
        slots = FileSlotBackend(path)
        slots.set("list", '["Alice"]')

        assert path.exists()
        assert json.loads(path.read_text()) == {"list": '["Alice"]'}
        assert not path.with_name("slots.json.tmp").exists()

    def test_persists_across_instances(self, temp_dir: Path) -> None:
        path = temp_dir / "slots.json"
        RegistryStore(FileSlotBackend(path)).add("Alice")
        assert RegistryStore(FileSlotBackend(path)).list() == ["Alice"]

    def test_keeps_other_keys(self, temp_dir: Path) -> None:
        slots = FileSlotBackend(temp_dir / "slots.json")
        slots.set("other", "x")
        slots.set("list", "[]")
        slots.delete("list")
        assert slots.keys() == ["other"]

    def test_corrupt_file_reads_empty(self, temp_dir: Path) -> None:
        path = temp_dir / "slots.json"
        path.write_text("{not json")
        slots = FileSlotBackend(path)
        assert slots.get("list") is None
        assert RegistryStore(slots).load() == []

    def test_write_failure_raises_slot_error(self, temp_dir: Path) -> None:
        """A path whose parent is a regular file cannot be written."""
        blocker = temp_dir / "blocker"
        blocker.write_text("")
        slots = FileSlotBackend(blocker / "slots.json")

        with pytest.raises(SlotWriteError):
            slots.set("list", "[]")

    def test_capacity_limit(self, temp_dir: Path) -> None:
        slots = FileSlotBackend(temp_dir / "slots.json", max_value_size=3)
        with pytest.raises(SlotCapacityError):
            slots.set("list", '["Alice"]')


class TestEventSignal:
    """Tests for EventSignal."""

    def test_callbacks_run_in_order(self) -> None:
        signal = EventSignal("test")
        calls = []
        signal.subscribe(lambda e: calls.append(("first", e)))
        signal.subscribe(lambda e: calls.append(("second", e)))

        signal.emit(1)

        assert calls == [("first", 1), ("second", 1)]
        assert len(signal) == 2

    def test_subscribe_as_decorator(self) -> None:
        signal = EventSignal("test")

        @signal.subscribe
        def handler(event: ChatSendEvent) -> None:
            event.cancel = True

        event = signal.emit(ChatSendEvent(Player("Alice"), "x"))
        assert event.cancel is True

        signal.unsubscribe(handler)
        assert len(signal) == 0


class TestHostRuntime:
    """Tests for HostRuntime."""

    def test_players_in_join_order(self) -> None:
        runtime = HostRuntime()
        runtime.join(Player("Alice"))
        runtime.connect(Player("Bob"))
        assert [p.name for p in runtime.get_players()] == ["Alice", "Bob"]

    def test_disconnect(self) -> None:
        runtime = HostRuntime()
        bob = runtime.connect(Player("Bob"))
        runtime.disconnect(bob)
        assert runtime.get_players() == []

    def test_run_queues_until_tick(self) -> None:
        runtime = HostRuntime()
        calls = []
        runtime.run(lambda: calls.append("a"))
        runtime.run(lambda: calls.append("b"))

        assert calls == []
        assert runtime.tick() == 2
        assert calls == ["a", "b"]
        assert runtime.tick() == 0

    def test_cancelled_chat_not_logged(self) -> None:
        runtime = HostRuntime()

        @runtime.before_chat_send.subscribe
        def swallow(event: ChatSendEvent) -> None:
            event.cancel = event.message.startswith("#")

        runtime.send_chat(Player("Alice"), "#secret")
        runtime.send_chat(Player("Alice"), "hello")
        assert runtime.chat_log == [("Alice", "hello")]
