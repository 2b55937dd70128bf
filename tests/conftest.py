"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from player_roster.commands.router import CommandRouter
from player_roster.config import get_settings
from player_roster.host.runtime import HostRuntime, Player
from player_roster.host.slots import MemorySlotBackend
from player_roster.registry.store import RegistryStore

# Keep tests independent of the developer's environment
for _var in ("PR_SLOT_KEY", "PR_TRIGGER", "PR_SLOT_FILE", "PR_MAX_SLOT_SIZE", "PR_LOG_LEVEL"):
    os.environ.pop(_var, None)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def slots() -> MemorySlotBackend:
    """Empty in-memory slot storage."""
    return MemorySlotBackend()


@pytest.fixture
def store(slots: MemorySlotBackend) -> RegistryStore:
    """Registry store over empty in-memory slots."""
    return RegistryStore(slots)


@pytest.fixture
def router(store: RegistryStore) -> CommandRouter:
    """Command router over the store fixture."""
    return CommandRouter(store)


@pytest.fixture
def runtime(slots: MemorySlotBackend) -> HostRuntime:
    """Host runtime sharing the slots fixture."""
    return HostRuntime(slots)


@pytest.fixture
def alice() -> Player:
    return Player("Alice")
