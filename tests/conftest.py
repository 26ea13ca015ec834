"""Shared pytest fixtures for spritecast tests."""

import asyncio

import pytest

from spritecast.core.models import Actor
from spritecast.events import EventBus, StageEvent
from spritecast.playback import PlaybackConfig, PlaybackController
from spritecast.store import ActorStore


# =============================================================================
# Timing Fixtures
# =============================================================================


class SleepRecorder:
    """Sleep stand-in that yields to the loop once and records the request."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def instant_sleep() -> SleepRecorder:
    """Zero-delay sleep; runs interleave round-robin in task creation order."""
    return SleepRecorder()


@pytest.fixture
def fast_config() -> PlaybackConfig:
    """Default settings with no per-step delay."""
    return PlaybackConfig(step_delay_ms=0)


# =============================================================================
# Event Fixtures
# =============================================================================


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorded_events(event_bus) -> list[StageEvent]:
    """Every event emitted on the shared bus, in order."""
    events: list[StageEvent] = []
    event_bus.subscribe_all(events.append)
    return events


# =============================================================================
# Stage Fixtures
# =============================================================================


@pytest.fixture
def make_store(event_bus):
    """Factory for a store holding the given actors on the shared bus."""

    def _make(*actors: Actor) -> ActorStore:
        return ActorStore(list(actors), event_bus=event_bus)

    return _make


@pytest.fixture
def make_controller(make_store, fast_config, instant_sleep):
    """Factory for a controller over fresh actors with instant sleeps."""

    def _make(*actors: Actor, config: PlaybackConfig = None) -> PlaybackController:
        store = make_store(*actors)
        return PlaybackController(store, config or fast_config, sleep=instant_sleep)

    return _make
