"""Event system for stage playback."""

from spritecast.events.bus import EventBus
from spritecast.events.types import (
    ActionExecutedEvent,
    ActorAddedEvent,
    ActorRemovedEvent,
    ActorRunFailedEvent,
    ActorScriptChangedEvent,
    ActorUpdatedEvent,
    CollisionSwapEvent,
    PlaybackFinishedEvent,
    PlaybackResetEvent,
    PlaybackStartedEvent,
    StageEvent,
)

__all__ = [
    "ActionExecutedEvent",
    "ActorAddedEvent",
    "ActorRemovedEvent",
    "ActorRunFailedEvent",
    "ActorScriptChangedEvent",
    "ActorUpdatedEvent",
    "CollisionSwapEvent",
    "EventBus",
    "PlaybackFinishedEvent",
    "PlaybackResetEvent",
    "PlaybackStartedEvent",
    "StageEvent",
]
