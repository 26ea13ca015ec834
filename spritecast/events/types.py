"""Event types emitted by the store and the playback engine."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID


@dataclass
class StageEvent:
    """Base class for all stage events."""

    timestamp: datetime = field(default_factory=datetime.now)
    session_id: Optional[UUID] = None


@dataclass
class ActorUpdatedEvent(StageEvent):
    """Fired when an actor's displayed fields change.

    Renderers subscribe to this to redraw the sprite or its bubble.
    """

    actor_id: str = ""
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass
class ActorScriptChangedEvent(StageEvent):
    """Fired when an actor's authored script is replaced."""

    actor_id: str = ""
    action_count: int = 0


@dataclass
class ActorAddedEvent(StageEvent):
    actor_id: str = ""
    name: str = ""


@dataclass
class ActorRemovedEvent(StageEvent):
    actor_id: str = ""


@dataclass
class ActionExecutedEvent(StageEvent):
    """Fired after one run-sequence step has been applied."""

    actor_id: str = ""
    index: int = 0
    action_type: str = ""


@dataclass
class CollisionSwapEvent(StageEvent):
    """Fired when two colliding actors exchange their remaining scripts."""

    first_actor_id: str = ""
    second_actor_id: str = ""
    distance: float = 0.0


@dataclass
class ActorRunFailedEvent(StageEvent):
    """Fired when one actor's run ends on an unexpected error."""

    actor_id: str = ""
    error: str = ""


@dataclass
class PlaybackStartedEvent(StageEvent):
    actor_ids: list[str] = field(default_factory=list)


@dataclass
class PlaybackFinishedEvent(StageEvent):
    """Fired when a session ends, either naturally or through stop()."""

    stopped: bool = False


@dataclass
class PlaybackResetEvent(StageEvent):
    """Fired when every actor has been returned to the origin."""
