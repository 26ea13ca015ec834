"""Playback session and per-actor runtime state."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4

from spritecast.core.models import Action, Actor, MessageType
from spritecast.core.vec2 import Vec2


@dataclass
class RuntimeState:
    """
    Live copy of one actor's displayed fields while it runs.

    Mutated in lock-step with the actions it executes and used for collision
    testing; the store only ever sees what the scheduler publishes from it.
    """

    id: str
    name: str
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    message: str = ""
    message_type: MessageType = MessageType.NONE

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @classmethod
    def from_actor(cls, actor: Actor) -> "RuntimeState":
        """Seed from the actor's current displayed fields."""
        return cls(
            id=actor.id,
            name=actor.name,
            x=actor.x,
            y=actor.y,
            rotation=actor.rotation,
            message=actor.message,
            message_type=actor.message_type,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "message": self.message,
            "message_type": self.message_type.value,
        }


@dataclass
class PlaybackSession:
    """
    Shared state for one play() call.

    Owned by the controller and handed to the scheduler and the collision
    detector. All four collections are keyed by actor id. Run sequences are
    looked up through the map on every step, so a swap made here is seen by
    the running loop on its next iteration.

    Once closed, the session reports nothing as running, which lets tasks
    from a stopped session unwind without touching anything.
    """

    session_id: UUID = field(default_factory=uuid4)
    running: set[str] = field(default_factory=set)
    run_sequences: dict[str, list[Action]] = field(default_factory=dict)
    runtime_states: dict[str, RuntimeState] = field(default_factory=dict)
    swapped_pairs: set[frozenset[str]] = field(default_factory=set)
    closed: bool = False

    def register(self, actor: Actor, sequence: list[Action]) -> RuntimeState:
        """Seed runtime state for an actor and mark it running."""
        state = RuntimeState.from_actor(actor)
        self.run_sequences[actor.id] = sequence
        self.runtime_states[actor.id] = state
        self.running.add(actor.id)
        return state

    def release(self, actor_id: str) -> None:
        """Unregister an actor whose run has ended."""
        self.running.discard(actor_id)
        self.runtime_states.pop(actor_id, None)
        self.run_sequences.pop(actor_id, None)

    def is_running(self, actor_id: str) -> bool:
        return not self.closed and actor_id in self.running

    def running_states(self) -> list[RuntimeState]:
        """Runtime states of running actors, in registration order."""
        return [
            state
            for actor_id, state in self.runtime_states.items()
            if self.is_running(actor_id)
        ]

    def sequence_for(self, actor_id: str) -> Optional[list[Action]]:
        return self.run_sequences.get(actor_id)

    def close(self) -> None:
        """Deregister everyone and drop all session data."""
        self.closed = True
        self.running.clear()
        self.run_sequences.clear()
        self.runtime_states.clear()
        self.swapped_pairs.clear()
