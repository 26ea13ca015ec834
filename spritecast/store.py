"""In-memory actor store.

Holds the authoritative actor list that the editor edits and the renderer
draws. The playback engine reads actors from here and publishes every state
change back through ``update_actor``; the store turns those into
``ActorUpdatedEvent`` notifications on the event bus.
"""

import logging
import random
import time
from dataclasses import replace
from typing import Any, Iterable, Optional

from spritecast.core.models import Action, Actor, MessageType
from spritecast.events import (
    ActorAddedEvent,
    ActorRemovedEvent,
    ActorScriptChangedEvent,
    ActorUpdatedEvent,
    EventBus,
)

logger = logging.getLogger(__name__)

# Half-width of the square new sprites are scattered over
SPAWN_SPREAD = 100.0

_DISPLAY_FIELDS = {"name", "x", "y", "rotation", "message", "message_type"}


def default_actor() -> Actor:
    """The single sprite a fresh stage starts with."""
    return Actor(id="sprite-1", name="Sprite 1")


class ActorStore:
    """
    Authoritative, ordered list of actors.

    Updates replace the stored Actor instance rather than mutating it, so a
    reference handed out earlier is a stable snapshot.
    """

    def __init__(
        self,
        actors: Optional[Iterable[Actor]] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        initial = list(actors) if actors is not None else [default_actor()]
        self._actors: dict[str, Actor] = {actor.id: actor for actor in initial}

    @property
    def actors(self) -> list[Actor]:
        """All actors in stage order."""
        return list(self._actors.values())

    def get(self, actor_id: str) -> Optional[Actor]:
        return self._actors.get(actor_id)

    def __len__(self) -> int:
        return len(self._actors)

    def update_actor(self, actor_id: str, **changes: Any) -> bool:
        """
        Merge display fields into an actor.

        Returns False if the actor no longer exists.

        Raises:
            ValueError: If a field is not a display field
        """
        actor = self._actors.get(actor_id)
        if actor is None:
            return False

        unknown = set(changes) - _DISPLAY_FIELDS
        if unknown:
            raise ValueError(f"Not display fields: {sorted(unknown)}")
        if "message_type" in changes:
            changes["message_type"] = MessageType(changes["message_type"])

        self._actors[actor_id] = replace(actor, **changes)
        self.event_bus.emit(ActorUpdatedEvent(actor_id=actor_id, changes=dict(changes)))
        return True

    def update_actor_script(self, actor_id: str, actions: list[Action]) -> bool:
        """Replace an actor's authored script. Returns False if the actor is gone."""
        actor = self._actors.get(actor_id)
        if actor is None:
            return False

        self._actors[actor_id] = replace(actor, actions=list(actions))
        self.event_bus.emit(
            ActorScriptChangedEvent(actor_id=actor_id, action_count=len(actions))
        )
        return True

    def add_actor(self, name: Optional[str] = None) -> Actor:
        """Add a sprite at a random spot near the origin."""
        actor_id = f"sprite-{int(time.time() * 1000)}"
        suffix = 1
        while actor_id in self._actors:
            suffix += 1
            actor_id = f"sprite-{int(time.time() * 1000)}-{suffix}"

        actor = Actor(
            id=actor_id,
            name=name or f"Sprite {len(self._actors) + 1}",
            x=random.uniform(-SPAWN_SPREAD, SPAWN_SPREAD),
            y=random.uniform(-SPAWN_SPREAD, SPAWN_SPREAD),
        )
        self._actors[actor_id] = actor
        logger.debug("Added actor %s (%s)", actor.id, actor.name)
        self.event_bus.emit(ActorAddedEvent(actor_id=actor.id, name=actor.name))
        return actor

    def delete_actor(self, actor_id: str) -> bool:
        """
        Remove a sprite.

        The stage always keeps at least one sprite; deleting the last one
        is refused and returns False.
        """
        if actor_id not in self._actors or len(self._actors) == 1:
            return False

        del self._actors[actor_id]
        self.event_bus.emit(ActorRemovedEvent(actor_id=actor_id))
        return True

    def reset_actors(self) -> None:
        """Return every actor to the origin with no bubble; scripts are kept."""
        for actor_id in list(self._actors):
            self.update_actor(
                actor_id,
                x=0.0,
                y=0.0,
                rotation=0.0,
                message="",
                message_type=MessageType.NONE,
            )
