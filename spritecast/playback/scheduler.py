"""Execution scheduler: one cooperative run loop per actor.

Each actor's run is an asyncio task. The only suspension points are the
sleeps after each step (the fixed step delay, or a say/think duration), so
between two sleeps a run has the session to itself.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from spritecast.core.models import (
    Action,
    Actor,
    GoTo,
    MessageType,
    Move,
    Say,
    Think,
    TurnAnticlockwise,
    TurnClockwise,
    coerce_number,
)
from spritecast.core.vec2 import Vec2
from spritecast.events import ActionExecutedEvent, ActorRunFailedEvent, EventBus
from spritecast.playback.collisions import CollisionDetector
from spritecast.playback.config import PlaybackConfig
from spritecast.playback.session import PlaybackSession, RuntimeState

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class ExecutionScheduler:
    """
    Drives actors through their run sequences.

    Usage:
        scheduler = ExecutionScheduler(session, store, detector, config)
        scheduler.prepare(actor, sequence)
        await scheduler.run(actor.id)
    """

    def __init__(
        self,
        session: PlaybackSession,
        store,
        detector: CollisionDetector,
        config: Optional[PlaybackConfig] = None,
        event_bus: Optional[EventBus] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.session = session
        self.store = store
        self.detector = detector
        self.config = config or PlaybackConfig()
        self.event_bus = event_bus
        self._sleep = sleep

    def prepare(self, actor: Actor, sequence: list[Action]) -> RuntimeState:
        """Seed the actor's runtime state and register it as running."""
        return self.session.register(actor, sequence)

    async def run(self, actor_id: str) -> None:
        """
        Execute an actor's run sequence until it ends or the actor is stopped.

        The sequence is fetched from the session on every iteration, so a
        collision swap takes effect at the current index. Errors are logged
        and reported on the bus; they never escape to the caller.
        """
        session = self.session
        state = session.runtime_states.get(actor_id)
        index = 0

        try:
            while state is not None and session.is_running(actor_id):
                sequence = session.sequence_for(actor_id)
                if sequence is None or index >= len(sequence):
                    break

                await self._execute(state, sequence[index], index)
                index += 1
        except Exception as e:
            logger.exception("Run of %s failed at step %d", actor_id, index)
            if self.event_bus is not None:
                self.event_bus.emit(
                    ActorRunFailedEvent(
                        session_id=session.session_id,
                        actor_id=actor_id,
                        error=str(e),
                    )
                )
        finally:
            session.release(actor_id)
            logger.debug("Run of %s ended after %d steps", actor_id, index)

    async def _execute(self, state: RuntimeState, action: Action, index: int) -> None:
        """Apply one action: transition, publish, collision check, suspend."""
        if isinstance(action, (Say, Think)):
            await self._show_message(state, action, index)
            return

        changes = self._transition(state, action)
        if changes is None:
            logger.debug("Skipping unknown action %r for %s", action.type, state.id)
            return

        self._publish(state, action, index, changes)
        await self._sleep(self.config.step_delay_s)

    def _transition(self, state: RuntimeState, action: Action) -> Optional[dict]:
        """Mutate runtime state for a motion action; None if not a motion."""
        if isinstance(action, Move):
            delta = Vec2.from_heading(state.rotation, coerce_number(action.steps))
            state.x += delta.x
            state.y += delta.y
            return {"x": state.x, "y": state.y}

        if isinstance(action, TurnClockwise):
            state.rotation += coerce_number(action.degrees)
            return {"rotation": state.rotation}

        if isinstance(action, TurnAnticlockwise):
            state.rotation -= coerce_number(action.degrees)
            return {"rotation": state.rotation}

        if isinstance(action, GoTo):
            state.x = coerce_number(action.x)
            state.y = coerce_number(action.y)
            return {"x": state.x, "y": state.y}

        return None

    async def _show_message(self, state: RuntimeState, action: Action, index: int) -> None:
        state.message = "" if action.message is None else str(action.message)
        state.message_type = action.message_type
        self._publish(
            state,
            action,
            index,
            {"message": state.message, "message_type": state.message_type},
        )

        await self._sleep(max(0.0, coerce_number(action.duration)))

        # A stopped session has already cleared every bubble
        if not self.session.is_running(state.id):
            return
        state.message = ""
        state.message_type = MessageType.NONE
        self.store.update_actor(state.id, message="", message_type=MessageType.NONE)

    def _publish(self, state: RuntimeState, action: Action, index: int, changes: dict) -> None:
        self.store.update_actor(state.id, **changes)
        self.detector.check(state.id)
        if self.event_bus is not None:
            self.event_bus.emit(
                ActionExecutedEvent(
                    session_id=self.session.session_id,
                    actor_id=state.id,
                    index=index,
                    action_type=action.type,
                )
            )
