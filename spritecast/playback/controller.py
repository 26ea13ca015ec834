"""Playback controller: play, stop and reset for the whole stage."""

import asyncio
import logging
from typing import Optional

from spritecast.core.models import MessageType
from spritecast.events import (
    EventBus,
    PlaybackFinishedEvent,
    PlaybackResetEvent,
    PlaybackStartedEvent,
)
from spritecast.playback.collisions import CollisionDetector
from spritecast.playback.config import PlaybackConfig
from spritecast.playback.expander import expand_actions
from spritecast.playback.scheduler import ExecutionScheduler, SleepFunc
from spritecast.playback.session import PlaybackSession
from spritecast.playback.states import PlaybackState, PlaybackStateMachine
from spritecast.store import ActorStore

logger = logging.getLogger(__name__)


class PlaybackController:
    """
    Orchestrates playback sessions over an actor store.

    A session runs every actor with a non-empty script concurrently and ends
    when all runs have finished, or immediately on stop()/reset(). Tasks of
    a stopped session unwind on their own and have no further effect.

    Usage:
        controller = PlaybackController(store)
        await controller.play()         # returns when every run is done

        task = controller.start()       # or run it in the background
        controller.stop()
    """

    def __init__(
        self,
        store: ActorStore,
        config: Optional[PlaybackConfig] = None,
        event_bus: Optional[EventBus] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.store = store
        self.config = config or PlaybackConfig()
        self.event_bus = event_bus or store.event_bus
        self.state_machine = PlaybackStateMachine()
        self._sleep = sleep
        self._session: Optional[PlaybackSession] = None
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def is_playing(self) -> bool:
        return self.state_machine.is_running

    @property
    def session(self) -> Optional[PlaybackSession]:
        """The current session, or None while idle."""
        return self._session

    async def play(self) -> bool:
        """
        Run one playback session to completion.

        Returns False without doing anything if a session is already
        running; True once this session has ended (naturally or stopped).
        If starting the session raises or the call is cancelled, the session
        is ended and the controller is idle before the error propagates.
        """
        if self.is_playing:
            logger.debug("play() ignored: already playing")
            return False

        session = PlaybackSession()
        detector = CollisionDetector(
            session, self.config, store=self.store, event_bus=self.event_bus
        )
        scheduler = ExecutionScheduler(
            session,
            self.store,
            detector,
            self.config,
            event_bus=self.event_bus,
            sleep=self._sleep,
        )

        for actor in self.store.actors:
            sequence = expand_actions(
                actor.actions, repeat_fallback=self.config.legacy_repeat_fallback
            )
            if sequence:
                scheduler.prepare(actor, sequence)

        actor_ids = list(session.runtime_states)
        self._session = session
        self.state_machine.transition_to(PlaybackState.RUNNING, reason="play")
        logger.info("Playback %s started with %d actors", session.session_id, len(actor_ids))

        completed = False
        try:
            self.event_bus.emit(
                PlaybackStartedEvent(session_id=session.session_id, actor_ids=actor_ids)
            )
            self._tasks = {
                actor_id: asyncio.create_task(scheduler.run(actor_id), name=f"run-{actor_id}")
                for actor_id in actor_ids
            }
            await asyncio.gather(*self._tasks.values(), return_exceptions=True)
            completed = True
        finally:
            # Still current unless stop() or reset() already ended it
            if self._session is session:
                if completed:
                    self._finish(session, stopped=False, reason="all runs finished")
                else:
                    logger.warning("Playback %s aborted", session.session_id)
                    self._finish(session, stopped=True, reason="aborted")
        return True

    def start(self) -> Optional[asyncio.Task]:
        """Schedule play() on the running loop; None if already playing."""
        if self.is_playing:
            return None
        return asyncio.create_task(self.play(), name="playback")

    def stop(self) -> None:
        """
        Cancel the current session cooperatively.

        Every running actor is deregistered, so each run exits before its
        next action; an action already sleeping finishes its sleep first.
        Bubbles are cleared right away and the controller is idle on return.
        """
        session = self._session
        if session is None or not self.is_playing:
            return

        self._finish(session, stopped=True, reason="stop")
        for actor in self.store.actors:
            if actor.message or actor.message_type != MessageType.NONE:
                self.store.update_actor(actor.id, message="", message_type=MessageType.NONE)

    def reset(self) -> None:
        """Stop anything running and return every actor to the origin."""
        if self.is_playing:
            self.stop()
        else:
            self.state_machine.force_idle(reason="reset")
        self.store.reset_actors()
        self.event_bus.emit(PlaybackResetEvent())
        logger.info("Stage reset")

    def _finish(self, session: PlaybackSession, stopped: bool, reason: str) -> None:
        session.close()
        self._session = None
        self._tasks = {}
        self.state_machine.transition_to(PlaybackState.IDLE, reason=reason)
        logger.info("Playback %s %s", session.session_id, "stopped" if stopped else "finished")
        self.event_bus.emit(
            PlaybackFinishedEvent(session_id=session.session_id, stopped=stopped)
        )
