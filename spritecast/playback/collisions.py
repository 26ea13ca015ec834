"""Collision detection and script swapping between running actors."""

import logging
from typing import Optional

from spritecast.events import CollisionSwapEvent, EventBus
from spritecast.playback.config import PlaybackConfig
from spritecast.playback.session import PlaybackSession

logger = logging.getLogger(__name__)


class CollisionDetector:
    """
    Swaps the remaining run sequences of two actors when they first touch.

    Called synchronously after every step of an actor. Because every run
    only yields at its sleeps, a check and the swap it triggers complete
    without any other actor moving in between.

    Each unordered pair swaps at most once per session, however long the two
    stay in contact.
    """

    def __init__(
        self,
        session: PlaybackSession,
        config: Optional[PlaybackConfig] = None,
        store=None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.session = session
        self.config = config or PlaybackConfig()
        self.store = store
        self.event_bus = event_bus

    def check(self, actor_id: str) -> list[frozenset[str]]:
        """
        Test one actor against every other running actor.

        Returns the pairs that swapped during this check.
        """
        session = self.session
        if not session.is_running(actor_id):
            return []
        current = session.runtime_states.get(actor_id)
        if current is None:
            return []

        swapped = []
        for other in session.running_states():
            if other.id == actor_id:
                continue

            pair = frozenset((actor_id, other.id))
            if pair in session.swapped_pairs:
                continue

            distance = current.position.distance_to(other.position)
            if distance >= self.config.collision_threshold:
                continue

            self._swap(actor_id, other.id, distance)
            swapped.append(pair)

        return swapped

    def _swap(self, first_id: str, second_id: str, distance: float) -> None:
        sequences = self.session.run_sequences
        sequences[first_id], sequences[second_id] = sequences[second_id], sequences[first_id]
        self.session.swapped_pairs.add(frozenset((first_id, second_id)))

        logger.info(
            "Collision between %s and %s at distance %.1f: swapping scripts",
            first_id,
            second_id,
            distance,
        )

        if self.config.swap_persisted_scripts and self.store is not None:
            self._swap_persisted(first_id, second_id)

        if self.event_bus is not None:
            self.event_bus.emit(
                CollisionSwapEvent(
                    session_id=self.session.session_id,
                    first_actor_id=first_id,
                    second_actor_id=second_id,
                    distance=distance,
                )
            )

    def _swap_persisted(self, first_id: str, second_id: str) -> None:
        first = self.store.get(first_id)
        second = self.store.get(second_id)
        if first is None or second is None:
            logger.warning(
                "Cannot swap stored scripts of %s and %s: actor no longer exists",
                first_id,
                second_id,
            )
            return
        self.store.update_actor_script(first_id, list(second.actions))
        self.store.update_actor_script(second_id, list(first.actions))
