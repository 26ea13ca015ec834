"""In-memory playback log for accumulating session events."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from spritecast.events import (
    ActionExecutedEvent,
    ActorRunFailedEvent,
    CollisionSwapEvent,
    EventBus,
    PlaybackFinishedEvent,
    PlaybackResetEvent,
    PlaybackStartedEvent,
)


@dataclass
class LogEntry:
    """Single entry in the playback log."""

    timestamp: datetime
    event_type: str  # "START", "STEP", "SWAP", "FAILURE", "FINISH", "STOP", "RESET"
    description: str
    actor_id: Optional[str] = None
    session_id: Optional[UUID] = None


@dataclass
class SwapRecord:
    """Record of one collision swap."""

    timestamp: datetime
    first_actor_id: str
    second_actor_id: str
    distance: float


@dataclass
class ActorStats:
    """Accumulated statistics for one actor across sessions."""

    actor_id: str
    steps: int = 0
    swaps: int = 0
    failures: int = 0
    action_counts: dict[str, int] = field(default_factory=dict)


class PlaybackLog:
    """
    In-memory accumulator for playback events.

    Subscribes to an EventBus and records session starts and ends, every
    executed step, collision swaps and failed runs. Used to generate
    summaries and markdown output.
    """

    def __init__(self, record_steps: bool = True) -> None:
        self.record_steps = record_steps
        self.entries: list[LogEntry] = []
        self.swaps: list[SwapRecord] = []
        self.actor_stats: dict[str, ActorStats] = {}
        self.sessions_started = 0
        self.sessions_stopped = 0

    def _subscriptions(self) -> list[tuple[type, Callable]]:
        return [
            (PlaybackStartedEvent, self._handle_started),
            (ActionExecutedEvent, self._handle_step),
            (CollisionSwapEvent, self._handle_swap),
            (ActorRunFailedEvent, self._handle_failure),
            (PlaybackFinishedEvent, self._handle_finished),
            (PlaybackResetEvent, self._handle_reset),
        ]

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to events from an event bus."""
        for event_type, handler in self._subscriptions():
            event_bus.subscribe(event_type, handler)

    def disconnect_from_event_bus(self, event_bus: EventBus) -> None:
        """Stop receiving events from an event bus."""
        for event_type, handler in self._subscriptions():
            event_bus.unsubscribe(event_type, handler)

    def _get_or_create_stats(self, actor_id: str) -> ActorStats:
        if actor_id not in self.actor_stats:
            self.actor_stats[actor_id] = ActorStats(actor_id=actor_id)
        return self.actor_stats[actor_id]

    def add_entry(
        self,
        event_type: str,
        description: str,
        actor_id: Optional[str] = None,
        session_id: Optional[UUID] = None,
        timestamp: Optional[datetime] = None,
    ) -> None:
        """Add a log entry manually."""
        self.entries.append(
            LogEntry(
                timestamp=timestamp or datetime.now(),
                event_type=event_type,
                description=description,
                actor_id=actor_id,
                session_id=session_id,
            )
        )

    def _handle_started(self, event: PlaybackStartedEvent) -> None:
        self.sessions_started += 1
        names = ", ".join(event.actor_ids) or "no actors"
        self.add_entry(
            "START",
            f"Playback started ({names})",
            session_id=event.session_id,
            timestamp=event.timestamp,
        )

    def _handle_step(self, event: ActionExecutedEvent) -> None:
        stats = self._get_or_create_stats(event.actor_id)
        stats.steps += 1
        stats.action_counts[event.action_type] = stats.action_counts.get(event.action_type, 0) + 1
        if self.record_steps:
            self.add_entry(
                "STEP",
                f"{event.actor_id} step {event.index}: {event.action_type}",
                actor_id=event.actor_id,
                session_id=event.session_id,
                timestamp=event.timestamp,
            )

    def _handle_swap(self, event: CollisionSwapEvent) -> None:
        self.swaps.append(
            SwapRecord(
                timestamp=event.timestamp,
                first_actor_id=event.first_actor_id,
                second_actor_id=event.second_actor_id,
                distance=event.distance,
            )
        )
        self._get_or_create_stats(event.first_actor_id).swaps += 1
        self._get_or_create_stats(event.second_actor_id).swaps += 1
        self.add_entry(
            "SWAP",
            f"{event.first_actor_id} and {event.second_actor_id} collided "
            f"({event.distance:.1f} apart) and swapped scripts",
            session_id=event.session_id,
            timestamp=event.timestamp,
        )

    def _handle_failure(self, event: ActorRunFailedEvent) -> None:
        self._get_or_create_stats(event.actor_id).failures += 1
        self.add_entry(
            "FAILURE",
            f"{event.actor_id} stopped on error: {event.error}",
            actor_id=event.actor_id,
            session_id=event.session_id,
            timestamp=event.timestamp,
        )

    def _handle_finished(self, event: PlaybackFinishedEvent) -> None:
        if event.stopped:
            self.sessions_stopped += 1
            self.add_entry("STOP", "Playback stopped", session_id=event.session_id,
                           timestamp=event.timestamp)
        else:
            self.add_entry("FINISH", "Playback finished", session_id=event.session_id,
                           timestamp=event.timestamp)

    def _handle_reset(self, event: PlaybackResetEvent) -> None:
        self.add_entry("RESET", "Stage reset", timestamp=event.timestamp)

    def entries_of_type(self, event_type: str) -> list[LogEntry]:
        return [entry for entry in self.entries if entry.event_type == event_type]

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.entries.clear()
        self.swaps.clear()
        self.actor_stats.clear()
        self.sessions_started = 0
        self.sessions_stopped = 0
