"""Event bus for pub/sub communication."""

from collections import defaultdict
from typing import Callable, TypeVar

from spritecast.events.types import StageEvent

T = TypeVar("T", bound=StageEvent)
EventHandler = Callable[[StageEvent], None]


class EventBus:
    """
    Simple pub/sub event bus for decoupling playback from rendering/logging.

    The playback engine and the actor store emit events without knowing who
    consumes them. A handler subscribed to a base class (e.g. StageEvent)
    also receives every subclass of it.

    Example:
        bus = EventBus()

        def on_swap(event: CollisionSwapEvent):
            print(f"{event.first_actor_id} <-> {event.second_actor_id}")

        bus.subscribe(CollisionSwapEvent, on_swap)
        bus.emit(CollisionSwapEvent(first_actor_id="a", second_actor_id="b"))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[StageEvent], list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> None:
        """
        Register a handler for an event type and its subclasses.

        Args:
            event_type: The type of event to handle
            handler: Callback function that receives the event
        """
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for all events."""
        self._global_handlers.append(handler)

    def unsubscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
    ) -> None:
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def emit(self, event: StageEvent) -> None:
        """
        Emit an event to all registered handlers.

        Handlers for the most specific type are called first, then handlers
        registered for its base classes, then global handlers.
        """
        for event_type in type(event).__mro__:
            if event_type in self._handlers:
                for handler in list(self._handlers[event_type]):
                    handler(event)
            if event_type is StageEvent:
                break

        for handler in list(self._global_handlers):
            handler(event)
