"""
Message Bus

Routes committed domain events to their handlers. Handlers are side
effects (notifications): a failing handler is logged and never affects
the other handlers or the mutation that raised the event.
"""

from typing import Callable, Dict, Iterable, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class MessageBus:
    """In-process event bus; one event type may have many handlers."""

    def __init__(self):
        self._subscribers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def register_event_handler(self, event_type: Type[DomainEvent], handler: EventHandler):
        """
        Subscribe ``handler`` to ``event_type``

        Registering the same handler twice for one event type is a no-op,
        so app ``ready()`` hooks may run more than once.
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if handler not in subscribers:
            subscribers.append(handler)
            logger.debug(f"{getattr(handler, '__name__', handler)} subscribed to {event_type.__name__}")

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        return list(self._subscribers.get(event_type, []))

    def publish_events(self, events: Iterable[DomainEvent]):
        """Deliver each event to every subscribed handler, in registration order."""
        for event in events:
            subscribers = self.handlers_for(type(event))
            if not subscribers:
                logger.warning(f"Nobody handles {type(event).__name__}; event dropped")
                continue

            logger.info(f"Dispatching {type(event).__name__} {event.event_id} to {len(subscribers)} handler(s)")
            for handler in subscribers:
                self._call(handler, event)

    def _call(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            handler(event)
        except Exception as e:
            logger.error(
                f"Handler {getattr(handler, '__name__', handler)} failed: {e}",
                extra={'event': event.to_dict()},
                exc_info=True,
            )


message_bus = MessageBus()
