"""
Event bus for engine observers.

Pub/sub with synchronous dispatch by default. ``start()`` moves dispatch to
a background worker so slow observers never hold up a move.
"""

import logging
import queue
import threading
from collections import defaultdict, deque
from collections.abc import Callable

from .events import Event, EventType


logger = logging.getLogger(__name__)


class EventBus:
    """
    Simple pub/sub event bus.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.MOVE_MADE, my_handler)
        bus.publish(Event(type=EventType.MOVE_MADE, data=payload))
    """

    def __init__(self, log_enabled: bool = True, max_log_size: int = 100) -> None:
        self._handlers: dict[EventType, list[Callable[[Event], None]]] = defaultdict(
            list
        )
        self._queue: queue.Queue[Event | None] = queue.Queue()
        self._lock = threading.Lock()
        self._running = False
        self._worker_thread: threading.Thread | None = None
        self._event_log: deque[Event] = deque(maxlen=max_log_size)
        self._log_enabled = log_enabled

    def subscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> None:
        """Register a handler for an event type."""
        with self._lock:
            if handler not in self._handlers[event_type]:
                self._handlers[event_type].append(handler)

    def unsubscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> None:
        """Remove a handler."""
        with self._lock:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)

    def publish(self, event: Event) -> None:
        """Publish an event (queued when the worker is running)."""
        if self._log_enabled:
            self._event_log.append(event)

        if self._running:
            self._queue.put(event)
        else:
            self._dispatch(event)

    def _dispatch(self, event: Event) -> None:
        """Dispatch event to all registered handlers."""
        with self._lock:
            handlers = self._handlers[event.type].copy()

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler error for %s", event.type.name)

    def get_event_log(self, limit: int = 20) -> list[Event]:
        """Get recent events from log."""
        return list(self._event_log)[-limit:]

    def clear_log(self) -> None:
        """Clear event log."""
        self._event_log.clear()

    def start(self) -> None:
        """Start async event processing."""
        if self._running:
            return

        self._running = True
        self._worker_thread = threading.Thread(target=self._process_loop, daemon=True)
        self._worker_thread.start()

    def stop(self) -> None:
        """Stop event processing, draining anything already queued."""
        if not self._running:
            return

        self._running = False
        self._queue.put(None)  # Sentinel to unblock
        if self._worker_thread:
            self._worker_thread.join(timeout=1.0)
            self._worker_thread = None

    def _process_loop(self) -> None:
        """Background event processing loop."""
        while True:
            event = self._queue.get()
            if event is None:  # Only stop() enqueues the sentinel
                break
            self._dispatch(event)

    @property
    def is_running(self) -> bool:
        """Check if async processing is active."""
        return self._running


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the global event bus singleton, sized from settings."""
    global _bus
    if _bus is None:
        from .config import get_settings

        events = get_settings().events
        _bus = EventBus(log_enabled=events.log_enabled, max_log_size=events.max_log_size)
    return _bus


def reset_event_bus() -> None:
    """Reset the event bus (for testing)."""
    global _bus
    if _bus is not None:
        _bus.stop()
    _bus = None
