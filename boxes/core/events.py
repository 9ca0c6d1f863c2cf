"""
Sliding Boxes Events

Event dataclasses plus the EventBus that delivers them. The game
publishes, handlers subscribe; neither side knows the other.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Any


# === Event Dataclasses ===

@dataclass
class BoxStartedEvent:
    """Fired the first frame a box's activation delay has passed."""
    box_index: int
    elapsed_ms: int


@dataclass
class BoxBouncedEvent:
    """Fired when a box reverses direction at an edge."""
    box_index: int
    edge: str  # "top" or "bottom"
    y: int
    elapsed_ms: int


@dataclass
class QuitEvent:
    """Fired when the user closes the window or presses Escape."""
    frame: int


# === EventBus ===

class EventBus:
    """Central event dispatcher."""

    def __init__(self):
        self._subscribers: Dict[type, List[Callable]] = {}
        self._event_history: List[Any] = []  # For debugging/replay
        self._recording = False

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Register a handler for an event type."""
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Remove a handler from an event type."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's type."""
        if self._recording:
            self._event_history.append(event)

        for handler in self._subscribers.get(type(event), []):
            handler(event)

    def clear(self) -> None:
        """Clear all subscribers."""
        self._subscribers.clear()

    def start_recording(self) -> None:
        """Start recording events for replay/debugging."""
        self._recording = True
        self._event_history.clear()

    def stop_recording(self) -> List[Any]:
        """Stop recording and return event history."""
        self._recording = False
        return self._event_history.copy()


# Global EventBus instance
event_bus = EventBus()
