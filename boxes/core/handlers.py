"""Event handlers that react to box events."""
from .events import event_bus, BoxStartedEvent, BoxBouncedEvent, QuitEvent


class LoggerHandler:
    """Simple handler that logs events to console."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        event_bus.subscribe(QuitEvent, self.on_quit)
        if verbose:
            event_bus.subscribe(BoxStartedEvent, self.on_started)
            event_bus.subscribe(BoxBouncedEvent, self.on_bounce)

    def on_started(self, event: BoxStartedEvent) -> None:
        print(f"[START] Box {event.box_index} moving at {event.elapsed_ms} ms")

    def on_bounce(self, event: BoxBouncedEvent) -> None:
        print(f"[BOUNCE] Box {event.box_index} hit {event.edge} at y={event.y}")

    def on_quit(self, event: QuitEvent) -> None:
        print(f"[EVENT] Quit after {event.frame} frames")

    def detach(self) -> None:
        """Unsubscribe from all events."""
        event_bus.unsubscribe(QuitEvent, self.on_quit)
        event_bus.unsubscribe(BoxStartedEvent, self.on_started)
        event_bus.unsubscribe(BoxBouncedEvent, self.on_bounce)
