#!/usr/bin/env python3
"""
Sliding Boxes - Main Entry Point
================================

Run with: python -m boxes.main [--verbose]

Ten boxes slide up and down, each starting 100 ms after the previous
one. Close the window or press ESC to quit.
"""
import argparse
import sys
from pathlib import Path

import pygame

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boxes.config import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from boxes.core.entities import create_boxes, DOWN
from boxes.core.events import event_bus, BoxStartedEvent, BoxBouncedEvent, QuitEvent
from boxes.core.handlers import LoggerHandler
from frontends.pygame_renderer import PygameRenderer


class Game:
    """Owns the boxes and drives one frame at a time."""

    def __init__(self, verbose: bool = False):
        self.boxes = create_boxes()
        self.running = True
        self.frame = 0
        self.verbose = verbose
        self._started = set()  # Indices whose delay gate has opened

        if verbose:
            self.logger = LoggerHandler(verbose=True)

    def update(self, elapsed_ms: int) -> None:
        """Update every box in order with the total elapsed time."""
        for index, box in enumerate(self.boxes):
            direction = box.direction
            box.update(elapsed_ms)

            if index not in self._started and box.is_active(elapsed_ms):
                self._started.add(index)
                event_bus.publish(BoxStartedEvent(box_index=index, elapsed_ms=elapsed_ms))

            if box.direction != direction:
                edge = "top" if box.direction == DOWN else "bottom"
                event_bus.publish(BoxBouncedEvent(
                    box_index=index, edge=edge, y=box.y, elapsed_ms=elapsed_ms
                ))

    def step(self, renderer) -> None:
        """Run a single frame: input, update, render.

        A quit seen while polling stops the game before anything moves
        or is drawn this frame.
        """
        input_state = renderer.handle_input()
        if input_state['quit']:
            self.running = False
            event_bus.publish(QuitEvent(frame=self.frame))
            return

        self.update(renderer.elapsed_ms())
        renderer.render_frame(self.boxes)
        self.frame += 1

    def run(self, renderer) -> None:
        """Step until the user quits."""
        while self.running:
            self.step(renderer)

    def cleanup(self) -> None:
        """Clean up event subscriptions."""
        event_bus.clear()


def main():
    parser = argparse.ArgumentParser(description="Sliding Boxes - staggered bouncing rectangles")
    parser.add_argument('--verbose', action='store_true',
                       help='Print box events to console')
    args = parser.parse_args()

    game = Game(verbose=args.verbose)

    try:
        renderer = PygameRenderer(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
    except pygame.error as e:
        print(f"Error: could not open window: {e}", file=sys.stderr)
        game.cleanup()
        sys.exit(1)

    print("Sliding Boxes started!")
    print("Controls: ESC or close window to quit")
    if args.verbose:
        print("Verbose mode: events will be logged")

    failed = False
    try:
        game.run(renderer)
    except KeyboardInterrupt:
        pass
    except pygame.error as e:
        print(f"Error: rendering failed: {e}", file=sys.stderr)
        failed = True
    finally:
        renderer.cleanup()
        game.cleanup()

    if failed:
        sys.exit(1)
    print(f"\nStopped after {game.frame} frames.")


if __name__ == '__main__':
    main()
