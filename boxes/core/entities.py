"""
Sliding Boxes Entities

A Box is a rectangle that slides up and down the window. Each box waits
for its own activation delay, then moves every update and reflects off
the top and bottom edge.
"""
from typing import List

import pygame

from boxes.config import (
    WINDOW_HEIGHT,
    COLOR_BOX,
    BOX_COUNT,
    BOX_SIZE,
    BOX_START_X,
    BOX_SPACING,
    BOX_START_Y,
    BOX_VELOCITY,
    BOX_DELAY,
    DIRECTION_STRIDE,
)

UP = -1
DOWN = 1


class Box:
    """Animated rectangle with a vertical direction and a start delay."""

    VELOCITY = BOX_VELOCITY
    FLOOR = WINDOW_HEIGHT

    def __init__(self, x: int, y: int, width: int, height: int,
                 color: tuple, direction: int, delay: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = color
        self.direction = direction
        self.delay = delay  # ms since start before the box moves

    @property
    def pos(self) -> tuple:
        return (self.x, self.y)

    @property
    def size(self) -> tuple:
        return (self.width, self.height)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def is_active(self, elapsed_ms: int) -> bool:
        """True once the total elapsed time has reached the delay."""
        return elapsed_ms >= self.delay

    def update(self, elapsed_ms: int) -> None:
        """Advance one step if the box has started.

        elapsed_ms is the total time since start, not the frame delta.
        The box moves a fixed VELOCITY per call once active.
        """
        if not self.is_active(elapsed_ms):
            return

        self.y += self.direction * self.VELOCITY

        # Reflect only; a step past the edge is drawn as-is for one frame
        if self.y <= 0:
            self.direction = DOWN
        elif self.y + self.height >= self.FLOOR:
            self.direction = UP

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the box rectangle on surface."""
        pygame.draw.rect(surface, self.color, self.rect)

    def __repr__(self) -> str:
        return (f"Box(x={self.x}, y={self.y}, direction={self.direction}, "
                f"delay={self.delay})")


def create_boxes(count: int = BOX_COUNT) -> List[Box]:
    """Build the staggered row of boxes in index order."""
    boxes = []
    for i in range(count):
        direction = UP if i % DIRECTION_STRIDE == 0 else DOWN
        boxes.append(Box(
            x=i * BOX_SPACING + BOX_START_X,
            y=BOX_START_Y,
            width=BOX_SIZE,
            height=BOX_SIZE,
            color=COLOR_BOX,
            direction=direction,
            delay=i * BOX_DELAY,
        ))
    return boxes
