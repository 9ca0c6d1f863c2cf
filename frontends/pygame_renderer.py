"""
Pygame Renderer
Opens the window, draws boxes and reports input.

DUCK TYPING:
The game loop only needs these methods:
- __init__(width, height, title)
- handle_input() -> dict
- elapsed_ms() -> int
- render_frame(boxes)
- cleanup()

Tests use a fake with the same methods instead of a real window.
"""
import os
import pygame
from typing import Dict, Any, Iterable

from boxes.config import COLOR_BG, FRAME_DELAY_MS


class PygameRenderer:
    """Pygame window that draws a list of boxes each frame."""

    COLOR_BG = COLOR_BG
    FRAME_DELAY_MS = FRAME_DELAY_MS

    def __init__(self, width: int = 640, height: int = 480, title: str = "Sliding Boxes"):
        # Must be set before the window is created
        os.environ.setdefault('SDL_VIDEO_CENTERED', '1')

        pygame.init()
        if not pygame.display.get_init():
            raise pygame.error("video subsystem failed to initialize")
        pygame.display.set_caption(title)

        self.width = width
        self.height = height

        self.screen = pygame.display.set_mode((width, height))
        self.screen.fill(self.COLOR_BG)
        pygame.display.flip()

        self.start_ticks = pygame.time.get_ticks()

    def elapsed_ms(self) -> int:
        """Milliseconds since the renderer was created."""
        return pygame.time.get_ticks() - self.start_ticks

    def render_frame(self, boxes: Iterable) -> None:
        """Clear, draw every box in order, present, then wait."""
        self.screen.fill(self.COLOR_BG)

        for box in boxes:
            box.draw(self.screen)

        pygame.display.flip()
        pygame.time.wait(self.FRAME_DELAY_MS)

    def handle_input(self) -> Dict[str, Any]:
        """Drain the event queue and return input state."""
        result = {
            'quit': False,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    result['quit'] = True

        return result

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
