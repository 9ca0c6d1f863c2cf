"""Pytest fixtures for Sliding Boxes tests."""
import os

# Headless pygame: must be set before any window is created
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class FakeRenderer:
    """Stand-in renderer with the same interface as PygameRenderer.

    Feeds scripted input states and a scripted clock, and records what
    it was asked to draw.
    """

    def __init__(self, inputs=None, step_ms: int = 10):
        self.inputs = list(inputs or [])
        self.step_ms = step_ms
        self.ticks = 0
        self.frames = []
        self.polls = 0
        self.cleaned_up = False

    def handle_input(self) -> dict:
        self.polls += 1
        if self.inputs:
            return self.inputs.pop(0)
        return {'quit': False}

    def elapsed_ms(self) -> int:
        elapsed = self.ticks
        self.ticks += self.step_ms
        return elapsed

    def render_frame(self, boxes) -> None:
        self.frames.append([box.pos for box in boxes])

    def cleanup(self) -> None:
        self.cleaned_up = True


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Drop subscribers left behind by a test."""
    from boxes.core.events import event_bus
    yield
    event_bus.clear()
    event_bus.stop_recording()


@pytest.fixture
def make_box():
    """Create a Box with sensible defaults."""
    from boxes.core.entities import Box, UP

    def _make(x=50, y=200, width=30, height=30, color=(0, 100, 0),
              direction=UP, delay=0):
        return Box(x, y, width, height, color, direction, delay)

    return _make


@pytest.fixture
def game():
    """Create a Game instance (without renderer)."""
    from boxes.main import Game
    g = Game()
    yield g
    g.cleanup()


@pytest.fixture
def fake_renderer():
    """Create a FakeRenderer with no scripted input."""
    return FakeRenderer()


@pytest.fixture
def renderer():
    """Create a real PygameRenderer on the dummy video driver."""
    from frontends.pygame_renderer import PygameRenderer
    r = PygameRenderer(640, 480)
    yield r
    r.cleanup()
