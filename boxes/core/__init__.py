"""Sliding Boxes Core - Animation Logic"""
from .entities import Box, create_boxes, UP, DOWN
from .events import (
    event_bus,
    EventBus,
    BoxStartedEvent,
    BoxBouncedEvent,
    QuitEvent,
)
from .handlers import LoggerHandler
