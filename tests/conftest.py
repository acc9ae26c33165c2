"""Pytest configuration and shared fixtures."""

import os

# pygame tests never open a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from lissascope.config import StudioConfig
from lissascope.core.animation import AnimationEngine, Canvas, FrameQueue
from lissascope.core.params import ParameterState
from lissascope.core.playback import PlaybackController

CANVAS_W = 800
CANVAS_H = 600


class RecordingCanvas(Canvas):
    """Canvas that records draw calls instead of drawing."""

    def __init__(self, width: int = CANVAS_W, height: int = CANVAS_H):
        self._width = width
        self._height = height
        self.calls = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self):
        self.calls.append(("clear",))

    def stroke_path(self, points, color, width):
        self.calls.append(("stroke_path", list(points), color, width))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("fill_circle", x, y, radius, color))

    def named(self, name: str) -> list:
        return [c for c in self.calls if c[0] == name]

    def reset_calls(self):
        self.calls = []


@pytest.fixture
def params() -> ParameterState:
    """Default parameters: A=B=100, a=5, b=4, phases (0, pi/4), speed 10."""
    return ParameterState()


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def scheduler() -> FrameQueue:
    return FrameQueue()


@pytest.fixture
def config() -> StudioConfig:
    return StudioConfig()


@pytest.fixture
def engine(params, canvas, scheduler, config) -> AnimationEngine:
    return AnimationEngine(params, canvas, scheduler, config=config)


@pytest.fixture
def controller(engine) -> PlaybackController:
    return PlaybackController(engine)
