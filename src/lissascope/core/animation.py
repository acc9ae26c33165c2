"""
Animation engine for the traced Lissajous point.

Each frame computes the point for the current time, appends it to the trail,
draws the trail and the moving dot, advances time by speed/1000 and, while
running, asks the frame scheduler for another frame. The engine never loops
on its own: control returns to the host between frames, and stopping only
takes effect when the next scheduled frame finishes.
"""

import abc
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from lissascope.config import StudioConfig
from lissascope.core import curve
from lissascope.core.params import ParameterState

Point = Tuple[float, float]
Color = Tuple[int, int, int]


class Canvas(abc.ABC):
    """2D drawing sink the engine renders into."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        pass

    @property
    @abc.abstractmethod
    def height(self) -> int:
        pass

    @abc.abstractmethod
    def clear(self):
        """Wipe the whole drawing area."""
        pass

    @abc.abstractmethod
    def stroke_path(self, points: Sequence[Point], color: Color, width: int):
        """Stroke an open polyline. The first point is a move-to."""
        pass

    @abc.abstractmethod
    def fill_circle(self, x: float, y: float, radius: float, color: Color):
        pass


class FrameScheduler(abc.ABC):
    """Runs a callback on the next display refresh."""

    @abc.abstractmethod
    def request_frame(self, callback: Callable[[], None]):
        pass


class FrameQueue(FrameScheduler):
    """
    In-process frame scheduler.

    Callbacks requested while a frame is being processed run on the
    following `run_pending()` call, never within the current one.
    """

    def __init__(self):
        self._pending: List[Callable[[], None]] = []

    def request_frame(self, callback: Callable[[], None]):
        self._pending.append(callback)

    def run_pending(self) -> int:
        """
        Run the callbacks queued so far. Returns how many ran.

        If a callback raises, the ones after it in the batch go back to the
        front of the queue before the exception propagates.
        """
        batch, self._pending = self._pending, []
        done = 0
        try:
            for callback in batch:
                done += 1
                callback()
        finally:
            if done < len(batch):
                self._pending[:0] = batch[done:]
        return len(batch)

    def __len__(self) -> int:
        return len(self._pending)


@dataclass
class AnimationState:
    """Time, trail and playback flags, owned by the engine and controller."""
    time: float = 0.0
    trail: List[Point] = field(default_factory=list)
    running: bool = False
    preview_enabled: bool = True
    current: Optional[Point] = None

    def reset(self):
        self.running = False
        self.time = 0.0
        self.trail.clear()
        self.current = None


class AnimationEngine:
    """
    Advances time, grows the trail and draws frames.

    Parameters are read live from the shared ParameterState on every frame;
    nothing is snapshotted, so edits show up mid-trail.
    """

    def __init__(
        self,
        params: ParameterState,
        canvas: Canvas,
        scheduler: FrameScheduler,
        state: Optional[AnimationState] = None,
        config: Optional[StudioConfig] = None,
    ):
        self.params = params
        self.canvas = canvas
        self.scheduler = scheduler
        self.cfg = config or StudioConfig()
        self.state = state or AnimationState(preview_enabled=self.cfg.initial_preview)

        self._frame_pending = False

    @property
    def frame_pending(self) -> bool:
        return self._frame_pending

    def position(self, t: float) -> Point:
        return curve.position(self.params, t)

    def initial_point(self) -> Point:
        """Resting position: position(0), including the x half-turn offset."""
        return self.position(0.0)

    def to_screen(self, point: Point) -> Point:
        """Translate curve space so the origin sits in the canvas centre."""
        return (point[0] + self.canvas.width / 2, point[1] + self.canvas.height / 2)

    def step(self):
        """
        Compute one frame.

        A step always appends exactly one point, even when stopped; the
        running flag only decides whether another frame is requested.
        """
        state = self.state
        point = self.to_screen(self.position(state.time))
        state.current = point
        state.trail.append(point)

        limit = self.cfg.max_trail_points
        if limit is not None and len(state.trail) > limit:
            del state.trail[: len(state.trail) - limit]

        self.render()

        state.time += self.params.speed / 1000

        if state.running and not self._frame_pending:
            self._frame_pending = True
            self.scheduler.request_frame(self._on_frame)

    def _on_frame(self):
        self._frame_pending = False
        self.step()

    def render(self):
        """Draw the trail as one polyline, then the dot on top."""
        cfg = self.cfg
        self.canvas.clear()
        if self.state.trail:
            self.canvas.stroke_path(self.state.trail, cfg.trail_color, cfg.trail_width)
        if self.state.current is not None:
            x, y = self.state.current
            self.canvas.fill_circle(x, y, cfg.dot_radius, cfg.dot_color)

    def preview_points(self) -> np.ndarray:
        """One full period in screen space, shape (N, 2)."""
        points = curve.sample_period(self.params, self.cfg.preview_step)
        points[:, 0] += self.canvas.width / 2
        points[:, 1] += self.canvas.height / 2
        return points

    def render_preview(self):
        """Stroke the one-period preview path. Leaves trail and time alone."""
        points = [(float(x), float(y)) for x, y in self.preview_points()]
        self.canvas.stroke_path(points, self.cfg.preview_color, self.cfg.preview_width)

    def render_resting(self):
        """Static view: optional preview path plus the resting indicator."""
        cfg = self.cfg
        self.canvas.clear()
        if self.state.preview_enabled:
            self.render_preview()
        x, y = self.to_screen(self.initial_point())
        self.canvas.fill_circle(x, y, cfg.dot_radius, cfg.dot_color)
