"""Core curve, animation and playback modules."""

from lissascope.core.params import ParameterState
from lissascope.core.animation import AnimationEngine, AnimationState, Canvas, FrameQueue, FrameScheduler
from lissascope.core.playback import PlaybackController

__all__ = [
    "ParameterState",
    "AnimationEngine",
    "AnimationState",
    "Canvas",
    "FrameQueue",
    "FrameScheduler",
    "PlaybackController",
]
