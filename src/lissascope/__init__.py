"""Interactive Lissajous curve studio."""

from lissascope.core.params import ParameterState
from lissascope.core.animation import AnimationEngine, AnimationState, FrameQueue
from lissascope.core.playback import PlaybackController
from lissascope.config import PRESETS, StudioConfig

__version__ = "0.1.0"
__all__ = [
    "PRESETS",
    "StudioConfig",
    "ParameterState",
    "AnimationEngine",
    "AnimationState",
    "FrameQueue",
    "PlaybackController",
]
