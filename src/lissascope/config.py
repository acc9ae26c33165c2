"""
Studio configuration and curve presets.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from lissascope.core.params import ParameterState

# Initial parameter sets, keyed by control name
PRESETS: Dict[str, Dict[str, float]] = {
    "classic": {
        "amp_x": 100.0, "amp_y": 100.0,
        "freq_x": 5.0, "freq_y": 4.0,
        "phase_x": 0.0, "phase_y": math.pi / 4,
        "speed": 10.0,
    },
    "circle": {
        "amp_x": 150.0, "amp_y": 150.0,
        "freq_x": 1.0, "freq_y": 1.0,
        "phase_x": 0.0, "phase_y": math.pi / 2,
        "speed": 10.0,
    },
    "figure_eight": {
        "amp_x": 180.0, "amp_y": 120.0,
        "freq_x": 1.0, "freq_y": 2.0,
        "phase_x": 0.0, "phase_y": 0.0,
        "speed": 10.0,
    },
    "knot": {
        "amp_x": 200.0, "amp_y": 200.0,
        "freq_x": 3.0, "freq_y": 2.0,
        "phase_x": math.pi / 2, "phase_y": 0.0,
        "speed": 8.0,
    },
    # Irrational ratio, never closes.
    "drift": {
        "amp_x": 200.0, "amp_y": 160.0,
        "freq_x": 1.0, "freq_y": math.sqrt(2),
        "phase_x": 0.0, "phase_y": 0.0,
        "speed": 15.0,
    },
}

DEFAULT_PRESET = "classic"


def _check_preset(name: str):
    if name not in PRESETS:
        choices = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset '{name}' (choose from: {choices})")


def preset_params(name: str) -> ParameterState:
    """Build a ParameterState from a named preset."""
    _check_preset(name)
    return ParameterState(**PRESETS[name])


@dataclass
class StudioConfig:
    """Window, drawing and initial-state settings."""

    width: int = 1280
    height: int = 800
    fps: int = 60
    panel_width: int = 280  # Control panel on the left; the curve fills the rest

    background_color: Tuple[int, int, int] = (0, 0, 0)
    trail_color: Tuple[int, int, int] = (255, 255, 255)
    preview_color: Tuple[int, int, int] = (110, 110, 130)
    dot_color: Tuple[int, int, int] = (255, 255, 255)

    trail_width: int = 2
    preview_width: int = 1  # Thinner than the live trail
    dot_radius: int = 5
    preview_step: float = 0.01

    # None keeps every point
    max_trail_points: Optional[int] = None

    initial_preview: bool = True
    preset: str = DEFAULT_PRESET
    overrides: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not 0 <= self.panel_width < self.width:
            raise ValueError(f"panel_width must be in [0, {self.width}), got {self.panel_width}")
        if self.preview_step <= 0:
            raise ValueError(f"preview_step must be positive, got {self.preview_step}")
        if self.max_trail_points is not None and self.max_trail_points < 1:
            raise ValueError(f"max_trail_points must be at least 1, got {self.max_trail_points}")
        _check_preset(self.preset)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """(width, height) of the drawing area beside the panel."""
        return (self.width - self.panel_width, self.height)

    def initial_params(self) -> ParameterState:
        """Preset values with any explicit overrides applied on top."""
        params = preset_params(self.preset)
        params.update(self.overrides)
        return params
