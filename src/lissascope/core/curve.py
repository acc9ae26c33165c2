"""
Closed-form Lissajous math.

    x(t) = A * sin(a*t + phi_x + pi)
    y(t) = B * sin(b*t + phi_y)

The x channel carries a fixed half-turn offset, so at t=0 with zero phase
the point starts on the opposite side of the naive curve.
"""

import math
from typing import Tuple

import numpy as np

from lissascope.core.params import ParameterState

X_OFFSET = math.pi
PERIOD = 2 * math.pi


def position(params: ParameterState, t: float) -> Tuple[float, float]:
    """Curve-space point at time t."""
    x = params.amp_x * math.sin(params.freq_x * t + params.phase_x + X_OFFSET)
    y = params.amp_y * math.sin(params.freq_y * t + params.phase_y)
    return (x, y)


def sample_period(params: ParameterState, step: float = 0.01) -> np.ndarray:
    """
    Sample one angular period [0, 2*pi) at a fixed time increment.

    Returns:
        (N, 2) float64 array of curve-space points.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    t = np.arange(0.0, PERIOD, step)
    x = params.amp_x * np.sin(params.freq_x * t + params.phase_x + X_OFFSET)
    y = params.amp_y * np.sin(params.freq_y * t + params.phase_y)
    return np.column_stack((x, y))
