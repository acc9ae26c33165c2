"""
Live curve parameters.

Holds the amplitude, frequency, phase and speed values fed by the control
panel. Values arrive as raw control contents (usually text while the user is
still typing), so parsing is permissive: anything that is not a finite number
is ignored and the previous value stays in place.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

# Each phase is shown twice: a coarse slider and a precise numeric field.
PHASE_PAIRS = {
    "phase_x": "phase_x_value",
    "phase_y": "phase_y_value",
}

PLAIN_CONTROLS = ("amp_x", "amp_y", "freq_x", "freq_y", "speed")


def parse_real(raw: Any, previous: float) -> float:
    """Parse a control value, falling back to `previous` on bad input."""
    if isinstance(raw, bool):
        return previous
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return previous
    if not math.isfinite(value):
        return previous
    return value


def format_phase(value: float) -> str:
    """Text shown in a precise phase field."""
    return repr(float(value))


@dataclass
class ParameterState:
    """Current Lissajous parameters, mutated only by input handlers."""
    amp_x: float = 100.0
    amp_y: float = 100.0
    freq_x: float = 5.0
    freq_y: float = 4.0
    phase_x: float = 0.0
    phase_y: float = math.pi / 4
    speed: float = 10.0

    def update(self, raw_values: Mapping[str, Any], source: Optional[str] = None):
        """
        Apply the latest raw control values.

        Args:
            raw_values: Control name -> raw value. Missing names are left alone.
            source: Name of the control that fired. When it is a precise phase
                field, that field wins over its slider; otherwise the slider
                is authoritative.
        """
        for name in PLAIN_CONTROLS:
            if name in raw_values:
                setattr(self, name, parse_real(raw_values[name], getattr(self, name)))

        for slider, field_name in PHASE_PAIRS.items():
            order = (slider, field_name)
            if source == field_name:
                order = (field_name, slider)
            current = getattr(self, slider)
            for name in order:
                if name in raw_values:
                    parsed = parse_real(raw_values[name], current)
                    if parsed != current or name == source:
                        current = parsed
                        break
            setattr(self, slider, current)

    def control_values(self) -> Dict[str, Any]:
        """
        Canonical value for every control.

        Both members of a phase pair are written from the same float so
        the slider and the numeric field never disagree.
        """
        values: Dict[str, Any] = {name: getattr(self, name) for name in PLAIN_CONTROLS}
        for slider, field_name in PHASE_PAIRS.items():
            phase = getattr(self, slider)
            values[slider] = phase
            values[field_name] = format_phase(phase)
        return values

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
