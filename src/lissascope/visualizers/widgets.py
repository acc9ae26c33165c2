"""
Minimal pygame control widgets.

Sliders and numeric fields hold raw values exactly as the user left them;
parsing happens downstream in ParameterState. Every widget reports
through `handle_event`, which the panel turns into change/click
notifications.
"""

import abc
import math
from typing import Any, Dict, List, Optional, Tuple

import pygame

PANEL_BG = (32, 32, 36)
TRACK = (50, 50, 55)
ACCENT = (245, 158, 11)
TEXT = (235, 235, 240)
FIELD_BG = (18, 18, 22)
FOCUS = (120, 170, 255)

NUMERIC_CHARS = set("0123456789.-+eE")


def clamp(x: float, a: float, b: float) -> float:
    return max(a, min(b, x))


class Widget(abc.ABC):
    """Base widget with a name, a label and a screen rectangle."""

    def __init__(self, name: str, label: str, rect: pygame.Rect):
        self.name = name
        self.label = label
        self.rect = pygame.Rect(rect)

    def handle_event(self, event) -> bool:
        """Returns True when the event changed the value or clicked the widget."""
        return False

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface, font: pygame.font.Font):
        pass


class Slider(Widget):
    def __init__(self, name: str, label: str, rect: pygame.Rect, vmin: float, vmax: float, value: float):
        super().__init__(name, label, rect)
        self.vmin = vmin
        self.vmax = vmax
        self.value = value
        self.dragging = False

    def _value_at(self, x: int) -> float:
        rel = (x - self.rect.x) / max(1, self.rect.w)
        return clamp(self.vmin + rel * (self.vmax - self.vmin), self.vmin, self.vmax)

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.dragging = True
                self.value = self._value_at(event.pos[0])
                return True
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.value = self._value_at(event.pos[0])
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        return False

    def draw(self, surface, font):
        r = self.rect
        pygame.draw.rect(surface, TRACK, r, border_radius=10)
        # Values outside the range pin the bar; the label still shows the real value
        t = (self.value - self.vmin) / (self.vmax - self.vmin)
        bar = pygame.Rect(r.x, r.y, int(r.w * clamp(t, 0.0, 1.0)), r.h)
        pygame.draw.rect(surface, ACCENT, bar, border_radius=10)
        txt = font.render(f"{self.label}: {self.value:.2f}", True, TEXT)
        surface.blit(txt, (r.x + 8, r.y + (r.h - txt.get_height()) // 2))


class NumberField(Widget):
    """Single-line text box that accepts numeric characters."""

    def __init__(self, name: str, label: str, rect: pygame.Rect, text: str = ""):
        super().__init__(name, label, rect)
        self.text = text
        self.focused = False

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return False
        if event.type != pygame.KEYDOWN or not self.focused:
            return False
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
            self.focused = False
            return False
        if event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
            return True
        if event.unicode and event.unicode in NUMERIC_CHARS:
            self.text += event.unicode
            return True
        return False

    def draw(self, surface, font):
        r = self.rect
        pygame.draw.rect(surface, FIELD_BG, r, border_radius=6)
        pygame.draw.rect(surface, FOCUS if self.focused else TRACK, r, 2, border_radius=6)
        txt = font.render(f"{self.label}: {self.text}", True, TEXT)
        surface.blit(txt, (r.x + 8, r.y + (r.h - txt.get_height()) // 2))


class Button(Widget):
    def __init__(self, name: str, label: str, rect: pygame.Rect, active: bool = False):
        super().__init__(name, label, rect)
        self.active = active

    def handle_event(self, event) -> bool:
        return (
            event.type == pygame.MOUSEBUTTONDOWN
            and event.button == 1
            and self.rect.collidepoint(event.pos)
        )

    def draw(self, surface, font):
        r = self.rect
        pygame.draw.rect(surface, ACCENT if self.active else PANEL_BG, r, 0, border_radius=12)
        pygame.draw.rect(surface, ACCENT, r, 2, border_radius=12)
        txt = font.render(self.label, True, PANEL_BG if self.active else TEXT)
        surface.blit(txt, (r.x + 10, r.y + (r.h - txt.get_height()) // 2))


# (name, label, min, max)
SLIDERS = [
    ("amp_x", "Amplitude X", 0.0, 300.0),
    ("amp_y", "Amplitude Y", 0.0, 300.0),
    ("freq_x", "Frequency X", 0.0, 10.0),
    ("freq_y", "Frequency Y", 0.0, 10.0),
    ("phase_x", "Phase X", 0.0, 2 * math.pi),
    ("phase_y", "Phase Y", 0.0, 2 * math.pi),
    ("speed", "Speed", 1.0, 50.0),
]

FIELDS = [
    ("phase_x_value", "Phase X"),
    ("phase_y_value", "Phase Y"),
]

BUTTONS = [
    ("toggle_run", "Start"),
    ("reset", "Reset"),
    ("toggle_preview", "Preview"),
]


class ControlPanel:
    """
    Column of controls on the left of the window.

    `handle_event` returns a list of ("change", name) / ("click", name)
    notifications; the app routes them to the playback controller.
    """

    def __init__(self, rect: pygame.Rect, values: Dict[str, Any], font: Optional[pygame.font.Font] = None):
        self.rect = pygame.Rect(rect)
        self.font = font or pygame.font.SysFont(None, 20)
        self.widgets: List[Widget] = []

        x, y = self.rect.x + 16, self.rect.y + 44
        rw, rh = self.rect.w - 32, 30

        for name, label in BUTTONS:
            self.widgets.append(Button(name, label, pygame.Rect(x, y, rw, rh)))
            y += rh + 8
        y += 8
        for name, label, vmin, vmax in SLIDERS:
            self.widgets.append(Slider(name, label, pygame.Rect(x, y, rw, rh), vmin, vmax, float(values[name])))
            y += rh + 8
        y += 8
        for name, label in FIELDS:
            self.widgets.append(NumberField(name, label, pygame.Rect(x, y, rw, rh), str(values[name])))
            y += rh + 8

        self._by_name = {w.name: w for w in self.widgets}

    def __getitem__(self, name: str) -> Widget:
        return self._by_name[name]

    def handle_event(self, event) -> List[Tuple[str, str]]:
        notes = []
        for widget in self.widgets:
            if widget.handle_event(event):
                kind = "click" if isinstance(widget, Button) else "change"
                notes.append((kind, widget.name))
        return notes

    @property
    def focused_field(self) -> Optional[str]:
        """Name of the text field with keyboard focus, if any."""
        for widget in self.widgets:
            if isinstance(widget, NumberField) and widget.focused:
                return widget.name
        return None

    def raw_values(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for widget in self.widgets:
            if isinstance(widget, Slider):
                values[widget.name] = widget.value
            elif isinstance(widget, NumberField):
                values[widget.name] = widget.text
        return values

    def set_values(self, values: Dict[str, Any], skip: Optional[str] = None):
        """
        Write canonical values back into the controls.

        `skip` leaves one control untouched, so a field being typed into
        keeps its in-progress text.
        """
        for name, value in values.items():
            if name == skip or name not in self._by_name:
                continue
            widget = self._by_name[name]
            if isinstance(widget, Slider):
                widget.value = float(value)
            elif isinstance(widget, NumberField):
                widget.text = str(value)

    def set_button_state(self, name: str, label: str, active: bool):
        button = self._by_name[name]
        button.label = label
        button.active = active

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, PANEL_BG, self.rect)
        title = self.font.render("Lissajous Controls", True, TEXT)
        surface.blit(title, (self.rect.x + 16, self.rect.y + 14))
        for widget in self.widgets:
            widget.draw(surface, self.font)
