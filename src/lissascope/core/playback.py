"""
Run/stop/reset/preview state machine exposed to the control panel.

Run state (Stopped/Running) and preview state (On/Off) are independent.
While running, the live frame always wins: the preview is drawn when it is
switched on, but the next live frame replaces it, and parameter edits only
redraw the static view while stopped.
"""

from typing import Any, Mapping, Optional

from lissascope.core.animation import AnimationEngine


class PlaybackController:
    """Button and input handlers bound to one AnimationEngine."""

    def __init__(self, engine: AnimationEngine):
        self.engine = engine

    @property
    def state(self):
        return self.engine.state

    @property
    def running(self) -> bool:
        return self.engine.state.running

    @property
    def preview_enabled(self) -> bool:
        return self.engine.state.preview_enabled

    @property
    def run_label(self) -> str:
        return "Stop" if self.running else "Start"

    def toggle_run(self):
        """Start with a synchronous first frame, or stop after the pending one."""
        state = self.engine.state
        state.running = not state.running
        if state.running:
            self.engine.step()

    def reset(self):
        self.engine.state.reset()
        self.engine.render_resting()

    def toggle_preview(self):
        state = self.engine.state
        state.preview_enabled = not state.preview_enabled
        if state.preview_enabled:
            state.trail.clear()
        self.engine.render_resting()

    def update_params(self, raw_values: Mapping[str, Any], source: Optional[str] = None):
        """Generic handler for any parameter control change."""
        self.engine.params.update(raw_values, source)
        if not self.running:
            self.engine.render_resting()

    def show(self):
        """Initial draw before any input arrives."""
        self.engine.render_resting()
