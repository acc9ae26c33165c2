"""
pygame host for the Lissajous studio.

Owns the window, the control panel and the frame queue. Each pass of the
main loop handles pending input, runs the frames the engine requested on
the previous pass, draws the panel and waits for the next display refresh.
"""

import os
from typing import Callable, Optional

import pygame

from lissascope.config import StudioConfig
from lissascope.core.animation import AnimationEngine, FrameQueue
from lissascope.core.playback import PlaybackController
from lissascope.visualizers.canvas import PygameCanvas
from lissascope.visualizers.widgets import ControlPanel


class LissajousStudio:
    """Window + controls wired to one PlaybackController."""

    def __init__(self, config: Optional[StudioConfig] = None, headless: bool = False):
        self.cfg = config or StudioConfig()
        cfg = self.cfg

        if headless:
            # No display needed; render into an off-screen buffer
            os.environ["SDL_VIDEODRIVER"] = "dummy"
        pygame.init()
        pygame.display.set_caption("Lissascope")
        self.screen = pygame.display.set_mode((cfg.width, cfg.height))
        self.clock = pygame.time.Clock()

        self.params = cfg.initial_params()
        area = pygame.Rect(cfg.panel_width, 0, *cfg.canvas_size)
        self.canvas = PygameCanvas(self.screen.subsurface(area), cfg.background_color)
        self.scheduler = FrameQueue()
        self.engine = AnimationEngine(self.params, self.canvas, self.scheduler, config=cfg)
        self.controller = PlaybackController(self.engine)

        self.panel = ControlPanel(pygame.Rect(0, 0, cfg.panel_width, cfg.height), self.params.control_values())
        self.frames = 0

        self.controller.show()
        self._sync_panel()

    def _sync_panel(self):
        """Push canonical values and button states back into the widgets."""
        # Leave a field mid-edit alone so partial input like "1." survives
        self.panel.set_values(self.params.control_values(), skip=self.panel.focused_field)
        self.panel.set_button_state("toggle_run", self.controller.run_label, self.controller.running)
        self.panel.set_button_state("toggle_preview", "Preview", self.controller.preview_enabled)

    def dispatch(self, kind: str, name: str):
        """Route one panel notification to the controller."""
        if kind == "click":
            if name == "toggle_run":
                self.controller.toggle_run()
            elif name == "reset":
                self.controller.reset()
            elif name == "toggle_preview":
                self.controller.toggle_preview()
        elif kind == "change":
            self.controller.update_params(self.panel.raw_values(), source=name)

    def handle_event(self, event) -> bool:
        """Process one pygame event. Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and self.panel.focused_field is None:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.dispatch("click", "toggle_run")
            elif event.key == pygame.K_r:
                self.dispatch("click", "reset")
            elif event.key == pygame.K_p:
                self.dispatch("click", "toggle_preview")
        for kind, name in self.panel.handle_event(event):
            self.dispatch(kind, name)
        return True

    def tick(self) -> bool:
        """One display refresh. Returns False once the window is closed."""
        alive = True
        for event in pygame.event.get():
            if not self.handle_event(event):
                alive = False

        self.scheduler.run_pending()
        self._sync_panel()
        self.panel.draw(self.screen)
        pygame.display.flip()
        self.clock.tick(self.cfg.fps)
        self.frames += 1
        return alive

    def run(
        self,
        max_frames: Optional[int] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> int:
        """
        Main loop.

        Args:
            max_frames: Stop after this many refreshes (None runs until closed).
            progress_callback: Optional callback(current, total), only used
                when max_frames is set.

        Returns:
            Number of refreshes processed.
        """
        try:
            while self.tick():
                if max_frames is not None:
                    if progress_callback:
                        progress_callback(self.frames, max_frames)
                    if self.frames >= max_frames:
                        break
        finally:
            pygame.quit()
        return self.frames
