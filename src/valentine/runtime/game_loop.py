from __future__ import annotations

from typing import Protocol

from valentine.device.terminal import QUIT_KEYS
from valentine.display.canvas import Canvas
from valentine.renderers.heart import HeartRenderer, HeartState
from valentine.runtime.cadence import CadenceTimer
from valentine.utilities.env import CanvasMarker, Configuration
from valentine.utilities.logging import get_logger

logger = get_logger(__name__)


class Surface(Protocol):
    def size(self) -> tuple[int, int]: ...

    def draw(self, canvas: Canvas) -> None: ...

    def poll_key(self, timeout_s: float) -> int | None: ...


class GameLoop:
    def __init__(
        self,
        surface: Surface,
        renderer: HeartRenderer | None = None,
        cadence: CadenceTimer | None = None,
        marker: CanvasMarker | None = None,
    ) -> None:
        self.surface = surface
        self.renderer = renderer or HeartRenderer()
        self.cadence = cadence or CadenceTimer()
        self.marker = marker or Configuration.canvas_marker()
        self.state = HeartState()
        self.running = False

    def start(self) -> None:
        logger.info("Entering main loop.")
        self.running = True
        while self.running:
            self._one_loop()
        logger.info("Left main loop after %d ticks.", self.state.tick)

    def stop(self) -> None:
        self.running = False

    def _one_loop(self) -> None:
        self.surface.draw(self._render_frame())

        key = self.surface.poll_key(self.cadence.poll_timeout())
        if key in QUIT_KEYS:
            logger.info("Quit key received.")
            self.stop()
            return

        if self.cadence.due():
            self.state = self.state.advance()
            self.cadence.reset()

    def _render_frame(self) -> Canvas:
        width, height = self.surface.size()
        canvas = Canvas(width, height, marker=self.marker)
        self.renderer.process(canvas, self.state)
        return canvas
