from __future__ import annotations

import curses
import math
from types import TracebackType
from typing import Callable

from valentine.display.canvas import Canvas
from valentine.display.color import RAINBOW, Color
from valentine.utilities.logging import get_logger

logger = get_logger(__name__)

ESCAPE_KEY = 27
QUIT_KEYS = frozenset({ord("q"), ESCAPE_KEY})
ESCAPE_DELAY_MS = 25
NO_KEY = -1


class TerminalSession:
    """Full-screen curses session restored on every exit path.

    Use as a context manager: entering initializes the screen, switches
    to raw no-echo input, hides the cursor and registers a color pair
    per palette entry. In raw mode Ctrl-C and Ctrl-\\ arrive as key codes
    instead of signals. Leaving undoes all of it, even when setup or
    the body raised.
    """

    def __init__(self, palette: tuple[Color, ...] = RAINBOW) -> None:
        self._palette = palette
        self._screen: curses.window | None = None
        self._attributes: dict[Color, int] = {}

    def __enter__(self) -> "TerminalSession":
        logger.info("Entering full-screen terminal mode.")
        self._screen = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self._screen.keypad(True)
            curses.set_escdelay(ESCAPE_DELAY_MS)
            self._hide_cursor()
            self._register_colors()
            self._screen.clear()
        except BaseException:
            self.restore()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.restore()

    @property
    def screen(self) -> "curses.window":
        if self._screen is None:
            raise RuntimeError("Terminal session is not active")
        return self._screen

    def _hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor.")

    def _register_colors(self) -> None:
        if not curses.has_colors():
            logger.info("Terminal has no color support; drawing monochrome.")
            self._attributes = {color: curses.A_NORMAL for color in self._palette}
            return

        curses.start_color()
        background = self._default_background()
        available = curses.COLORS
        for pair, color in enumerate(self._palette, start=1):
            curses.init_pair(pair, color.terminal_number(available), background)
            attribute = curses.color_pair(pair)
            if color.needs_bold(available):
                attribute |= curses.A_BOLD
            self._attributes[color] = attribute
        logger.debug(
            "Registered %d color pairs on a %d color terminal.",
            len(self._palette),
            available,
        )

    def _default_background(self) -> int:
        try:
            curses.use_default_colors()
        except curses.error:
            logger.info("Terminal has no default colors; drawing on black.")
            return curses.COLOR_BLACK
        return -1

    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in cells."""

        height, width = self.screen.getmaxyx()
        return width, height

    def draw(self, canvas: Canvas) -> None:
        screen = self.screen
        screen.erase()
        for run in canvas.runs():
            attribute = self._attributes.get(run.color, curses.A_NORMAL)
            try:
                screen.addstr(run.row, run.col, run.text, attribute)
            except curses.error:
                # curses reports an error after writing the bottom-right cell
                # because the cursor cannot advance past it.
                if not self._ends_at_last_cell(run.row, run.col + len(run.text)):
                    raise
        screen.refresh()

    def _ends_at_last_cell(self, row: int, end_col: int) -> bool:
        width, height = self.size()
        return row == height - 1 and end_col == width

    def poll_key(self, timeout_s: float) -> int | None:
        """Wait up to ``timeout_s`` for a key code; ``None`` when none arrived.

        An escape byte followed by more input is an undecoded sequence such
        as Alt+letter; it is drained and ignored so only a lone Escape is
        reported as ``ESCAPE_KEY``.
        """

        screen = self.screen
        screen.timeout(max(math.ceil(timeout_s * 1000), 0))
        key = screen.getch()
        if key == NO_KEY:
            return None
        if key == ESCAPE_KEY:
            return self._read_escape(screen)
        return key

    def _read_escape(self, screen: "curses.window") -> int | None:
        screen.timeout(0)
        if screen.getch() == NO_KEY:
            return ESCAPE_KEY
        while screen.getch() != NO_KEY:
            pass
        return None

    def restore(self) -> None:
        if self._screen is None:
            return
        screen = self._screen
        self._screen = None

        steps: list[tuple[str, Callable[[], object]]] = [
            ("show cursor", lambda: curses.curs_set(1)),
            ("disable keypad", lambda: screen.keypad(False)),
            ("leave raw mode", curses.noraw),
            ("restore echo", curses.echo),
            ("end window", curses.endwin),
        ]
        for description, step in steps:
            try:
                step()
            except curses.error:
                logger.warning("Unable to %s while restoring the terminal.", description)
        logger.info("Restored terminal.")
