import curses
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Color:
    """A named terminal color.

    ``number`` is one of the eight basic curses colors; bright variants are
    rendered with the bold attribute on terminals without 16 colors.
    """

    name: str
    number: int
    bright: bool = False

    def __post_init__(self) -> None:
        assert 0 <= self.number < 8, (
            f"Expected a basic terminal color between 0 and 7. Found {self.number}"
        )

    def terminal_number(self, available_colors: int) -> int:
        if self.bright and available_colors >= 16:
            return self.number + 8
        return self.number

    def needs_bold(self, available_colors: int) -> bool:
        return self.bright and available_colors < 16


RED = Color("red", curses.COLOR_RED)
YELLOW = Color("yellow", curses.COLOR_YELLOW)
MAGENTA = Color("magenta", curses.COLOR_MAGENTA)
LIGHT_RED = Color("light_red", curses.COLOR_RED, bright=True)
LIGHT_MAGENTA = Color("light_magenta", curses.COLOR_MAGENTA, bright=True)

RAINBOW: tuple[Color, ...] = (
    RED,
    YELLOW,
    MAGENTA,
    LIGHT_RED,
    LIGHT_MAGENTA,
)


def rainbow_color(tick: int) -> Color:
    """Return the palette entry for ``tick``; the palette repeats every five ticks."""

    return RAINBOW[tick % len(RAINBOW)]
