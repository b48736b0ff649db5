import typer

from valentine.device.terminal import TerminalSession
from valentine.runtime.game_loop import GameLoop
from valentine.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command() -> None:
    """Draw the rainbow heart until 'q' or Escape is pressed."""

    try:
        with TerminalSession() as terminal:
            GameLoop(surface=terminal).start()
    except Exception:
        logger.exception("Heart animation failed")
        typer.echo("valentine: terminal error, see the log for details", err=True)
        raise typer.Exit(code=1)
