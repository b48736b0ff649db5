from dataclasses import dataclass

TICK_MODULUS = 2**64


@dataclass(frozen=True)
class HeartState:
    """Animation state for the rainbow heart."""

    tick: int = 0

    def advance(self) -> "HeartState":
        return HeartState(tick=(self.tick + 1) % TICK_MODULUS)
