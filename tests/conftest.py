import os
import tempfile
from collections import deque

os.environ.setdefault("VALENTINE_LOG_DIR", tempfile.mkdtemp(prefix="valentine-logs-"))

import pytest  # noqa: E402
from hypothesis import HealthCheck, settings  # noqa: E402

from valentine.display.canvas import Canvas  # noqa: E402

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSurface:
    """Records frames and replays key codes; idle polls consume their timeout."""

    def __init__(
        self,
        clock: FakeClock,
        keys: list[int | None] | None = None,
        size: tuple[int, int] = (40, 20),
    ) -> None:
        self.clock = clock
        self.keys: deque[int | None] = deque(keys or [])
        self._size = size
        self.frames: list[Canvas] = []
        self.timeouts: list[float] = []

    def size(self) -> tuple[int, int]:
        return self._size

    def draw(self, canvas: Canvas) -> None:
        self.frames.append(canvas)

    def poll_key(self, timeout_s: float) -> int | None:
        self.timeouts.append(timeout_s)
        key = self.keys.popleft() if self.keys else None
        if key is None:
            self.clock.advance(timeout_s)
        return key


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def surface_factory(clock: FakeClock):
    def _factory(keys: list[int | None] | None = None, size: tuple[int, int] = (40, 20)) -> FakeSurface:
        return FakeSurface(clock, keys=keys, size=size)

    return _factory


@pytest.fixture(autouse=True)
def default_canvas_marker(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the canvas marker so frames are comparable across environments."""

    monkeypatch.setenv("VALENTINE_CANVAS_MARKER", "braille")
    yield
