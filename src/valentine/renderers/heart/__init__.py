from valentine.renderers.heart.renderer import HeartRenderer  # noqa: F401
from valentine.renderers.heart.state import HeartState  # noqa: F401
