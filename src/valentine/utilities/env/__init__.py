"""Environment configuration helpers."""

from valentine.utilities.env.config import Configuration as Configuration
from valentine.utilities.env.enums import CanvasMarker as CanvasMarker
