from enum import StrEnum


class CanvasMarker(StrEnum):
    BRAILLE = "braille"
    DOT = "dot"
    BLOCK = "block"
