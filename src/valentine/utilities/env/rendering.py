from valentine.utilities.env.enums import CanvasMarker
from valentine.utilities.env.parsing import _env_choice


class RenderingConfiguration:
    @classmethod
    def canvas_marker(cls) -> CanvasMarker:
        value = _env_choice(
            "VALENTINE_CANVAS_MARKER",
            default=CanvasMarker.BRAILLE.value,
            choices={marker.value for marker in CanvasMarker},
        )
        return CanvasMarker(value)
