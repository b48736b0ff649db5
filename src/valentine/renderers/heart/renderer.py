from valentine.display.canvas import Canvas
from valentine.display.color import rainbow_color
from valentine.renderers.heart.curve import THICKNESS, heart_layers
from valentine.renderers.heart.state import HeartState


class HeartRenderer:
    def __init__(self, thickness: float = THICKNESS) -> None:
        self.thickness = thickness

    def process(self, canvas: Canvas, state: HeartState) -> None:
        color = rainbow_color(state.tick)
        for layer in heart_layers(state.tick, thickness=self.thickness):
            canvas.paint(layer, color)
