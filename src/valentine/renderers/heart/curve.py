from __future__ import annotations

import numpy as np

STEPS = 1000
LAYERS = 4
THICKNESS = 0.05
NORMALIZATION = 10.0


def base_curve(steps: int = STEPS) -> np.ndarray:
    """Return the heart outline as ``steps + 1`` points in world coordinates.

    The parameter sweeps a full revolution so the first and last points
    coincide and the outline is closed.
    """

    t = np.linspace(0.0, 2.0 * np.pi, steps + 1)
    x = 16.0 * np.sin(t) ** 3
    y = 13.0 * np.cos(t) - 5.0 * np.cos(2 * t) - 2.0 * np.cos(3 * t) - np.cos(4 * t)
    return np.column_stack((x / NORMALIZATION, y / NORMALIZATION))


def layer_scale(layer: int, thickness: float = THICKNESS) -> float:
    return 1.0 + layer * thickness


def heart_layers(
    tick: int,
    *,
    layers: int = LAYERS,
    thickness: float = THICKNESS,
    steps: int = STEPS,
) -> list[np.ndarray]:
    """Return the concentric outlines drawn for the frame at ``tick``.

    Layer ``k`` is the base curve scaled by ``1 + k * thickness``; drawing
    them together gives the outline its stroke width. The geometry is the
    same for every tick, only the frame color changes.
    """

    curve = base_curve(steps)
    return [curve * layer_scale(layer, thickness) for layer in range(layers)]
