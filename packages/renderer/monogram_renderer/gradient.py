"""Linear gradient rasterization."""

from __future__ import annotations

import math

import numpy as np
from PIL import Image

from .models import LinearGradient


def gradient_ramp(width: int, height: int, angle: float) -> np.ndarray:
    """Return the gradient parameter (0..1) for every pixel centre.

    Angles follow CSS ``linear-gradient``: 0 points up and angles turn
    clockwise, so 135 runs from the top-left corner to the bottom-right one.
    The gradient line is just long enough for both corners on its axis to hit
    the first and last stop.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Gradient area must be non-empty")
    theta = math.radians(angle)
    dx = math.sin(theta)
    dy = -math.cos(theta)
    length = abs(width * dx) + abs(height * dy)

    xs = np.arange(width, dtype=np.float64) + 0.5 - width / 2
    ys = np.arange(height, dtype=np.float64) + 0.5 - height / 2
    projected = xs[np.newaxis, :] * dx + ys[:, np.newaxis] * dy
    return np.clip(projected / length + 0.5, 0.0, 1.0)


def gradient_pixels(width: int, height: int, gradient: LinearGradient) -> np.ndarray:
    if not gradient.stops:
        raise ValueError("Gradient needs at least one stop")
    stops = sorted(gradient.stops, key=lambda s: s.position)
    positions = np.array([s.position for s in stops], dtype=np.float64)
    t = gradient_ramp(width, height, gradient.angle)

    out = np.empty((height, width, 4), dtype=np.uint8)
    for channel in range(4):
        values = np.array([s.color.rgba[channel] for s in stops], dtype=np.float64)
        mixed = np.interp(t, positions, values)
        out[:, :, channel] = np.rint(mixed).astype(np.uint8)
    return out


def paint_linear_gradient(width: int, height: int, gradient: LinearGradient) -> Image.Image:
    return Image.fromarray(gradient_pixels(width, height, gradient))
