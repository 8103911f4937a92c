"""Pillow render engine for composition specs."""

from __future__ import annotations

import logging
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from .errors import RenderError
from .fonts import RenderContext
from .gradient import paint_linear_gradient
from .models import Alignment, CompositionSpec, TextLayer, Viewport

_LOGGER = logging.getLogger("monogram.engine")

_REGULAR_WEIGHT = 400

# Pillow anchor letters: horizontal (left/middle/right), vertical (ascender/middle/descender).
_H_ANCHOR = {Alignment.START: "l", Alignment.CENTER: "m", Alignment.END: "r"}
_V_ANCHOR = {Alignment.START: "a", Alignment.CENTER: "m", Alignment.END: "d"}


class RenderEngine(Protocol):
    def render(self, spec: CompositionSpec, context: RenderContext, viewport: Viewport) -> Image.Image: ...


def synthetic_stroke(size: float, weight: int) -> int:
    if weight <= _REGULAR_WEIGHT:
        return 0
    return round(size * (weight - _REGULAR_WEIGHT) / 10000)


def _apply_weight(face: ImageFont.FreeTypeFont, size: float, weight: int) -> int:
    """Set the weight axis of variable fonts; return the stroke to fake it otherwise."""
    try:
        axes = face.get_variation_axes()
    except (OSError, NotImplementedError):
        return synthetic_stroke(size, weight)

    values = [axis["default"] for axis in axes]
    for i, axis in enumerate(axes):
        if axis.get("name") in (b"Weight", "Weight"):
            values[i] = max(axis["minimum"], min(axis["maximum"], weight))
            face.set_variation_by_axes(values)
            return 0
    return synthetic_stroke(size, weight)


class PillowRenderEngine:
    """Paints the gradient background and the centred initials."""

    def render(self, spec: CompositionSpec, context: RenderContext, viewport: Viewport) -> Image.Image:
        try:
            image = paint_linear_gradient(viewport.width, viewport.height, spec.background)
            scale = viewport.width / spec.canvas.width
            self._draw_text(image, spec.text, context, scale)
        except (OSError, ValueError, MemoryError) as exc:
            _LOGGER.error(f"render failed: {exc}", extra={"event": "render_failed"})
            raise RenderError(f"Unable to render composition: {exc}") from exc

        if image.size != (viewport.width, viewport.height):
            raise RenderError(f"Rendered {image.size} does not match viewport {viewport.width}x{viewport.height}")
        return image

    def _draw_text(self, image: Image.Image, layer: TextLayer, context: RenderContext, scale: float) -> None:
        size = layer.font_size * scale
        face = context.font.face(size)
        stroke = _apply_weight(face, size, layer.font_weight)

        width, height = image.size
        x = {Alignment.START: 0, Alignment.CENTER: width / 2, Alignment.END: width}[layer.horizontal]
        y = {Alignment.START: 0, Alignment.CENTER: height / 2, Alignment.END: height}[layer.vertical]

        draw = ImageDraw.Draw(image)
        draw.text(
            (x, y),
            layer.text,
            font=face,
            fill=layer.color.rgba,
            anchor=_H_ANCHOR[layer.horizontal] + _V_ANCHOR[layer.vertical],
            stroke_width=stroke,
            stroke_fill=layer.color.rgba,
        )
