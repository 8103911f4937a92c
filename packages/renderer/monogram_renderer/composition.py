"""Assembles the engine-agnostic description of one avatar."""

from __future__ import annotations

from .models import (
    Alignment,
    Canvas,
    Color,
    CompositionSpec,
    GradientStop,
    LinearGradient,
    Palette,
    TextLayer,
)

CANVAS_SIZE = 512
GRADIENT_ANGLE = 135.0
TEXT_COLOR = Color(255, 255, 255, 255)
FONT_WEIGHT = 600
# 12rem glyphs on a 32rem square.
FONT_SIZE_RATIO = 12 / 32


def build_composition(initials: str, palette: Palette) -> CompositionSpec:
    canvas = Canvas(width=CANVAS_SIZE, height=CANVAS_SIZE)
    background = LinearGradient(
        angle=GRADIENT_ANGLE,
        stops=(
            GradientStop(color=palette.start, position=0.0),
            GradientStop(color=palette.end, position=1.0),
        ),
    )
    text = TextLayer(
        text=initials,
        font_size=CANVAS_SIZE * FONT_SIZE_RATIO,
        font_weight=FONT_WEIGHT,
        color=TEXT_COLOR,
        horizontal=Alignment.CENTER,
        vertical=Alignment.CENTER,
    )
    return CompositionSpec(canvas=canvas, background=background, text=text)
