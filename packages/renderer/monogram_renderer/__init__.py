"""Renderer package for gradient initials avatars."""

from .composition import CANVAS_SIZE, build_composition
from .encoding import encode_png
from .engine import PillowRenderEngine, RenderEngine
from .errors import EncodeError, InitializationError, MonogramError, RenderError
from .fonts import FontResource, RenderContext, create_render_context, default_render_context
from .models import (
    Alignment,
    Canvas,
    Color,
    CompositionSpec,
    GradientStop,
    LinearGradient,
    Palette,
    TextLayer,
    Viewport,
)
from .palettes import PALETTE_TABLE, PALETTE_TABLE_VERSION, PALETTES, list_palettes, palette_index, select_palette

__all__ = [
    "Alignment",
    "CANVAS_SIZE",
    "Canvas",
    "Color",
    "CompositionSpec",
    "EncodeError",
    "FontResource",
    "GradientStop",
    "InitializationError",
    "LinearGradient",
    "MonogramError",
    "PALETTES",
    "PALETTE_TABLE",
    "PALETTE_TABLE_VERSION",
    "Palette",
    "PillowRenderEngine",
    "RenderContext",
    "RenderEngine",
    "RenderError",
    "TextLayer",
    "Viewport",
    "build_composition",
    "create_render_context",
    "default_render_context",
    "encode_png",
    "list_palettes",
    "palette_index",
    "select_palette",
]
