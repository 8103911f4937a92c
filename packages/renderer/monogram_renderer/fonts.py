"""Font resource loading and the process-wide render context."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from importlib import resources
from io import BytesIO
from pathlib import Path

from PIL import ImageFont

from .errors import InitializationError

DEFAULT_FONT_NAME = "Lato-Regular.ttf"

_LOGGER = logging.getLogger("monogram.fonts")


@dataclass(frozen=True)
class FontResource:
    """Immutable font bytes; every render builds its own Pillow face from them."""

    name: str
    data: bytes

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        return ImageFont.truetype(BytesIO(self.data), size=size, layout_engine=ImageFont.Layout.BASIC)


@dataclass(frozen=True)
class RenderContext:
    font: FontResource


def _bundled_font_bytes() -> bytes:
    return resources.files("monogram_renderer").joinpath("assets").joinpath(DEFAULT_FONT_NAME).read_bytes()


def load_font_resource(path: Path | None = None) -> FontResource:
    name = path.name if path is not None else DEFAULT_FONT_NAME
    try:
        data = path.read_bytes() if path is not None else _bundled_font_bytes()
        # Parse once up front so a corrupt file fails here, not mid-render.
        ImageFont.truetype(BytesIO(data), size=12, layout_engine=ImageFont.Layout.BASIC)
    except (OSError, ValueError) as exc:
        _LOGGER.error(f"font load failed: {name}", extra={"event": "font_load_failed"})
        raise InitializationError(f"Unable to load font resource {name!r}: {exc}") from exc

    _LOGGER.info(f"font loaded: {name} ({len(data)} bytes)", extra={"event": "font_loaded"})
    return FontResource(name=name, data=data)


def create_render_context(font_path: Path | str | None = None) -> RenderContext:
    path = Path(font_path).expanduser() if font_path else None
    return RenderContext(font=load_font_resource(path))


_context_lock = threading.Lock()
_default_context: RenderContext | None = None


def default_render_context() -> RenderContext:
    """Return the bundled-font context, loading it at most once per process."""
    global _default_context
    context = _default_context
    if context is not None:
        return context
    with _context_lock:
        if _default_context is None:
            _default_context = create_render_context()
            _LOGGER.info("render context ready", extra={"event": "render_context_ready"})
        return _default_context
