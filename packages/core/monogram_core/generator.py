"""Avatar generation entrypoints: name -> initials + palette -> PNG bytes."""

from __future__ import annotations

import threading
from pathlib import Path

from monogram_renderer import (
    CANVAS_SIZE,
    MonogramError,
    Palette,
    PillowRenderEngine,
    RenderContext,
    RenderEngine,
    RenderError,
    Viewport,
    build_composition,
    create_render_context,
    default_render_context,
    encode_png,
    select_palette,
)

from .config import MonogramConfig
from .logging_setup import configure_logging, get_logger
from .names import extract_initials

_LOGGER = get_logger("generator")


class AvatarGenerator:
    """Renders initials avatars against one shared, read-only render context."""

    def __init__(
        self,
        context: RenderContext | None = None,
        engine: RenderEngine | None = None,
        viewport: Viewport | None = None,
    ) -> None:
        self.context = context or default_render_context()
        self.engine = engine or PillowRenderEngine()
        self.viewport = viewport or Viewport(CANVAS_SIZE, CANVAS_SIZE)

    @classmethod
    def from_config(cls, cfg: MonogramConfig) -> "AvatarGenerator":
        if cfg.font.path:
            return cls(context=create_render_context(Path(cfg.font.path)))
        return cls()

    def generate_with_name(self, name: str) -> bytes:
        return self._generate(extract_initials(name), select_palette(name))

    def generate_with_first_name_last_name(self, first_name: str, last_name: str) -> bytes:
        return self.generate_with_name(f"{first_name} {last_name}")

    def _generate(self, initials: str, palette: Palette) -> bytes:
        spec = build_composition(initials, palette)
        try:
            image = self.engine.render(spec, self.context, self.viewport)
        except MonogramError:
            raise
        except Exception as exc:
            _LOGGER.error(f"engine fault: {exc}", extra={"event": "render_failed"})
            raise RenderError(f"Render engine failed: {exc}") from exc

        png = encode_png(image)
        _LOGGER.debug(
            f"avatar generated initials={initials} palette={palette.start.hex} bytes={len(png)}",
            extra={"event": "avatar_generated"},
        )
        return png


_default_lock = threading.Lock()
_default_generator: AvatarGenerator | None = None


def default_generator() -> AvatarGenerator:
    global _default_generator
    generator = _default_generator
    if generator is not None:
        return generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = AvatarGenerator()
        return _default_generator


def init_app(cfg: MonogramConfig | None = None) -> AvatarGenerator:
    """Configure logging and load the font eagerly so failures surface at startup."""
    global _default_generator
    cfg = cfg or MonogramConfig()
    configure_logging(
        level=cfg.logging.level,
        console=cfg.logging.console,
        json_format=cfg.logging.json,
        log_file=Path(cfg.logging.file).expanduser() if cfg.logging.file else None,
        keep_files=cfg.logging.keep_files,
    )
    generator = AvatarGenerator.from_config(cfg)
    with _default_lock:
        _default_generator = generator
    _LOGGER.info(f"app initialized font={generator.context.font.name}", extra={"event": "app_initialized"})
    return generator


def generate_with_name(name: str) -> bytes:
    return default_generator().generate_with_name(name)


def generate_with_first_name_last_name(first_name: str, last_name: str) -> bytes:
    return default_generator().generate_with_first_name_last_name(first_name, last_name)
