"""Core avatar services: name normalization, settings, logging, and generation."""

from monogram_renderer import EncodeError, InitializationError, MonogramError, RenderError

from .config import MonogramConfig, load_config, save_config
from .generator import (
    AvatarGenerator,
    default_generator,
    generate_with_first_name_last_name,
    generate_with_name,
    init_app,
)
from .logging_setup import configure_logging, get_logger
from .names import extract_initials, first_grapheme, split_name_parts

__all__ = [
    "AvatarGenerator",
    "EncodeError",
    "InitializationError",
    "MonogramConfig",
    "MonogramError",
    "RenderError",
    "configure_logging",
    "default_generator",
    "extract_initials",
    "first_grapheme",
    "generate_with_first_name_last_name",
    "generate_with_name",
    "get_logger",
    "init_app",
    "load_config",
    "save_config",
    "split_name_parts",
]
