"""Deployment settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class FontConfig:
    path: str | None = None


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console: bool = True
    json: bool = False
    file: str | None = None
    keep_files: int = 7


@dataclass
class MonogramConfig:
    config_version: int = CONFIG_VERSION
    font: FontConfig = field(default_factory=FontConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_logging(cfg: MonogramConfig) -> None:
    level = str(cfg.logging.level or "INFO").upper()
    cfg.logging.level = level if level in _LEVELS else "INFO"
    try:
        cfg.logging.keep_files = max(1, int(cfg.logging.keep_files))
    except (TypeError, ValueError):
        cfg.logging.keep_files = LoggingConfig.keep_files
    cfg.logging.console = bool(cfg.logging.console)
    cfg.logging.json = bool(cfg.logging.json)
    cfg.logging.file = str(cfg.logging.file) if cfg.logging.file else None


def _normalize_font(cfg: MonogramConfig) -> None:
    cfg.font.path = str(cfg.font.path) if cfg.font.path else None


def load_config(path: Path | None = None) -> MonogramConfig:
    if path is None or not path.exists():
        return MonogramConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logging.getLogger("monogram.config").warning(
            f"ignoring unreadable config {path}: {exc}", extra={"event": "config_invalid"}
        )
        return MonogramConfig()
    if not isinstance(raw, dict):
        return MonogramConfig()

    cfg = MonogramConfig(
        config_version=CONFIG_VERSION,
        font=_merge(FontConfig, raw.get("font", {})),
        logging=_merge(LoggingConfig, raw.get("logging", {})),
    )

    _normalize_font(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: MonogramConfig, path: Path) -> Path:
    cfg.config_version = CONFIG_VERSION
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
