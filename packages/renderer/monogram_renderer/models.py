"""Typed composition models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        raw = value.strip().lstrip("#")
        if len(raw) == 6:
            raw += "FF"
        if len(raw) != 8:
            raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, got {value!r}")
        r, g, b, a = (int(raw[i : i + 2], 16) for i in (0, 2, 4, 6))
        return cls(r, g, b, a)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Palette:
    start: Color
    end: Color


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: float


@dataclass(frozen=True)
class LinearGradient:
    angle: float
    stops: tuple[GradientStop, ...]


class Alignment(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class TextLayer:
    text: str
    font_size: float
    font_weight: int
    color: Color
    horizontal: Alignment = Alignment.CENTER
    vertical: Alignment = Alignment.CENTER


@dataclass(frozen=True)
class Canvas:
    width: int
    height: int


@dataclass(frozen=True)
class CompositionSpec:
    canvas: Canvas
    background: LinearGradient
    text: TextLayer


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int
