"""Built-in avatar gradient palettes and name-to-palette bucketing."""

from __future__ import annotations

import hashlib

from .models import Color, Palette

PALETTE_TABLE_VERSION = 1

# Order is significant: the index produced by palette_index() maps into it.
PALETTE_TABLE: tuple[tuple[str, str], ...] = (
    ("#FF6B6BFF", "#FF8E53FF"),
    ("#4ECDC4FF", "#44A08DFF"),
    ("#A8E6CFFF", "#3D84A8FF"),
    ("#FFD93DFF", "#FF6B6BFF"),
    ("#6C5CE7FF", "#A29BFEFF"),
    ("#FD79A8FF", "#FDCB6EFF"),
    ("#74B9FFFF", "#0984E3FF"),
    ("#55EFC4FF", "#00B894FF"),
    ("#FAB1A0FF", "#E17055FF"),
    ("#A29BFEFF", "#6C5CE7FF"),
)

PALETTES: tuple[Palette, ...] = tuple(
    Palette(start=Color.from_hex(start), end=Color.from_hex(end)) for start, end in PALETTE_TABLE
)

_HEX_PREFIX_LEN = 8


def palette_index(key: str) -> int:
    """Bucket *key* into the palette table.

    MD5 is only a stable spreading function here. The first 8 hex digits of
    the digest of the UTF-8 bytes are read as an unsigned integer and reduced
    modulo the table size, which keeps colors identical to previously
    generated avatars.
    """
    digest = hashlib.md5(key.encode("utf-8", "surrogatepass")).hexdigest()
    return int(digest[:_HEX_PREFIX_LEN], 16) % len(PALETTES)


def select_palette(key: str) -> Palette:
    return PALETTES[palette_index(key)]


def list_palettes() -> list[Palette]:
    return list(PALETTES)
