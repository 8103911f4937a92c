"""Display name normalization into avatar initials."""

from __future__ import annotations

import re
import unicodedata

FALLBACK_INITIALS = "?"

_SPLIT_RE = re.compile(r"[\s,\-]+")

_ZWJ = "\u200d"


def _is_regional_indicator(ch: str) -> bool:
    return "\U0001f1e6" <= ch <= "\U0001f1ff"


def _extends_cluster(ch: str) -> bool:
    if unicodedata.category(ch) in ("Mn", "Mc", "Me"):
        return True
    return (
        "\ufe00" <= ch <= "\ufe0f"  # variation selectors
        or "\U0001f3fb" <= ch <= "\U0001f3ff"  # skin tone modifiers
        or "\U000e0020" <= ch <= "\U000e007f"  # tag characters
    )


def _jamo_kind(ch: str) -> str | None:
    cp = ord(ch)
    if 0x1100 <= cp <= 0x115F or 0xA960 <= cp <= 0xA97C:
        return "L"
    if 0x1160 <= cp <= 0x11A7 or 0xD7B0 <= cp <= 0xD7C6:
        return "V"
    if 0x11A8 <= cp <= 0x11FF or 0xD7CB <= cp <= 0xD7FB:
        return "T"
    if 0xAC00 <= cp <= 0xD7A3:
        return "LV" if (cp - 0xAC00) % 28 == 0 else "LVT"
    return None


# Hangul syllable sequences that stay inside one cluster.
_JAMO_FOLLOWERS = {
    "L": ("L", "V", "LV", "LVT"),
    "LV": ("V", "T"),
    "V": ("V", "T"),
    "LVT": ("T",),
    "T": ("T",),
}


def first_grapheme(text: str) -> str:
    """Return the leading user-perceived character of *text*.

    Approximates an extended grapheme cluster: one code point plus trailing
    combining marks, variation selectors, emoji modifiers and ZWJ
    continuations. A pair of regional indicators (a flag) counts as one, and
    conjoining Hangul jamo stay together as one syllable.
    """
    if not text:
        return ""
    end = 1
    if _is_regional_indicator(text[0]) and len(text) > 1 and _is_regional_indicator(text[1]):
        end = 2
    while end < len(text):
        ch = text[end]
        if _extends_cluster(ch) or _jamo_kind(ch) in _JAMO_FOLLOWERS.get(_jamo_kind(text[end - 1]) or "", ()):
            end += 1
        elif ch == _ZWJ and end + 1 < len(text):
            end += 2
        else:
            break
    return text[:end]


def _upper_grapheme(cluster: str) -> str:
    upper = unicodedata.normalize("NFC", cluster.upper())
    if first_grapheme(upper) != upper:
        # Expanding case mappings (e.g. "ß" -> "SS") would add a character.
        return unicodedata.normalize("NFC", cluster)
    return upper


def split_name_parts(name: str) -> list[str]:
    return [part for part in _SPLIT_RE.split(name.strip()) if part]


def extract_initials(name: str) -> str:
    parts = [unicodedata.normalize("NFC", part) for part in split_name_parts(name)]
    if not parts:
        return FALLBACK_INITIALS
    first = _upper_grapheme(first_grapheme(parts[0]))
    if len(parts) == 1:
        return first
    last = _upper_grapheme(first_grapheme(parts[-1]))
    if first_grapheme(first + last) != first:
        # The last initial would fuse with the first (leading mark, half a flag).
        return first
    return first + last


def grapheme_count(text: str) -> int:
    count = 0
    while text:
        text = text[len(first_grapheme(text)) :]
        count += 1
    return count
