import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_renderer.models import Color
from monogram_renderer.palettes import (
    PALETTE_TABLE,
    PALETTE_TABLE_VERSION,
    PALETTES,
    list_palettes,
    palette_index,
    select_palette,
)


class PaletteTableTests(unittest.TestCase):
    def test_table_values(self):
        self.assertEqual(PALETTE_TABLE_VERSION, 1)
        self.assertEqual(len(PALETTES), 10)
        self.assertEqual(PALETTE_TABLE[0], ("#FF6B6BFF", "#FF8E53FF"))
        self.assertEqual(PALETTE_TABLE[9], ("#A29BFEFF", "#6C5CE7FF"))
        self.assertEqual(PALETTES[1].start, Color(0x4E, 0xCD, 0xC4, 0xFF))
        self.assertEqual(PALETTES[1].end, Color(0x44, 0xA0, 0x8D, 0xFF))

    def test_parsed_table_matches_literal(self):
        for (start, end), palette in zip(PALETTE_TABLE, PALETTES):
            self.assertEqual(palette.start.hex, start)
            self.assertEqual(palette.end.hex, end)
            self.assertEqual(palette.start.a, 255)
            self.assertEqual(palette.end.a, 255)

    def test_list_palettes_is_an_ordered_copy(self):
        palettes = list_palettes()
        self.assertEqual(palettes, list(PALETTES))
        palettes.clear()
        self.assertEqual(len(list_palettes()), 10)


class PaletteSelectionTests(unittest.TestCase):
    def test_reference_vectors(self):
        # md5("John Smith") starts 6117323d -> 0x6117323d % 10 == 1
        self.assertEqual(palette_index("John Smith"), 1)
        self.assertEqual(select_palette("John Smith"), PALETTES[1])
        # md5("Jane Doe") starts 1c272047
        self.assertEqual(palette_index("Jane Doe"), 5)
        # md5("") starts d41d8cd9
        self.assertEqual(palette_index(""), 3)
        # UTF-8 bytes are hashed: md5("Álvaro") starts 05ca95c9
        self.assertEqual(palette_index("Álvaro"), 7)

    def test_deterministic_and_in_range(self):
        for name in ["", " ", "john", "John", "山田 太郎", "\U0001f1eb\U0001f1f7", "x" * 500]:
            first = select_palette(name)
            self.assertEqual(first, select_palette(name))
            self.assertIn(palette_index(name), range(10))

    def test_keyed_on_full_string_not_initials(self):
        self.assertEqual(palette_index("john"), 9)
        self.assertNotEqual(palette_index("john"), palette_index("John Smith"))

    def test_lone_surrogate_does_not_fail(self):
        self.assertIn(palette_index("bad\ud800name"), range(10))


class ColorTests(unittest.TestCase):
    def test_from_hex(self):
        self.assertEqual(Color.from_hex("#0984E3"), Color(0x09, 0x84, 0xE3, 0xFF))
        self.assertEqual(Color.from_hex("0984e380").a, 0x80)
        self.assertEqual(Color(255, 255, 255).hex, "#FFFFFFFF")

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            Color.from_hex("#12345")
        with self.assertRaises(ValueError):
            Color(256, 0, 0)


if __name__ == "__main__":
    unittest.main()
