"""GIMP palette output."""
import io
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import ACOFile  # noqa: E402
import GPLPalette  # noqa: E402


def aco_palette(version, *colors):
    palette = ACOFile.ACOPalette(version, len(colors))
    for color in colors:
        palette.add_entry(color)
    return palette


class TestGPLPalette(unittest.TestCase):

    def test_empty_palette_is_header_only(self):
        out = io.StringIO()
        GPLPalette.GPLPalette.fromPalette(aco_palette(1)).write(out)
        self.assertEqual(out.getvalue(), "GIMP Palette\nName: Untitled\nColumns: 16\n#\n")

    def test_unnamed_entries_have_trailing_space(self):
        out = io.StringIO()
        palette = aco_palette(1, ACOFile.ACOColor(255, 0, 10), ACOFile.ACOColor(1, 2, 3))
        GPLPalette.GPLPalette.fromPalette(palette).write(out)
        self.assertEqual(out.getvalue().splitlines()[4:], ["255 0 10 ", "1 2 3 "])

    def test_named_entries(self):
        palette = aco_palette(2, ACOFile.ACOColor(0, 128, 255, "Deep Sky"))
        lines = list(GPLPalette.GPLPalette.fromPalette(palette))
        self.assertEqual(lines, [
            "GIMP Palette",
            "Name: Untitled",
            "Columns: 16",
            "#",
            "0 128 255 Deep Sky",
        ])

    def test_more_than_four_colors_one_line_each(self):
        colors = [ACOFile.ACOColor(i, i, i) for i in range(9)]
        lines = list(GPLPalette.GPLPalette.fromPalette(aco_palette(1, *colors)))
        self.assertEqual(len(lines), 4 + 9)
        self.assertEqual(lines[-1], "8 8 8 ")

    def test_from_color_copies_channels_and_name(self):
        gplc = GPLPalette.GPLColor.fromColor(ACOFile.ACOColor(4, 5, 6, "n"))
        self.assertEqual(str(gplc), "4 5 6 n")
        self.assertEqual(str(GPLPalette.GPLColor.fromColor(ACOFile.ACOColor(4, 5, 6))), "4 5 6 ")

    def test_comments_are_placed_before_their_entry(self):
        gplpal = GPLPalette.GPLPalette("Test", 4)
        gplpal.add_entry(GPLPalette.GPLColor(1, 1, 1))
        gplpal.add_entry(GPLPalette.GPLColor(2, 2, 2))
        gplpal.add_comment(1, " second")
        gplpal.add_comment(2, " end")
        self.assertEqual(list(gplpal), [
            "GIMP Palette", "Name: Test", "Columns: 4",
            "1 1 1 ", "# second", "2 2 2 ", "# end",
        ])

    def test_rejects_foreign_entries(self):
        gplpal = GPLPalette.GPLPalette()
        with self.assertRaises(TypeError):
            gplpal.add_entry(ACOFile.ACOColor(1, 2, 3))
        with self.assertRaises(TypeError):
            gplpal.add_comment("0", "x")


if __name__ == "__main__":
    unittest.main()
