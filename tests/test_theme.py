import unittest

from hexmix.core.octets import ColorClass
from hexmix.ui.ansi import RESET, Color, Style, escape, strip_ansi
from hexmix.ui.theme import BASE_THEME, DEFAULT_THEME, THEMES


class TestTheme(unittest.TestCase):
    def test_escape(self):
        self.assertEqual(escape((Style.BOLD, Color.BLUE)), "\x1b[1;34m")
        self.assertEqual(escape(()), "")

    def test_paint(self):
        text = BASE_THEME.paint("0x00", "byte_null")
        self.assertEqual(text, f"\x1b[90m0x00{RESET}")
        self.assertEqual(strip_ansi(text), "0x00")

    def test_paint_unknown_role(self):
        self.assertEqual(BASE_THEME.paint("x", "nope"), "x")

    def test_every_theme_covers_byte_classes(self):
        for theme in THEMES.values():
            for color_class in ColorClass:
                self.assertIn(color_class.role, theme.colors, theme.name)
            self.assertIn("addr", theme.colors, theme.name)

    def test_default_theme_registered(self):
        self.assertIs(THEMES[DEFAULT_THEME.name], DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
