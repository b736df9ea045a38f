import unittest

from hexmix.core.octets import NumericFormat
from hexmix.ui.ansi import strip_ansi
from hexmix.ui.hexdump import address_width, format_row, hexdump
from hexmix.ui.theme import BASE_THEME

ALPHABET = (
    b"abcdefghijklmnopqrstuvwxyz"
    b"012345678901234567890123456789012345678901234567890123456789"
)


def _tag(text: str, role: str) -> str:
    return f"<{role}>{text}</>"


class TestHexdump(unittest.TestCase):
    def test_hexdump_basic(self):
        lines = hexdump(b"AB\x00C", bytes_per_line=4)
        self.assertEqual(lines[0], "0x000000: 0x41 0x42 0x00 0x43 AB.C")
        self.assertEqual(lines[1], "   bytes: 4")

    def test_alphabet_ten_columns(self):
        self.assertEqual(len(ALPHABET), 86)
        lines = hexdump(ALPHABET, bytes_per_line=10)
        self.assertEqual(
            lines[0],
            "0x000000: 0x61 0x62 0x63 0x64 0x65 0x66 0x67 0x68 0x69 0x6a abcdefghij",
        )
        self.assertEqual(len(lines), 9 + 1)
        self.assertTrue(lines[-2].startswith("0x000050: 0x34 0x35 "))
        self.assertTrue(lines[-2].endswith(" 456789"))
        self.assertEqual(lines[-1], "   bytes: 86")

    def test_short_row_padding(self):
        lines = hexdump(b"012", bytes_per_line=10)
        self.assertEqual(
            lines[0],
            "0x000000: 0x30 0x31 0x32                                    012",
        )

    def test_empty(self):
        self.assertEqual(hexdump(b"", bytes_per_line=8), ["   bytes: 0"])

    def test_single_byte(self):
        lines = hexdump(b"\x7f", bytes_per_line=3)
        self.assertEqual(lines, ["0x000000: 0x7f           .", "   bytes: 1"])

    def test_exact_columns(self):
        lines = hexdump(b"abcd", bytes_per_line=4)
        self.assertEqual(lines, ["0x000000: 0x61 0x62 0x63 0x64 abcd", "   bytes: 4"])

    def test_row_count(self):
        for length in (0, 1, 7, 8, 9, 33):
            for cols in (1, 3, 8):
                lines = hexdump(bytes(length), bytes_per_line=cols)
                self.assertEqual(len(lines) - 1, -(-length // cols))
                self.assertEqual(lines[-1], f"   bytes: {length}")

    def test_gloss_aligned_for_each_format(self):
        data = bytes(range(0x41, 0x41 + 11))
        for fmt in NumericFormat:
            lines = hexdump(data, bytes_per_line=4, fmt=fmt)[:-1]
            chunks = [4, 4, 3]
            starts = {len(line) - size for line, size in zip(lines, chunks)}
            self.assertEqual(len(starts), 1, fmt)
            self.assertTrue(lines[-1].endswith("IJK"), fmt)

    def test_address_width_grows(self):
        self.assertEqual(address_width(0, 16), 6)
        self.assertEqual(address_width(0x1000000, 16), 6)
        self.assertEqual(address_width(0x1000001, 16), 7)
        line = format_row(0x1000000, b"A", address_width(0x1000001, 16), 16)
        self.assertTrue(line.startswith("0x1000000: 0x41 "))

    def test_colorize_roles(self):
        line = format_row(0, b"A\x00", 6, 2, colorize=_tag)
        self.assertEqual(
            line,
            "<addr>0x000000</>: <byte_printable>0x41</> <byte_null>0x00</> "
            "<byte_printable>A</><byte_null>.</>",
        )

    def test_color_keeps_alignment(self):
        plain = hexdump(b"\x00\x01hi\xff", bytes_per_line=4)
        colored = hexdump(b"\x00\x01hi\xff", bytes_per_line=4, colorize=BASE_THEME.paint)
        self.assertNotEqual(plain, colored)
        self.assertEqual([strip_ansi(line) for line in colored], plain)

    def test_invalid_width(self):
        with self.assertRaises(ValueError):
            hexdump(b"a", bytes_per_line=0)


if __name__ == "__main__":
    unittest.main()
