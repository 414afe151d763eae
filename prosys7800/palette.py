"""The 256-colour RGB palette used to turn Maria colour indices into pixels."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["PALETTE_SIZE", "DEFAULT_PALETTE", "Palette"]

PALETTE_SIZE = 768

DEFAULT_PALETTE = bytes.fromhex(
    "00 00 00 14 14 14 29 29 29 3D 3D 3D"
    "52 52 52 66 66 66 7A 7A 7A 8F 8F 8F"
    "A3 A3 A3 B8 B8 B8 CC CC CC E0 E0 E0"
    "F5 F5 F5 FF FF FF FF FF FF FF FF FF"
    "18 11 00 2C 25 00 41 3A 00 55 4E 00"
    "6A 62 00 7E 77 00 92 8B 00 A7 A0 00"
    "BB B4 0E D0 C8 22 E4 DD 37 F8 F1 4B"
    "FF FF 5F FF FF 74 FF FF 88 FF FF 9D"
    "3B 00 00 50 0C 00 64 21 00 79 35 00"
    "8D 49 00 A1 5E 00 B6 72 09 CA 87 1D"
    "DF 9B 31 F3 AF 46 FF C4 5A FF D8 6F"
    "FF ED 83 FF FF 97 FF FF AC FF FF C0"
    "52 00 00 66 00 00 7B 09 00 8F 1E 08"
    "A4 32 1C B8 47 31 CC 5B 45 E1 6F 5A"
    "F5 84 6E FF 98 82 FF AD 97 FF C1 AB"
    "FF D5 C0 FF EA D4 FF FE E8 FF FF FD"
    "57 00 13 6B 00 27 7F 00 3C 94 0D 50"
    "A8 22 65 BD 36 79 D1 4B 8D E5 5F A2"
    "FA 73 B6 FF 88 CB FF 9C DF FF B1 F3"
    "FF C5 FF FF D9 FF FF EE FF FF FF FF"
    "48 00 57 5D 00 6B 71 00 80 86 08 94"
    "9A 1C A9 AE 30 BD C3 45 D1 D7 59 E6"
    "EC 6E FA FF 82 FF FF 96 FF FF AB FF"
    "FF BF FF FF D4 FF FF E8 FF FF FC FF"
    "2A 00 88 3F 00 9C 53 00 B1 67 0D C5"
    "7C 22 DA 90 36 EE A5 4A FF B9 5F FF"
    "CD 73 FF E2 88 FF F6 9C FF FF B0 FF"
    "FF C5 FF FF D9 FF FF EE FF FF FF FF"
    "03 00 9B 17 00 B0 2C 09 C4 40 1D D9"
    "55 32 ED 69 46 FF 7D 5B FF 92 6F FF"
    "A6 83 FF BB 98 FF CF AC FF E3 C1 FF"
    "F8 D5 FF FF E9 FF FF FE FF FF FF FF"
    "00 00 8D 00 0C A1 04 20 B6 18 35 CA"
    "2D 49 DE 41 5D F3 56 72 FF 6A 86 FF"
    "7E 9B FF 93 AF FF A7 C3 FF BC D8 FF"
    "D0 EC FF E4 FF FF F9 FF FF FF FF FF"
    "00 10 60 00 25 74 00 39 89 00 4E 9D"
    "0D 62 B1 21 76 C6 36 8B DA 4A 9F EF"
    "5E B4 FF 73 C8 FF 87 DC FF 9C F1 FF"
    "B0 FF FF C4 FF FF D9 FF FF ED FF FF"
    "00 26 1E 00 3A 32 00 4F 46 00 63 5B"
    "00 77 6F 10 8C 84 25 A0 98 39 B5 AC"
    "4E C9 C1 62 DD D5 76 F2 EA 8B FF FE"
    "9F FF FF B4 FF FF C8 FF FF DC FF FF"
    "00 33 00 00 47 00 00 5C 00 00 70 12"
    "00 85 27 12 99 3B 27 AD 50 3B C2 64"
    "4F D6 78 64 EB 8D 78 FF A1 8D FF B6"
    "A1 FF CA B5 FF DE CA FF F3 DE FF FF"
    "00 35 00 00 49 00 00 5E 00 00 72 00"
    "12 87 00 26 9B 00 3B AF 10 4F C4 25"
    "63 D8 39 78 ED 4E 8C FF 62 A1 FF 76"
    "B5 FF 8B C9 FF 9F DE FF B4 F2 FF C8"
    "00 2C 00 00 40 00 0B 54 00 1F 69 00"
    "34 7D 00 48 92 00 5D A6 00 71 BA 00"
    "85 CF 11 9A E3 26 AE F8 3A C3 FF 4E"
    "D7 FF 63 EB FF 77 FF FF 8C FF FF A0"
    "0B 19 00 1F 2D 00 33 41 00 48 56 00"
    "5C 6A 00 71 7F 00 85 93 00 99 A7 00"
    "AE BC 09 C2 D0 1D D7 E5 32 EB F9 46"
    "FF FF 5B FF FF 6F FF FF 83 FF FF 98"
    "31 00 00 45 15 00 5A 29 00 6E 3D 00"
    "82 52 00 97 66 00 AB 7B 00 C0 8F 0E"
    "D4 A3 22 E8 B8 37 FD CC 4B FF E1 60"
    "FF F5 74 FF FF 88 FF FF 9D FF FF B1"
)

assert len(DEFAULT_PALETTE) == PALETTE_SIZE


@dataclass
class Palette:
    """A table of 256 RGB triples stored as 768 bytes.

    ``default`` is true while the palette is the built-in one, so that a
    region change may replace it; a user-supplied palette clears it.
    """

    data: bytearray = field(default_factory=lambda: bytearray(DEFAULT_PALETTE))
    default: bool = True

    def load(self, data: bytes | bytearray | memoryview) -> None:
        """Replace the table with the first 768 bytes of ``data``."""
        if len(data) < PALETTE_SIZE:
            raise ValueError(
                f"palette data needs {PALETTE_SIZE} bytes, got {len(data)}"
            )
        self.data[:] = bytes(data[:PALETTE_SIZE])

    def rgb(self, index: int) -> tuple[int, int, int]:
        """Return the ``(red, green, blue)`` triple for colour ``index``."""
        if not 0 <= index < PALETTE_SIZE // 3:
            raise IndexError(f"colour index out of range: {index}")
        base = index * 3
        red, green, blue = self.data[base : base + 3]
        return red, green, blue