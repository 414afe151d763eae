"""Video standards and the display timing, palette and buffer sizes they imply."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .palette import DEFAULT_PALETTE, PALETTE_SIZE
from .rect import Rect

__all__ = [
    "Region",
    "RegionSettings",
    "NTSC_PALETTE",
    "PAL_PALETTE",
    "NTSC",
    "PAL",
    "resolve_settings",
]


class Region(IntEnum):
    """Which video standard to emulate; ``AUTO`` follows the cartridge."""

    NTSC = 0
    PAL = 1
    AUTO = 2


NTSC_PALETTE = DEFAULT_PALETTE

PAL_PALETTE = bytes.fromhex(
    "00 00 00 1c 1c 1c 39 39 39 59 59 59"
    "79 79 79 92 92 92 ab ab ab bc bc bc"
    "cd cd cd d9 d9 d9 e6 e6 e6 ec ec ec"
    "f2 f2 f2 f8 f8 f8 ff ff ff ff ff ff"
    "26 30 01 24 38 03 23 40 05 51 54 1b"
    "80 69 31 97 81 35 af 99 3a c2 a7 3e"
    "d5 b5 43 db c0 3d e1 cb 38 e2 d8 36"
    "e3 e5 34 ef f2 58 fb ff 7d fb ff 7d"
    "39 17 01 5e 23 04 83 30 08 a5 47 16"
    "c8 5f 24 e3 78 20 ff 91 1d ff ab 1d"
    "ff c5 1d ff ce 34 ff d8 4c ff e6 51"
    "ff f4 56 ff f9 77 ff ff 98 ff ff 98"
    "45 19 04 72 1e 11 9f 24 1e b3 3a 20"
    "c8 51 22 e3 69 20 ff 81 1e ff 8c 25"
    "ff 98 2c ff ae 38 ff c5 45 ff c5 59"
    "ff c6 6d ff d5 87 ff e4 a1 ff e4 a1"
    "4a 17 04 7e 1a 0d b2 1d 17 c8 21 19"
    "df 25 1c ec 3b 38 fa 52 55 fc 61 61"
    "ff 70 6e ff 7f 7e ff 8f 8f ff 9d 9e"
    "ff ab ad ff b9 bd ff c7 ce ff c7 ce"
    "05 05 68 3b 13 6d 71 22 72 8b 2a 8c"
    "a5 32 a6 b9 38 ba cd 3e cf db 47 dd"
    "ea 51 eb f4 5f f5 fe 6d ff fe 7a fd"
    "ff 87 fb ff 95 fd ff a4 ff ff a4 ff"
    "28 04 79 40 09 84 59 0f 90 70 24 9d"
    "88 39 aa a4 41 c3 c0 4a dc d0 54 ed"
    "e0 5e ff e9 6d ff f2 7c ff f8 8a ff"
    "ff 98 ff fe a1 ff fe ab ff fe ab ff"
    "35 08 8a 42 0a ad 50 0c d0 64 28 d0"
    "79 45 d0 8d 4b d4 a2 51 d9 b0 58 ec"
    "be 60 ff c5 6b ff cc 77 ff d1 83 ff"
    "d7 90 ff db 9d ff df aa ff df aa ff"
    "05 1e 81 06 26 a5 08 2f ca 26 3d d4"
    "44 4c de 4f 5a ee 5a 68 ff 65 75 ff"
    "71 83 ff 80 91 ff 90 a0 ff 97 a9 ff"
    "9f b2 ff af be ff c0 cb ff c0 cb ff"
    "05 1e 81 06 26 a5 08 2f ca 26 3d d4"
    "44 4c de 4f 5a ee 5a 68 ff 65 75 ff"
    "71 83 ff 80 91 ff 90 a0 ff 97 a9 ff"
    "9f b2 ff af be ff c0 cb ff c0 cb ff"
    "0c 04 8b 22 18 a0 38 2d b5 48 3e c7"
    "58 4f da 61 59 ec 6b 64 ff 7a 74 ff"
    "8a 84 ff 91 8e ff 99 98 ff a5 a3 ff"
    "b1 ae ff b8 b8 ff c0 c2 ff c0 c2 ff"
    "1d 29 5a 1d 38 76 1d 48 92 1c 5c ac"
    "1c 71 c6 32 86 cf 48 9b d9 4e a8 ec"
    "55 b6 ff 70 c7 ff 8c d8 ff 93 db ff"
    "9b df ff af e4 ff c3 e9 ff c3 e9 ff"
    "2f 43 02 39 52 02 44 61 03 41 7a 12"
    "3e 94 21 4a 9f 2e 57 ab 3b 5c bd 55"
    "61 d0 70 69 e2 7a 72 f5 84 7c fa 8d"
    "87 ff 97 9a ff a6 ad ff b6 ad ff b6"
    "0a 41 08 0d 54 0a 10 68 0d 13 7d 0f"
    "16 92 12 19 a5 14 1c b9 17 1e c9 19"
    "21 d9 1b 47 e4 2d 6e f0 40 78 f7 4d"
    "83 ff 5b 9a ff 7a b2 ff 9a b2 ff 9a"
    "04 41 0b 05 53 0e 06 66 11 07 77 14"
    "08 88 17 09 9b 1a 0b af 1d 48 c4 1f"
    "86 d9 22 8f e9 24 99 f9 27 a8 fc 41"
    "b7 ff 5b c9 ff 6e dc ff 81 dc ff 81"
    "02 35 0f 07 3f 15 0c 4a 1c 2d 5f 1e"
    "4f 74 20 59 83 24 64 92 28 82 a1 2e"
    "a1 b0 34 a9 c1 3a b2 d2 41 c4 d9 45"
    "d6 e1 49 e4 f0 4e f2 ff 53 f2 ff 53"
)

assert len(PAL_PALETTE) == PALETTE_SIZE


@dataclass(frozen=True)
class RegionSettings:
    """Everything that differs between the NTSC and PAL machines.

    ``palette`` is the built-in palette for the standard; it should only
    replace the current palette while that palette is still the default.
    """

    region: Region
    display_area: Rect
    visible_area: Rect
    palette: bytes
    frequency: int
    scanlines: int
    tia_size: int
    pokey_size: int


NTSC = RegionSettings(
    region=Region.NTSC,
    display_area=Rect(0, 16, 319, 258),
    visible_area=Rect(0, 26, 319, 248),
    palette=NTSC_PALETTE,
    frequency=60,
    scanlines=262,
    tia_size=524,
    pokey_size=524,
)

PAL = RegionSettings(
    region=Region.PAL,
    display_area=Rect(0, 16, 319, 306),
    visible_area=Rect(0, 26, 319, 297),
    palette=PAL_PALETTE,
    frequency=50,
    scanlines=312,
    tia_size=624,
    pokey_size=624,
)


def resolve_settings(region: int, cartridge_region: int) -> RegionSettings:
    """Pick PAL when asked for, or when automatic and the cartridge is PAL; else NTSC."""
    if region == Region.PAL or (region == Region.AUTO and cartridge_region == Region.PAL):
        return PAL
    return NTSC