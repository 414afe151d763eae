"""Maria, the graphics chip: display-list DMA into line RAM and out to a surface."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .memory import Memory, Register
from .rect import Rect, join_word

__all__ = [
    "SURFACE_SIZE",
    "LINE_RAM_SIZE",
    "NTSC_DISPLAY_AREA",
    "NTSC_VISIBLE_AREA",
    "Maria",
]

SURFACE_SIZE = 93440
LINE_RAM_SIZE = 160
_LINE_PIXELS = LINE_RAM_SIZE * 2

NTSC_DISPLAY_AREA = Rect(0, 16, 319, 258)
NTSC_VISIBLE_AREA = Rect(0, 26, 319, 248)


class Maria:
    """Graphics state bound to a :class:`Memory`.

    ``nmi`` is called whenever a display-list-list entry asks for a
    non-maskable interrupt. ``surface`` holds one colour index per pixel,
    ``display_area.length()`` pixels per scanline, starting at the top of
    the display area.
    """

    def __init__(self, memory: Memory, nmi: Optional[Callable[[], None]] = None) -> None:
        self.memory = memory
        self.nmi = nmi
        self.display_area = NTSC_DISPLAY_AREA
        self.visible_area = NTSC_VISIBLE_AREA
        self.surface = bytearray(SURFACE_SIZE)
        self.scanline = 1
        self._line_ram = bytearray(LINE_RAM_SIZE)
        self._cycles = 0
        self._dpp = 0
        self._dp = 0
        self._pp = 0
        self._horizontal = 0
        self._palette = 0
        self._offset = 0
        self._h08 = 0
        self._h16 = 0
        self._wmode = 0

    @property
    def line_ram(self) -> bytes:
        """The line buffer filled by the last display-list pass."""
        return bytes(self._line_ram)

    @property
    def display_list_list_pointer(self) -> int:
        """Address of the current display-list-list entry."""
        return self._dpp

    @property
    def offset(self) -> int:
        """Lines left in the current zone."""
        return self._offset

    def reset(self) -> None:
        """Return to the first scanline and blank the surface."""
        self.scanline = 1
        self.clear()

    def clear(self) -> None:
        """Blank the surface."""
        self.surface[:] = bytes(SURFACE_SIZE)

    def _ram(self, address: int) -> int:
        return self.memory.ram[address & 0xFFFF]

    def _raise_nmi(self) -> None:
        if self.nmi is not None:
            self.nmi()

    def _store_cell2(self, data: int) -> None:
        if self._horizontal < LINE_RAM_SIZE:
            if data:
                self._line_ram[self._horizontal] = self._palette | data
            elif self._ram(Register.CTRL) & 4:
                self._line_ram[self._horizontal] = 0
        self._horizontal = (self._horizontal + 1) & 0xFF

    def _store_cell(self, high: int, low: int) -> None:
        if self._horizontal < LINE_RAM_SIZE:
            if low or high:
                self._line_ram[self._horizontal] = (self._palette & 16) | high | low
            elif self._ram(Register.CTRL) & 4:
                self._line_ram[self._horizontal] = 0
        self._horizontal = (self._horizontal + 1) & 0xFF

    def _is_holey_dma(self) -> bool:
        pp = self._pp
        if pp > 32767:
            if self._h16 and pp & 4096:
                return True
            if self._h08 and pp & 2048:
                return True
        return False

    def _store_graphic(self) -> None:
        data = self._ram(self._pp)
        holey = self._is_holey_dma()
        if self._wmode:
            if holey:
                self._store_cell(0, 0)
                self._store_cell(0, 0)
            else:
                self._store_cell(data & 12, (data & 192) >> 6)
                self._store_cell((data & 48) >> 4, (data & 3) << 2)
        else:
            cells = (0, 0, 0, 0) if holey else (
                (data & 192) >> 6, (data & 48) >> 4, (data & 12) >> 2, data & 3,
            )
            for cell in cells:
                self._store_cell2(cell)
        self._pp = (self._pp + 1) & 0xFFFF

    def _colour_table(self) -> list[int]:
        ram = self.memory.ram
        background = ram[Register.BACKGRND]
        return [
            ram[Register.BACKGRND + data] if data & 3 else background
            for data in range(32)
        ]

    def _write_line_ram(self, start: int) -> None:
        rmode = self._ram(Register.CTRL) & 3
        colour = self._colour_table()
        if rmode == 0:
            pixels = bytes(colour[value] for value in self._line_ram for _ in range(2))
        elif rmode == 2:
            pixels = bytes(
                pixel
                for value in self._line_ram
                for pixel in (
                    colour[(value & 16) | ((value & 8) >> 3) | (value & 2)],
                    colour[(value & 16) | ((value & 4) >> 2) | ((value & 1) << 1)],
                )
            )
        elif rmode == 3:
            pixels = bytes(
                pixel
                for value in self._line_ram
                for pixel in (
                    colour[value & 30],
                    colour[(value & 28) | ((value & 1) << 1)],
                )
            )
        else:
            return
        end = start + _LINE_PIXELS
        if end > SURFACE_SIZE:
            raise ValueError(f"scanline at offset {start} runs past the surface")
        self.surface[start:end] = pixels

    def _store_line_ram(self) -> None:
        self._line_ram[:] = bytes(LINE_RAM_SIZE)
        ram = self._ram
        mode = ram(self._dp + 1)
        while mode & 0x5F:
            dp = self._dp
            low, high = ram(dp), ram(dp + 2)
            indirect = 0
            if mode & 31:
                self._cycles += 8
                self._palette = (ram(dp + 1) & 224) >> 3
                self._horizontal = ram(dp + 3)
                width = ((~ram(dp + 1)) & 31) + 1
                self._dp = (dp + 4) & 0xFFFF
            else:
                self._cycles += 10
                self._palette = (ram(dp + 3) & 224) >> 3
                self._horizontal = ram(dp + 4)
                indirect = ram(dp + 1) & 32
                self._wmode = ram(dp + 1) & 128
                width_bits = ram(dp + 3) & 31
                width = 32 if width_bits == 0 else ((~width_bits) & 31) + 1
                self._dp = (dp + 5) & 0xFFFF

            if not indirect:
                self._pp = join_word(low, (high + self._offset) & 0xFF)
                for _ in range(width):
                    self._cycles += 3
                    self._store_graphic()
            else:
                double_width = ram(Register.CTRL) & 16
                base = join_word(low, high)
                for _ in range(width):
                    self._cycles += 3
                    char_high = (ram(Register.CHARBASE) + self._offset) & 0xFF
                    self._pp = join_word(ram(base), char_high)
                    base = (base + 1) & 0xFFFF
                    self._cycles += 6
                    self._store_graphic()
                    if double_width:
                        self._cycles += 3
                        self._store_graphic()
            mode = ram(self._dp + 1)

    def _load_zone(self) -> None:
        flags = self._ram(self._dpp)
        self._h08 = flags & 32
        self._h16 = flags & 64
        self._offset = flags & 15

    def _load_display_list(self) -> None:
        self._dp = join_word(self._ram(self._dpp + 2), self._ram(self._dpp + 1))

    def render_scanline(self) -> int:
        """Render the current scanline and return the DMA cycles it took."""
        self._cycles = 0
        ram = self._ram
        top = self.display_area.top
        bottom = self.display_area.bottom
        if (ram(Register.CTRL) & 96) == 64 and top <= self.scanline <= bottom:
            self._cycles += 31
            if self.scanline == top:
                self._cycles += 7
                self._dpp = join_word(ram(Register.DPPL), ram(Register.DPPH))
                self._load_zone()
                self._load_display_list()
                if ram(self._dpp) & 128:
                    self._raise_nmi()
            elif self.visible_area.top <= self.scanline <= self.visible_area.bottom:
                self._write_line_ram((self.scanline - top) * self.display_area.length())

            if self.scanline != bottom:
                self._load_display_list()
                self._store_line_ram()
                self._offset -= 1
                if self._offset < 0:
                    self._dpp = (self._dpp + 3) & 0xFFFF
                    self._load_zone()
                    if ram(self._dpp) & 128:
                        self._raise_nmi()
        return self._cycles