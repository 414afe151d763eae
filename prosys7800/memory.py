"""The 64K address space: RAM, the ROM map and the memory-mapped registers."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .riot import Riot

__all__ = ["MEMORY_SIZE", "Register", "Memory"]

MEMORY_SIZE = 65536
_BIOS_AREA = 16384


class Register(IntEnum):
    """Addresses of the hardware registers mapped into memory."""

    INPTCTRL = 1
    INPT0 = 8
    INPT1 = 9
    INPT2 = 10
    INPT3 = 11
    INPT4 = 12
    INPT5 = 13
    AUDC0 = 21
    AUDC1 = 22
    AUDF0 = 23
    AUDF1 = 24
    AUDV0 = 25
    AUDV1 = 26
    BACKGRND = 32
    P0C1 = 33
    P0C2 = 34
    P0C3 = 35
    WSYNC = 36
    P1C1 = 37
    P1C2 = 38
    P1C3 = 39
    MSTAT = 40
    P2C1 = 41
    P2C2 = 42
    P2C3 = 43
    DPPH = 44
    P3C1 = 45
    P3C2 = 46
    P3C3 = 47
    DPPL = 48
    P4C1 = 49
    P4C2 = 50
    P4C3 = 51
    CHARBASE = 52
    P5C1 = 53
    P5C2 = 54
    P5C3 = 55
    OFFSET = 56
    P6C1 = 57
    P6C2 = 58
    P6C3 = 59
    CTRL = 60
    P7C1 = 61
    P7C2 = 62
    P7C3 = 63
    SWCHA = 640
    CTLSWA = 641
    SWCHB = 642
    CTLSWB = 643
    INTIM = 644
    INTFLG = 645
    TIM1T = 660
    TIM8T = 661
    TIM64T = 662
    T1024T = 663


_INPUT_PORTS = frozenset(
    (Register.INPT0, Register.INPT1, Register.INPT2,
     Register.INPT3, Register.INPT4, Register.INPT5)
)
_SOUND_REGISTERS = frozenset(
    (Register.AUDC0, Register.AUDC1, Register.AUDF0,
     Register.AUDF1, Register.AUDV0, Register.AUDV1)
)
_TIMER_REGISTERS = {
    address: timer
    for timer in (Register.TIM1T, Register.TIM8T, Register.TIM64T, Register.T1024T)
    for address in (timer, timer | 0x8)
}
_TIMER_READS = {
    Register.INTIM: Register.INTIM,
    Register.INTIM | 0x2: Register.INTIM,
    Register.INTFLG: Register.INTFLG,
    Register.INTFLG | 0x2: Register.INTFLG,
}


def _check_address(address: int) -> None:
    if not 0 <= address < MEMORY_SIZE:
        raise ValueError(f"address out of range: {address}")


class Memory:
    """RAM plus a map of which bytes belong to ROM.

    Components outside the memory are reached through hooks:

    * ``tia_write(address, data)`` receives writes to the TIA sound registers;
    * ``cartridge_write(address, data)`` receives writes that land on ROM;
    * ``cartridge_store()`` maps the cartridge in; ``None`` means none is loaded;
    * ``bios_store()`` maps the BIOS in; ``None`` means the BIOS is disabled;
    * ``riot`` receives the port and timer writes once a :class:`Riot` is attached.

    ``wsync_enabled`` is false for cartridges that ignore WSYNC.
    """

    def __init__(
        self,
        *,
        tia_write: Optional[Callable[[int, int], None]] = None,
        cartridge_write: Optional[Callable[[int, int], None]] = None,
        cartridge_store: Optional[Callable[[], None]] = None,
        bios_store: Optional[Callable[[], None]] = None,
        wsync_enabled: bool = True,
    ) -> None:
        self.ram = bytearray(MEMORY_SIZE)
        self.rom = bytearray(MEMORY_SIZE)
        self.tia_write = tia_write
        self.cartridge_write = cartridge_write
        self.cartridge_store = cartridge_store
        self.bios_store = bios_store
        self.wsync_enabled = wsync_enabled
        self.riot: Optional[Riot] = None

    def reset(self) -> None:
        """Zero RAM and mark everything above the BIOS area as ROM."""
        self.ram[:] = bytes(MEMORY_SIZE)
        self.rom[:] = b"\x00" * _BIOS_AREA + b"\x01" * (MEMORY_SIZE - _BIOS_AREA)

    def read(self, address: int) -> int:
        """Read a byte; reading the timer registers clears the interrupt flag."""
        _check_address(address)
        register = _TIMER_READS.get(address)
        if register is not None:
            self.ram[Register.INTFLG] &= 0x7F
            return self.ram[register]
        return self.ram[address]

    def write(self, address: int, data: int) -> None:
        """Write a byte, dispatching register writes to the hardware they drive."""
        _check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"byte out of range: {data}")

        if self.rom[address]:
            if self.cartridge_write is not None:
                self.cartridge_write(address, data)
            return

        if address == Register.WSYNC:
            if self.wsync_enabled:
                self.ram[Register.WSYNC] = 1
        elif address == Register.INPTCTRL:
            if data == 22 and self.cartridge_store is not None:
                self.cartridge_store()
            elif data == 2 and self.bios_store is not None:
                self.bios_store()
        elif address in _INPUT_PORTS:
            pass
        elif address in _SOUND_REGISTERS:
            if self.tia_write is not None:
                self.tia_write(address, data)
        elif address == Register.SWCHA:
            # Writes land in the RIOT's data direction register, not in SWCHA.
            if self.riot is not None:
                self.riot.set_dra(data)
        elif address == Register.SWCHB:
            if self.riot is not None:
                self.riot.set_drb(data)
        elif address in _TIMER_REGISTERS:
            if self.riot is not None:
                self.riot.set_timer(_TIMER_REGISTERS[address], data)
        else:
            self._store(address, data)

    def _store(self, address: int, data: int) -> None:
        ram = self.ram
        ram[address] = data
        if 8256 <= address <= 8447 or 8512 <= address <= 8702:
            ram[address - 8192] = data
        elif 64 <= address <= 255 or 320 <= address <= 511:
            ram[address + 8192] = data

    def write_rom(self, address: int, data: bytes | bytearray | memoryview) -> None:
        """Copy ``data`` to ``address`` and mark those bytes as ROM."""
        _check_address(address)
        size = len(data)
        if address + size > MEMORY_SIZE:
            raise ValueError(f"{size} bytes at {address} run past the end of memory")
        self.ram[address : address + size] = bytes(data)
        self.rom[address : address + size] = b"\x01" * size

    def clear_rom(self, address: int, size: int) -> None:
        """Zero ``size`` bytes at ``address`` and mark them as writable RAM."""
        _check_address(address)
        if size < 0:
            raise ValueError(f"negative size: {size}")
        if address + size > MEMORY_SIZE:
            raise ValueError(f"{size} bytes at {address} run past the end of memory")
        self.ram[address : address + size] = bytes(size)
        self.rom[address : address + size] = bytes(size)