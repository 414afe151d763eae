"""Save-state snapshots of the processor, bank and RAM."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "HEADER",
    "STATE_SIZE",
    "SUPERCART_STATE_SIZE",
    "RAM_SIZE",
    "SaveState",
    "SaveStateError",
    "load_state",
]

HEADER = b"PRO-SYSTEM STATE"
_VERSION = 1
_DATE_SIZE = 4
_DIGEST_SIZE = 32
_REGISTER_SIZE = 8
RAM_SIZE = 16384

_DIGEST_OFFSET = len(HEADER) + 1 + _DATE_SIZE
_REGISTER_OFFSET = _DIGEST_OFFSET + _DIGEST_SIZE
_RAM_OFFSET = _REGISTER_OFFSET + _REGISTER_SIZE
STATE_SIZE = _RAM_OFFSET + RAM_SIZE
SUPERCART_STATE_SIZE = STATE_SIZE + RAM_SIZE


class SaveStateError(ValueError):
    """Raised when data is not a usable save state."""


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class SaveState:
    """Processor registers, cartridge bank and RAM at one instant.

    ``supercart_ram`` holds the second 16K of RAM for cartridges that carry
    it, and is ``None`` otherwise.
    """

    digest: str
    a: int
    x: int
    y: int
    p: int
    s: int
    pc: int
    bank: int
    ram: bytes
    supercart_ram: Optional[bytes] = None

    def __post_init__(self) -> None:
        encoded = self.digest.encode("ascii")
        if len(encoded) > _DIGEST_SIZE or b"\x00" in encoded:
            raise ValueError(f"digest must be at most {_DIGEST_SIZE} characters")
        for name in ("a", "x", "y", "p", "s", "bank"):
            _check_byte(name, getattr(self, name))
        if not 0 <= self.pc <= 0xFFFF:
            raise ValueError(f"pc out of range: {self.pc}")
        self.ram = bytes(self.ram)
        if len(self.ram) != RAM_SIZE:
            raise ValueError(f"ram must be {RAM_SIZE} bytes, got {len(self.ram)}")
        if self.supercart_ram is not None:
            self.supercart_ram = bytes(self.supercart_ram)
            if len(self.supercart_ram) != RAM_SIZE:
                raise ValueError(
                    f"supercart_ram must be {RAM_SIZE} bytes, got {len(self.supercart_ram)}"
                )

    def to_bytes(self) -> bytes:
        """Serialise to the save-state file format."""
        out = bytearray(HEADER)
        out.append(_VERSION)
        out += bytes(_DATE_SIZE)
        out += self.digest.encode("ascii").ljust(_DIGEST_SIZE, b"\x00")
        out += bytes(
            (self.a, self.x, self.y, self.p, self.s,
             self.pc & 0xFF, self.pc >> 8, self.bank)
        )
        out += self.ram
        if self.supercart_ram is not None:
            out += self.supercart_ram
        return bytes(out)


def load_state(
    data: bytes | bytearray | memoryview,
    expected_digest: str,
    supercart_ram: bool,
) -> SaveState:
    """Parse a save state made for the cartridge whose digest is ``expected_digest``."""
    data = bytes(data)
    if data[: len(HEADER)] != HEADER:
        raise SaveStateError("not a save state: header missing")
    if len(data) < _REGISTER_OFFSET:
        raise SaveStateError("save state is truncated")

    raw_digest = data[_DIGEST_OFFSET:_REGISTER_OFFSET].split(b"\x00", 1)[0]
    try:
        digest = raw_digest.decode("ascii")
    except UnicodeDecodeError as exc:
        raise SaveStateError("save state digest is not text") from exc
    if digest != expected_digest:
        raise SaveStateError("save state was made for a different cartridge")

    expected_size = SUPERCART_STATE_SIZE if supercart_ram else STATE_SIZE
    if len(data) != expected_size:
        raise SaveStateError(
            f"save state has an invalid size: {len(data)}, expected {expected_size}"
        )

    a, x, y, p, s, pc_low, pc_high, bank = data[_REGISTER_OFFSET:_RAM_OFFSET]
    ram = data[_RAM_OFFSET:STATE_SIZE]
    extra = data[STATE_SIZE:SUPERCART_STATE_SIZE] if supercart_ram else None
    return SaveState(
        digest=digest,
        a=a,
        x=x,
        y=y,
        p=p,
        s=s,
        pc=(pc_high << 8) | pc_low,
        bank=bank,
        ram=ram,
        supercart_ram=extra,
    )