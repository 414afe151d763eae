"""POKEY sound generator: four channels of square waves and polynomial noise."""

from __future__ import annotations

import random
from enum import IntEnum, IntFlag

__all__ = [
    "BUFFER_SIZE",
    "DEFAULT_SIZE",
    "POLY4",
    "POLY5",
    "AudioControl",
    "ChannelControl",
    "PokeyRegister",
    "Pokey",
]

BUFFER_SIZE = 624
DEFAULT_SIZE = 524

FREQUENCY = 1787520
SAMPLE_RATE = 31440

DIV_64 = 28
DIV_15 = 114

POLY4_SIZE = 0x000F
POLY5_SIZE = 0x001F
POLY9_SIZE = 0x01FF
POLY17_SIZE = 0x0001FFFF

POLY4 = bytes((1, 1, 0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 1, 0, 0))
POLY5 = bytes(
    (0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 0, 1,
     0, 1, 1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 1)
)

_CHANNELS = range(4)
_SAMPLE_EVENT = 4
_IDLE = 0x7FFFFFFF


class PokeyRegister(IntEnum):
    """Addresses of the POKEY sound registers."""

    AUDF1 = 0x4000
    AUDC1 = 0x4001
    AUDF2 = 0x4002
    AUDC2 = 0x4003
    AUDF3 = 0x4004
    AUDC3 = 0x4005
    AUDF4 = 0x4006
    AUDC4 = 0x4007
    AUDCTL = 0x4008


class ChannelControl(IntFlag):
    """Bits of an AUDCx register."""

    NOTPOLY5 = 0x80
    POLY4 = 0x40
    PURE = 0x20
    VOLUME_ONLY = 0x10
    VOLUME_MASK = 0x0F


class AudioControl(IntFlag):
    """Bits of the AUDCTL register."""

    POLY9 = 0x80
    CH1_179 = 0x40
    CH3_179 = 0x20
    CH1_CH2 = 0x10
    CH3_CH4 = 0x08
    CH1_FILTER = 0x04
    CH2_FILTER = 0x02
    CLOCK_15 = 0x01


_FREQUENCY_REGISTERS = {
    PokeyRegister.AUDF1: 0,
    PokeyRegister.AUDF2: 1,
    PokeyRegister.AUDF3: 2,
    PokeyRegister.AUDF4: 3,
}
_CONTROL_REGISTERS = {
    PokeyRegister.AUDC1: 0,
    PokeyRegister.AUDC2: 1,
    PokeyRegister.AUDC3: 2,
    PokeyRegister.AUDC4: 3,
}


class Pokey:
    """Sound chip state and the sample buffer it renders into.

    ``buffer`` holds unsigned 8-bit samples; rendering wraps back to its
    start once ``size`` samples have been written. ``seed`` fixes the
    17-bit noise table so that output can be reproduced.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.buffer = bytearray(BUFFER_SIZE)
        self.size = DEFAULT_SIZE
        self._rng = random.Random(seed)
        self._sound_cntr = 0
        self.reset()

    def reset(self) -> None:
        """Regenerate the noise table and silence every channel."""
        self._poly17 = bytes(self._rng.getrandbits(1) for _ in range(POLY17_SIZE))
        self._poly_adjust = 0
        self._poly04_cntr = 0
        self._poly05_cntr = 0
        self._poly17_cntr = 0
        self._sample_max = (FREQUENCY << 8) // SAMPLE_RATE
        # Fixed point with 8 fractional bits; the whole part counts down to
        # the next output sample.
        self._sample_count = 0
        self._poly17_size = POLY17_SIZE
        self._out_vol = [0, 0, 0, 0]
        self._output = [0, 0, 0, 0]
        self._divide_count = [0, 0, 0, 0]
        self._divide_max = [_IDLE] * 4
        self._audc = [0, 0, 0, 0]
        self._audf = [0, 0, 0, 0]
        self._audctl = 0
        self._base_multiplier = DIV_64

    @property
    def audf(self) -> tuple[int, ...]:
        """Frequency register of each channel."""
        return tuple(self._audf)

    @property
    def audc(self) -> tuple[int, ...]:
        """Control register of each channel."""
        return tuple(self._audc)

    @property
    def audctl(self) -> int:
        """The shared AUDCTL register."""
        return self._audctl

    @property
    def divide_max(self) -> tuple[int, ...]:
        """Clock cycles between output changes of each channel."""
        return tuple(self._divide_max)

    @property
    def out_volumes(self) -> tuple[int, ...]:
        """Current output volume of each channel."""
        return tuple(self._out_vol)

    @property
    def sample_max(self) -> int:
        """Clock cycles per output sample, with 8 fractional bits."""
        return self._sample_max

    @property
    def sound_counter(self) -> int:
        """Position in ``buffer`` where the next samples go."""
        return self._sound_cntr

    def set_register(self, address: int, value: int) -> None:
        """Write ``value`` to a sound register; other addresses are ignored."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"register value out of range: {value}")

        audctl = self._audctl
        if address in _FREQUENCY_REGISTERS:
            channel = _FREQUENCY_REGISTERS[address]
            self._audf[channel] = value
            mask = 1 << channel
            if channel == 0 and audctl & AudioControl.CH1_CH2:
                mask |= 1 << 1
            elif channel == 2 and audctl & AudioControl.CH3_CH4:
                mask |= 1 << 3
        elif address in _CONTROL_REGISTERS:
            channel = _CONTROL_REGISTERS[address]
            self._audc[channel] = value
            mask = 1 << channel
        elif address == PokeyRegister.AUDCTL:
            self._audctl = audctl = value
            mask = 0x0F
            self._poly17_size = POLY9_SIZE if value & AudioControl.POLY9 else POLY17_SIZE
            self._base_multiplier = DIV_15 if value & AudioControl.CLOCK_15 else DIV_64
        else:
            return

        audf = self._audf
        base = self._base_multiplier

        if mask & 1:
            if audctl & AudioControl.CH1_179:
                new_value = audf[0] + 4
            else:
                new_value = (audf[0] + 1) * base
            if new_value != self._divide_max[0]:
                self._divide_max[0] = new_value
                if self._divide_count[0] > new_value:
                    self._divide_count[0] = 0

        if mask & 2:
            if audctl & AudioControl.CH1_CH2:
                if audctl & AudioControl.CH1_179:
                    new_value = audf[1] * 256 + audf[0] + 7
                else:
                    new_value = (audf[1] * 256 + audf[0] + 1) * base
            else:
                new_value = (audf[1] + 1) * base
            self._update_divider(1, new_value)

        if mask & 4:
            if audctl & AudioControl.CH3_179:
                new_value = audf[2] + 4
            else:
                new_value = (audf[2] + 1) * base
            self._update_divider(2, new_value)

        if mask & 8:
            if audctl & AudioControl.CH3_CH4:
                if audctl & AudioControl.CH3_179:
                    new_value = audf[3] * 256 + audf[2] + 7
                else:
                    new_value = (audf[3] * 256 + audf[2] + 1) * base
            else:
                new_value = (audf[3] + 1) * base
            self._update_divider(3, new_value)

        for channel in _CHANNELS:
            if not mask & (1 << channel):
                continue
            control = self._audc[channel]
            if (
                control & ChannelControl.VOLUME_ONLY
                or control & ChannelControl.VOLUME_MASK == 0
                or self._divide_max[channel] < (self._sample_max >> 8)
            ):
                self._out_vol[channel] = control & ChannelControl.VOLUME_MASK
                self._divide_count[channel] = _IDLE
                self._divide_max[channel] = _IDLE

    def _update_divider(self, channel: int, new_value: int) -> None:
        if new_value != self._divide_max[channel]:
            self._divide_max[channel] = new_value
            if self._divide_count[channel] > new_value:
                self._divide_count[channel] = new_value

    def process(self, length: int) -> bytes:
        """Render ``length`` samples into ``buffer`` and return them."""
        if length < 0:
            raise ValueError(f"negative sample count: {length}")
        start = self._sound_cntr
        if start + length > BUFFER_SIZE:
            raise ValueError(
                f"{length} samples at offset {start} overrun the {BUFFER_SIZE}-byte buffer"
            )

        samples = bytearray()
        divide_count = self._divide_count
        while len(samples) < length:
            next_event = _SAMPLE_EVENT
            event_min = self._sample_count >> 8
            for channel in _CHANNELS:
                if divide_count[channel] <= event_min:
                    event_min = divide_count[channel]
                    next_event = channel

            for channel in _CHANNELS:
                divide_count[channel] -= event_min
            self._sample_count -= event_min << 8
            self._poly_adjust += event_min

            if next_event != _SAMPLE_EVENT:
                self._clock_channel(next_event)
            else:
                self._sample_count += self._sample_max
                samples.append(((sum(self._out_vol) << 2) + 8) & 0xFF)

        self.buffer[start : start + length] = samples
        self._sound_cntr += length
        if self._sound_cntr >= self.size:
            self._sound_cntr = 0
        return bytes(samples)

    def _clock_channel(self, channel: int) -> None:
        adjust = self._poly_adjust
        self._poly04_cntr = (self._poly04_cntr + adjust) % POLY4_SIZE
        self._poly05_cntr = (self._poly05_cntr + adjust) % POLY5_SIZE
        self._poly17_cntr = (self._poly17_cntr + adjust) % self._poly17_size
        self._poly_adjust = 0
        self._divide_count[channel] += self._divide_max[channel]

        control = self._audc[channel]
        if control & ChannelControl.NOTPOLY5 or POLY5[self._poly05_cntr]:
            if control & ChannelControl.PURE:
                self._output[channel] = 0 if self._output[channel] else 1
            elif control & ChannelControl.POLY4:
                self._output[channel] = POLY4[self._poly04_cntr]
            else:
                self._output[channel] = self._poly17[self._poly17_cntr]

        if self._output[channel]:
            self._out_vol[channel] = control & ChannelControl.VOLUME_MASK
        else:
            self._out_vol[channel] = 0

    def clear(self) -> None:
        """Zero the sample buffer."""
        self.buffer[:] = bytes(BUFFER_SIZE)