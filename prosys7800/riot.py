"""The RIOT chip: joystick and console switch ports and the interval timer."""

from __future__ import annotations

from collections.abc import Sequence

from .memory import Memory, Register

__all__ = ["INPUT_SIZE", "Riot"]

# Offsets into the input sequence:
#  0-3  joystick 1 right, left, down, up;  4-5  joystick 1 buttons 1 and 2
#  6-9  joystick 2 right, left, down, up; 10-11  joystick 2 buttons 1 and 2
# 12-14 console reset, select, pause;    15-16  left and right difficulty
INPUT_SIZE = 17

_SWCHA_BITS = (
    (0x00, 0x80), (0x01, 0x40), (0x02, 0x20), (0x03, 0x10),
    (0x06, 0x08), (0x07, 0x04), (0x08, 0x02), (0x09, 0x01),
)
_SWCHB_BITS = ((0x0C, 0x01), (0x0D, 0x02), (0x0E, 0x08), (0x0F, 0x40), (0x10, 0x80))

_TIMER_CLOCKS = {
    Register.TIM1T: 1,
    Register.TIM8T: 8,
    Register.TIM64T: 64,
    Register.T1024T: 1024,
}


class Riot:
    """RIOT state bound to a :class:`Memory`, which it attaches itself to."""

    def __init__(self, memory: Memory) -> None:
        self.memory = memory
        memory.riot = self
        self.timing = False
        self.timer = int(Register.TIM64T)
        self.intervals = 0
        self._dra = 0
        self._drb = 0
        self._elapsed = False
        self._current_time = 0
        self._clocks = 0

    @property
    def dra(self) -> int:
        """Last value written to SWCHA."""
        return self._dra

    @property
    def drb(self) -> int:
        """Last value written to SWCHB."""
        return self._drb

    def reset(self) -> None:
        """Clear both data registers."""
        self.set_dra(0)
        self.set_drb(0)

    def set_dra(self, data: int) -> None:
        """Store a value written to SWCHA."""
        self._dra = data & 0xFF

    def set_drb(self, data: int) -> None:
        """Store a value written to SWCHB."""
        self._drb = data & 0xFF

    def set_input(self, buttons: Sequence[int]) -> None:
        """Drive the ports from the 17 controller and console inputs."""
        if len(buttons) < INPUT_SIZE:
            raise ValueError(f"need {INPUT_SIZE} inputs, got {len(buttons)}")
        ram = self.memory.ram

        # A bit is 1 where the port is an input, else the stored data;
        # a closed switch always pulls its bit to ground.
        swcha = (~ram[Register.CTLSWA] | self._dra) & 0xFF
        for index, bit in _SWCHA_BITS:
            if buttons[index]:
                swcha &= ~bit
        ram[Register.SWCHA] = swcha

        swchb = (~ram[Register.CTLSWB] | self._drb) & 0xFF
        for index, bit in _SWCHB_BITS:
            if buttons[index]:
                swchb &= ~bit
        ram[Register.SWCHB] = swchb

        self._player_buttons(
            swchb & 0x04, buttons[0x04], buttons[0x05],
            Register.INPT4, Register.INPT1, Register.INPT0,
        )
        self._player_buttons(
            swchb & 0x10, buttons[0x0A], buttons[0x0B],
            Register.INPT5, Register.INPT3, Register.INPT2,
        )

    def _player_buttons(
        self, one_button: int, button1: int, button2: int,
        legacy: int, left: int, right: int,
    ) -> None:
        ram = self.memory.ram
        if one_button:
            # Only the legacy signal works, and it is active low.
            ram[right] &= 0x7F
            ram[left] &= 0x7F
            if button1 or button2:
                ram[legacy] &= 0x7F
            else:
                ram[legacy] |= 0x80
        else:
            ram[legacy] |= 0x80
            if button1:
                ram[left] |= 0x80
            else:
                ram[left] &= 0x7F
            if button2:
                ram[right] |= 0x80
            else:
                ram[right] &= 0x7F

    def set_timer(self, timer: int, intervals: int) -> None:
        """Start ``timer`` counting down from ``intervals`` periods."""
        self.timer = int(timer)
        self.intervals = intervals & 0xFF
        clocks = _TIMER_CLOCKS.get(timer)
        if clocks is not None:
            self._clocks = clocks
            self.timing = True
        if self.timing:
            self._current_time = self._clocks * self.intervals
            self._elapsed = False

    def update_timer(self, cycles: int) -> None:
        """Advance the timer by ``cycles`` processor cycles and update INTIM."""
        self._current_time -= cycles
        memory = self.memory
        if not self._elapsed and self._current_time > 0:
            memory.write(Register.INTIM, (self._current_time // self._clocks) & 0xFF)
        elif self._elapsed:
            if self._current_time >= -255:
                memory.write(Register.INTIM, self._current_time & 0xFF)
            else:
                memory.write(Register.INTIM, 0)
                self.timing = False
        else:
            self._current_time = self._clocks
            memory.write(Register.INTIM, 0)
            memory.ram[Register.INTFLG] |= 0x80
            self._elapsed = True