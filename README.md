# prosys7800

Pieces of an Atari 7800 machine in plain Python, with no third-party
dependencies: the memory map, the RIOT input and timer chip, the MARIA
graphics chip, the POKEY sound chip, the colour palettes, the NTSC and PAL
settings, and the save-state file format.

## Modules

- `prosys7800.digest`: `md5_hexdigest(data)` returns the 32-character
  lower-case hex MD5 digest used to identify a cartridge image. It refuses
  `str`.
- `prosys7800.rect`: `Rect(left, top, right, bottom)`, an inclusive rectangle
  with `length()`, `height()` and `area()`; `split_word(word)` gives the
  `(low, high)` bytes of a 16-bit word and `join_word(low, high)` puts them
  back together. Out-of-range values raise `ValueError`.
- `prosys7800.palette`: `DEFAULT_PALETTE` (768 bytes) and `Palette`, with
  `load(data)` to replace the table from at least 768 bytes and `rgb(index)`
  to look up one of the 256 colours. Its `default` flag tells whether the
  table is still the built-in one.
- `prosys7800.memory`: `Memory`, the 64 KiB address space (`ram` and a `rom`
  map), with `reset()`, `read(address)`, `write(address, data)`,
  `write_rom(address, data)` and `clear_rom(address, size)`, and `Register`,
  the addresses of the memory-mapped registers. Writes to the TIA sound
  registers, to ROM and to INPTCTRL go to optional hooks passed to the
  constructor (`tia_write`, `cartridge_write`, `cartridge_store`,
  `bios_store`); `wsync_enabled` turns the WSYNC register off.
- `prosys7800.riot`: `Riot(memory)` attaches itself to a `Memory` and handles
  the port and timer registers: `set_input(buttons)` takes 17 controller and
  console inputs (`INPUT_SIZE`), and there are `set_dra`, `set_drb`,
  `set_timer(timer, intervals)`, `update_timer(cycles)` and `reset()`.
- `prosys7800.maria`: `Maria(memory, nmi=None)` walks the display lists in
  memory. `render_scanline()` renders the scanline in `scanline` into
  `surface` (one colour index per pixel) and returns the DMA cycles used.
  `nmi` is called when a display-list-list entry asks for an interrupt.
  There are also `reset()` and `clear()`.
- `prosys7800.pokey`: `Pokey(seed=None)` with `reset()`,
  `set_register(address, value)` for the `PokeyRegister` addresses,
  `process(length)`, which writes that many unsigned 8-bit samples into
  `buffer` and returns them, and `clear()`. `seed` makes the noise table
  reproducible.
- `prosys7800.region`: `Region` (`NTSC`, `PAL`, `AUTO`), `RegionSettings`,
  the `NTSC` and `PAL` settings and their palettes, and
  `resolve_settings(region, cartridge_region)`, which picks PAL when asked
  for, or when `AUTO` and the cartridge is PAL, and NTSC otherwise.
- `prosys7800.savestate`: `SaveState` holding the processor registers,
  program counter, cartridge bank and RAM, with `to_bytes()`; and
  `load_state(data, expected_digest, supercart_ram)`, which raises
  `SaveStateError` on a missing header, a digest for another cartridge or a
  wrong size.

## Example

```python
from prosys7800.digest import md5_hexdigest
from prosys7800.memory import Memory, Register
from prosys7800.pokey import Pokey
from prosys7800.region import Region, resolve_settings
from prosys7800.riot import Riot

settings = resolve_settings(Region.AUTO, Region.PAL)
print(settings.frequency, settings.scanlines)   # 50 312

print(md5_hexdigest(b""))   # d41d8cd98f00b204e9800998ecf8427e

memory = Memory()
memory.reset()
riot = Riot(memory)
riot.set_input([0] * 17)
print(memory.ram[Register.SWCHA])   # 255: no joystick pressed

pokey = Pokey(seed=1)
print(pokey.process(2))   # b'\x08\x08': silence
```

## What this package does not do

There is no 6502 processor, no cartridge loading or bank switching, no BIOS,
no TIA sound, and no loop that runs whole frames; those are left to the
caller, reached through the hooks on `Memory` and the `nmi` callback on
`Maria`. There is no command-line program, no window and no audio output:
the package produces colour indices in `Maria.surface` and samples in
`Pokey.buffer`, and turning them into pictures and sound is up to you.

## Installing

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```