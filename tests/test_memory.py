import pytest

from prosys7800.memory import MEMORY_SIZE, Memory, Register


@pytest.fixture
def memory():
    mem = Memory()
    mem.reset()
    return mem


def test_reset_layout(memory):
    assert set(memory.ram) == {0}
    assert set(memory.rom[:16384]) == {0}
    assert set(memory.rom[16384:]) == {1}
    assert len(memory.ram) == MEMORY_SIZE


def test_plain_write_and_read(memory):
    memory.write(0x1800, 0xAB)
    assert memory.read(0x1800) == 0xAB


@pytest.mark.parametrize(
    "address, mirror",
    [(64, 8256), (255, 8447), (320, 8512), (511, 8703), (8256, 64), (8702, 510)],
)
def test_mirrored_ram(memory, address, mirror):
    memory.write(address, 0x5A)
    assert memory.ram[address] == 0x5A
    assert memory.ram[mirror] == 0x5A


def test_unmirrored_address(memory):
    memory.write(0x1000, 0x77)
    assert memory.ram[0x1000 + 8192] == 0


def test_rom_write_goes_to_cartridge():
    calls = []
    mem = Memory(cartridge_write=lambda a, d: calls.append((a, d)))
    mem.reset()
    mem.write(0x8000, 0x42)
    assert calls == [(0x8000, 0x42)]
    assert mem.ram[0x8000] == 0


def test_wsync(memory):
    memory.write(Register.WSYNC, 0x99)
    assert memory.ram[Register.WSYNC] == 1


def test_wsync_disabled():
    mem = Memory(wsync_enabled=False)
    mem.reset()
    mem.write(Register.WSYNC, 0x99)
    assert mem.ram[Register.WSYNC] == 0


def test_inptctrl_stores_cartridge_and_bios():
    events = []
    mem = Memory(
        cartridge_store=lambda: events.append("cartridge"),
        bios_store=lambda: events.append("bios"),
    )
    mem.reset()
    mem.write(Register.INPTCTRL, 22)
    mem.write(Register.INPTCTRL, 2)
    mem.write(Register.INPTCTRL, 7)
    assert events == ["cartridge", "bios"]
    assert mem.ram[Register.INPTCTRL] == 0


def test_inptctrl_without_hooks(memory):
    memory.write(Register.INPTCTRL, 22)
    assert memory.ram[Register.INPTCTRL] == 0


def test_input_ports_ignore_writes(memory):
    memory.write(Register.INPT3, 0xFF)
    assert memory.ram[Register.INPT3] == 0


def test_sound_registers_go_to_tia():
    calls = []
    mem = Memory(tia_write=lambda a, d: calls.append((a, d)))
    mem.reset()
    mem.write(Register.AUDC0, 5)
    mem.write(Register.AUDV1, 9)
    assert calls == [(Register.AUDC0, 5), (Register.AUDV1, 9)]
    assert mem.ram[Register.AUDC0] == 0


@pytest.mark.parametrize("address", [Register.INTIM, Register.INTIM | 0x2])
def test_read_intim_clears_flag(memory, address):
    memory.ram[Register.INTIM] = 0x33
    memory.ram[Register.INTFLG] = 0x80
    assert memory.read(address) == 0x33
    assert memory.ram[Register.INTFLG] == 0


@pytest.mark.parametrize("address", [Register.INTFLG, Register.INTFLG | 0x2])
def test_read_intflg_clears_flag(memory, address):
    memory.ram[Register.INTFLG] = 0x81
    assert memory.read(address) == 0x01


def test_write_rom(memory):
    memory.write_rom(0x100, b"\x01\x02\x03")
    assert memory.ram[0x100:0x103] == b"\x01\x02\x03"
    assert memory.rom[0x100:0x103] == b"\x01\x01\x01"


def test_write_rom_overflow(memory):
    with pytest.raises(ValueError):
        memory.write_rom(MEMORY_SIZE - 1, b"\x00\x00")


def test_clear_rom(memory):
    memory.write_rom(0x9000, b"\xff" * 4)
    memory.clear_rom(0x9000, 4)
    assert memory.ram[0x9000:0x9004] == bytes(4)
    assert memory.rom[0x9000:0x9004] == bytes(4)
    memory.write(0x9000, 0x11)
    assert memory.ram[0x9000] == 0x11


def test_clear_rom_overflow(memory):
    with pytest.raises(ValueError):
        memory.clear_rom(MEMORY_SIZE - 2, 3)


@pytest.mark.parametrize("address", [-1, MEMORY_SIZE])
def test_bad_address(memory, address):
    with pytest.raises(ValueError):
        memory.read(address)


def test_bad_byte(memory):
    with pytest.raises(ValueError):
        memory.write(0x100, 256)


def test_port_writes_without_riot_are_dropped(memory):
    memory.write(Register.SWCHA, 0x12)
    assert memory.ram[Register.SWCHA] == 0