import pytest

from prosys7800.palette import DEFAULT_PALETTE, PALETTE_SIZE, Palette


def test_default_palette_size():
    palette = Palette()
    assert len(palette.data) == PALETTE_SIZE
    assert bytes(palette.data) == DEFAULT_PALETTE
    assert palette.default is True


def test_default_entries():
    palette = Palette()
    assert palette.rgb(0) == (0x00, 0x00, 0x00)
    assert palette.rgb(1) == (0x14, 0x14, 0x14)
    assert palette.rgb(255) == (0xFF, 0xFF, 0xB1)


def test_default_table_is_not_shared_between_instances():
    first = Palette()
    second = Palette()
    first.data[0] = 0x7F
    assert second.data[0] == DEFAULT_PALETTE[0]


def test_load_round_trip():
    palette = Palette()
    custom = bytes((i * 7) & 0xFF for i in range(PALETTE_SIZE))
    palette.load(custom)
    assert bytes(palette.data) == custom
    assert palette.rgb(10) == tuple(custom[30:33])


def test_load_uses_first_768_bytes_only():
    palette = Palette()
    custom = bytes([0x11]) * PALETTE_SIZE + bytes([0x22]) * 10
    palette.load(custom)
    assert len(palette.data) == PALETTE_SIZE
    assert set(palette.data) == {0x11}


def test_load_too_short_is_rejected_and_keeps_table():
    palette = Palette()
    with pytest.raises(ValueError):
        palette.load(bytes(PALETTE_SIZE - 1))
    assert bytes(palette.data) == DEFAULT_PALETTE


@pytest.mark.parametrize("index", [-1, 256])
def test_rgb_out_of_range(index):
    with pytest.raises(IndexError):
        Palette().rgb(index)


def test_every_entry_matches_table_slice():
    palette = Palette()
    for index in range(256):
        assert palette.rgb(index) == tuple(DEFAULT_PALETTE[index * 3 : index * 3 + 3])