import pytest

from prosys7800.pokey import (
    BUFFER_SIZE,
    AudioControl,
    Pokey,
    PokeyRegister,
)


def _render(pokey, count):
    out = bytearray()
    for _ in range(count // 2):
        out += pokey.process(2)
    return bytes(out)


def test_silent_after_reset():
    pokey = Pokey(seed=1)
    samples = _render(pokey, 20)
    assert samples == bytes([8]) * 20


def test_reset_state():
    pokey = Pokey(seed=1)
    pokey.set_register(PokeyRegister.AUDCTL, 0x41)
    pokey.set_register(PokeyRegister.AUDF1, 10)
    pokey.reset()
    assert pokey.audctl == 0
    assert pokey.audf == (0, 0, 0, 0)
    assert pokey.divide_max == (0x7FFFFFFF,) * 4


def test_sample_max_whole_part():
    assert Pokey(seed=0).sample_max >> 8 == 56


def test_volume_only_mixes_additively():
    a = Pokey(seed=1)
    a.set_register(PokeyRegister.AUDC1, 0x13)
    a.set_register(PokeyRegister.AUDC2, 0x11)
    b = Pokey(seed=1)
    b.set_register(PokeyRegister.AUDC1, 0x11)
    b.set_register(PokeyRegister.AUDC2, 0x13)
    assert a.process(2) == b.process(2)
    assert a.out_volumes == (3, 1, 0, 0)


def test_volume_only_output_rises_with_volume():
    levels = []
    for volume in range(16):
        pokey = Pokey(seed=1)
        pokey.set_register(PokeyRegister.AUDC1, 0x10 | volume)
        samples = pokey.process(2)
        assert samples[0] == samples[1]
        levels.append(samples[0])
    assert levels == sorted(levels)
    assert len(set(levels)) == 16


def test_pure_tone_toggles_between_two_levels():
    pokey = Pokey(seed=1)
    pokey.set_register(PokeyRegister.AUDC1, 0xAF)
    pokey.set_register(PokeyRegister.AUDF1, 0xFF)
    samples = _render(pokey, 600)
    assert len(set(samples)) == 2
    assert min(samples) == 8


def test_divider_scales_with_frequency_register():
    pokey = Pokey(seed=1)
    pokey.set_register(PokeyRegister.AUDC1, 0xAF)
    pokey.set_register(PokeyRegister.AUDF1, 9)
    low = pokey.divide_max[0]
    pokey.set_register(PokeyRegister.AUDF1, 19)
    assert pokey.divide_max[0] == 2 * low


def test_clock_15_slows_divider():
    slow = Pokey(seed=1)
    slow.set_register(PokeyRegister.AUDC1, 0xAF)
    slow.set_register(PokeyRegister.AUDF1, 9)
    fast = Pokey(seed=1)
    fast.set_register(PokeyRegister.AUDCTL, AudioControl.CLOCK_15)
    fast.set_register(PokeyRegister.AUDC1, 0xAF)
    fast.set_register(PokeyRegister.AUDF1, 9)
    assert fast.divide_max[0] * 28 == slow.divide_max[0] * 114


def test_linked_channels_use_high_byte():
    pokey = Pokey(seed=1)
    pokey.set_register(PokeyRegister.AUDCTL, AudioControl.CH1_CH2 | AudioControl.CH1_179)
    pokey.set_register(PokeyRegister.AUDC2, 0xAF)
    pokey.set_register(PokeyRegister.AUDF1, 5)
    pokey.set_register(PokeyRegister.AUDF2, 3)
    first = pokey.divide_max[1]
    pokey.set_register(PokeyRegister.AUDF2, 4)
    assert pokey.divide_max[1] - first == 256


def test_fast_divider_is_forced_idle():
    pokey = Pokey(seed=1)
    pokey.set_register(PokeyRegister.AUDCTL, AudioControl.CH1_179)
    pokey.set_register(PokeyRegister.AUDC1, 0xAF)
    pokey.set_register(PokeyRegister.AUDF1, 0)
    assert pokey.divide_max[0] == 0x7FFFFFFF
    assert pokey.out_volumes[0] == 15


def test_noise_is_reproducible_with_seed():
    def run():
        pokey = Pokey(seed=42)
        pokey.set_register(PokeyRegister.AUDC1, 0x8F)
        pokey.set_register(PokeyRegister.AUDF1, 3)
        return _render(pokey, 400)

    first = run()
    assert len(first) == 400
    assert set(first) == {8, 8 + 15 * 4}
    assert run() == first


def test_unknown_register_ignored():
    pokey = Pokey(seed=1)
    pokey.set_register(0x4009, 0x55)
    assert pokey.audf == (0, 0, 0, 0)
    assert pokey.audc == (0, 0, 0, 0)
    assert pokey.audctl == 0


def test_value_out_of_range_rejected():
    pokey = Pokey(seed=1)
    with pytest.raises(ValueError):
        pokey.set_register(PokeyRegister.AUDF1, 256)


def test_buffer_overrun_rejected():
    pokey = Pokey(seed=1)
    with pytest.raises(ValueError):
        pokey.process(BUFFER_SIZE + 1)


def test_counter_wraps_at_size():
    pokey = Pokey(seed=1)
    pokey.size = 4
    pokey.process(2)
    pokey.process(2)
    assert pokey.sound_counter == 0
    pokey.set_register(PokeyRegister.AUDC1, 0x1F)
    loud = pokey.process(2)
    assert bytes(pokey.buffer[0:2]) == loud
    assert pokey.buffer[2] != loud[0]


def test_process_writes_buffer_and_clear_zeroes():
    pokey = Pokey(seed=1)
    samples = pokey.process(6)
    assert bytes(pokey.buffer[:6]) == samples
    pokey.clear()
    assert pokey.buffer == bytearray(BUFFER_SIZE)