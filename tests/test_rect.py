import pytest

from prosys7800.rect import Rect, join_word, split_word


def test_ntsc_display_area_dimensions():
    area = Rect(0, 16, 319, 258)
    assert area.length() == 320
    assert area.height() == 243


def test_area_is_length_times_height():
    for rect in (Rect(0, 16, 319, 258), Rect(0, 26, 319, 297), Rect(3, 4, 10, 40)):
        assert rect.area() == rect.length() * rect.height()


def test_single_pixel_rect():
    rect = Rect(7, 9, 7, 9)
    assert rect.length() == 1
    assert rect.height() == 1
    assert rect.area() == 1


def test_rect_is_immutable():
    rect = Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        rect.left = 5
    assert rect.left == 0
    assert rect.length() == 2


def test_split_word_bytes():
    assert split_word(0x1234) == (0x34, 0x12)
    assert split_word(0xFFFF) == (0xFF, 0xFF)
    assert split_word(0) == (0, 0)


@pytest.mark.parametrize("word", [0, 1, 0xFF, 0x100, 0x8000, 0xABCD, 0xFFFF])
def test_split_join_round_trip(word):
    assert join_word(*split_word(word)) == word


def test_join_word():
    assert join_word(0xCD, 0xAB) == 0xABCD


@pytest.mark.parametrize("word", [-1, 0x10000])
def test_split_word_out_of_range(word):
    with pytest.raises(ValueError):
        split_word(word)


@pytest.mark.parametrize("low, high", [(256, 0), (0, 256), (-1, 0)])
def test_join_word_out_of_range(low, high):
    with pytest.raises(ValueError):
        join_word(low, high)