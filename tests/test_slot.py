import pytest

from glossa.pos import ALL_POSITIONS, PartialMap, Position
from glossa.slot import Hint, Slot, hints


class _Mark:
    def __init__(self, entries):
        self._entries = entries

    def renderings(self):
        return PartialMap(self._entries)


@pytest.mark.parametrize("character", list("abcdehikmnopqrsuvwxz") + ["ɑ", "ɛ", "ɔ", "ɹ", "ʋ", "ɰ"])
def test_unobstructed_characters(character):
    result = hints(character)
    assert all(hint is Hint.REGULAR for _, hint in result.items())


@pytest.mark.parametrize("character", ["g", "j", "ŋ", "y"])
def test_top_obstructed_characters(character):
    result = hints(character)
    assert result[Position.TOP] is Hint.OBSTRUCTED
    for position in ALL_POSITIONS:
        if position is not Position.TOP:
            assert result[position] is Hint.REGULAR


@pytest.mark.parametrize("character", ["f", "l", "t"])
def test_bottom_obstructed_characters(character):
    result = hints(character)
    assert result[Position.BOTTOM] is Hint.OBSTRUCTED
    for position in ALL_POSITIONS:
        if position is not Position.BOTTOM:
            assert result[position] is Hint.REGULAR


@pytest.mark.parametrize("character", ["ɸ", "β", "ə", "ø", "A", "1"])
def test_unknown_characters(character):
    assert hints(character) is None


def test_hints_are_independent_copies():
    first = hints("a")
    first[Position.TOP] = Hint.OBSTRUCTED
    assert hints("a")[Position.TOP] is Hint.REGULAR


def test_slot_render_concatenates_in_order():
    slot = Slot(
        [
            _Mark([(Position.BOTTOM, "\u0325"), (Position.TOP, "\u030a")]),
            _Mark([(Position.TOP, "\u0303")]),
            _Mark([(Position.BOTTOM, "\u0329")]),
        ]
    )
    assert slot.render(Position.TOP) == "\u030a\u0303"
    assert slot.render(Position.BOTTOM) == "\u0325\u0329"
    assert slot.render(Position.LEFT) == ""


def test_empty_slot_renders_nothing():
    slot = Slot()
    assert slot.diacritics == []
    assert all(slot.render(position) == "" for position in ALL_POSITIONS)