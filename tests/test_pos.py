import pytest

from glossa.pos import (
    ALL_POSITIONS,
    DuplicatePositionError,
    PartialMap,
    Position,
    TotalMap,
)


def _sample_map():
    return TotalMap(top="t", left="l", bottom="b", right="r")


def test_position_ordering_follows_declaration():
    top, left, bottom, right = (
        PartialMap([(position, 0)])
        for position in (Position.TOP, Position.LEFT, Position.BOTTOM, Position.RIGHT)
    )
    assert top < left < bottom < right


def test_all_positions_order():
    expected = [Position.LEFT, Position.TOP, Position.BOTTOM, Position.RIGHT]
    total = TotalMap.from_fn(lambda position: position.name)
    assert [position for position, _ in total.items()] == expected
    assert list(ALL_POSITIONS) == expected


def test_total_map_indexing():
    total = _sample_map()
    assert total[Position.TOP] == "t"
    assert total[Position.LEFT] == "l"
    assert total[Position.BOTTOM] == "b"
    assert total[Position.RIGHT] == "r"


def test_total_map_setitem():
    total = _sample_map()
    total[Position.BOTTOM] = "x"
    assert total.bottom == "x"
    assert total[Position.BOTTOM] == "x"


def test_total_map_items_follow_all_positions():
    total = _sample_map()
    assert list(total.items()) == [
        (Position.LEFT, "l"),
        (Position.TOP, "t"),
        (Position.BOTTOM, "b"),
        (Position.RIGHT, "r"),
    ]
    assert list(total) == list(ALL_POSITIONS)


def test_total_map_from_fn():
    total = TotalMap.from_fn(lambda position: position)
    for position in ALL_POSITIONS:
        assert total[position] is position


def test_total_map_map_and_map_with_pos():
    total = _sample_map()
    upper = total.map(str.upper)
    assert upper == TotalMap(top="T", left="L", bottom="B", right="R")
    tagged = total.map_with_pos(lambda position, value: (position, value))
    for position, (stored, value) in tagged.items():
        assert stored is position
        assert value == total[position]


def test_total_map_transpose():
    full = TotalMap(top=1, left=2, bottom=3, right=4)
    assert full.transpose() == full
    missing = TotalMap(top=1, left=None, bottom=3, right=4)
    assert missing.transpose() is None


def test_total_map_invalid_key():
    with pytest.raises(KeyError):
        _sample_map()["top"]


def test_partial_map_insert_returns_indices():
    partial = PartialMap()
    assert partial.insert(Position.BOTTOM, "b") == 0
    assert partial.insert(Position.TOP, "t") == 1
    assert len(partial) == 2
    assert list(partial) == [(Position.BOTTOM, "b"), (Position.TOP, "t")]


def test_partial_map_duplicate_position():
    partial = PartialMap([(Position.BOTTOM, "b"), (Position.TOP, "t")])
    with pytest.raises(DuplicatePositionError) as info:
        partial.insert(Position.TOP, "again")
    assert info.value.index == 1
    assert info.value.position is Position.TOP
    assert len(partial) == 2


def test_partial_map_constructor_rejects_duplicates():
    with pytest.raises(DuplicatePositionError):
        PartialMap([(Position.LEFT, 1), (Position.LEFT, 2)])


def test_partial_map_lookups():
    partial = PartialMap([(Position.BOTTOM, "\u0325"), (Position.TOP, "\u030a")])
    assert partial.to_index(Position.TOP) == 1
    assert partial.to_index(Position.LEFT) is None
    assert partial.data(Position.BOTTOM) == "\u0325"
    assert partial.data(Position.RIGHT) is None
    assert partial.index_position(0) is Position.BOTTOM
    assert partial.index_data(1) == "\u030a"
    assert partial.index_entry(1) == (Position.TOP, "\u030a")
    assert partial.index_entry(2) is None
    assert partial.index_entry(-1) is None


def test_partial_map_contains_and_reversed():
    partial = PartialMap([(Position.LEFT, 1), (Position.RIGHT, 2)])
    assert Position.LEFT in partial
    assert Position.TOP not in partial
    assert list(reversed(partial)) == [(Position.RIGHT, 2), (Position.LEFT, 1)]


def test_partial_map_equality_depends_on_order():
    first = PartialMap([(Position.LEFT, 1), (Position.RIGHT, 2)])
    same = PartialMap([(Position.LEFT, 1), (Position.RIGHT, 2)])
    swapped = PartialMap([(Position.RIGHT, 2), (Position.LEFT, 1)])
    assert first == same
    assert not first == swapped


def test_partial_map_ordering():
    smaller = PartialMap([(Position.TOP, 1)])
    larger = PartialMap([(Position.LEFT, 1)])
    assert smaller < larger
    assert larger > smaller
    assert PartialMap() < smaller


def test_partial_map_hash_uses_positions():
    first = PartialMap([(Position.TOP, "a")])
    second = PartialMap([(Position.TOP, "b")])
    assert hash(first) == hash(second)
    assert hash(first) == hash(PartialMap([(Position.TOP, "a")]))


def test_partial_map_holds_every_position():
    partial = PartialMap((position, position.name) for position in ALL_POSITIONS)
    assert len(partial) == PartialMap.CAPACITY
    for position in ALL_POSITIONS:
        assert partial.data(position) == position.name