"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    STANDARD_LADDERS,
    STANDARD_SNAKES,
    Board,
    BoardEntity,
    EntityKind,
    InvalidEntityError,
)


# ── BoardEntity ──────────────────────────────────────────────────────

def test_snake_goes_down():
    s = BoardEntity.snake(62, 19)
    assert s.kind is EntityKind.SNAKE
    assert (s.start, s.end) == (62, 19)


def test_ladder_goes_up():
    ladder = BoardEntity.ladder(2, 38)
    assert ladder.kind is EntityKind.LADDER
    assert (ladder.start, ladder.end) == (2, 38)


@pytest.mark.parametrize("start,end", [(10, 10), (10, 40)])
def test_upward_snake_rejected(start, end):
    with pytest.raises(InvalidEntityError):
        BoardEntity.snake(start, end)


@pytest.mark.parametrize("start,end", [(40, 40), (40, 10)])
def test_downward_ladder_rejected(start, end):
    with pytest.raises(InvalidEntityError):
        BoardEntity.ladder(start, end)


def test_invalid_entity_is_a_value_error():
    with pytest.raises(ValueError):
        BoardEntity.ladder(5, 1)


def test_entity_is_immutable():
    s = BoardEntity.snake(62, 19)
    with pytest.raises(AttributeError):
        s.end = 1  # type: ignore[misc]


def test_entity_str():
    assert str(BoardEntity.snake(62, 19)) == "Snake: 62 -> 19"
    assert str(BoardEntity.ladder(2, 38)) == "Ladder: 2 -> 38"


# ── constants ────────────────────────────────────────────────────────

def test_standard_layout_has_10_snakes_and_11_ladders():
    assert len(STANDARD_SNAKES) == 10
    assert len(STANDARD_LADDERS) == 11


def test_standard_starts_are_unique_and_in_range():
    starts = [s for s, _ in STANDARD_SNAKES + STANDARD_LADDERS]
    assert len(starts) == len(set(starts))
    for start, end in STANDARD_SNAKES + STANDARD_LADDERS:
        assert 1 <= start < 100
        assert 1 <= end < 100


# ── Board ────────────────────────────────────────────────────────────

def test_size_is_side_squared():
    assert Board(10).size() == 100
    assert Board(7).size() == 49


@pytest.mark.parametrize("side", [0, -1, -10])
def test_side_must_be_positive(side):
    with pytest.raises(ValueError):
        Board(side)


def test_one_cell_board():
    assert Board(1).size() == 1


def test_empty_board_has_no_entities():
    b = Board(10)
    assert b.entity_at(50) is None
    assert b.can_place(50)
    assert list(b.entities()) == []


def test_place_then_lookup():
    b = Board(10)
    snake = BoardEntity.snake(62, 19)
    assert b.place(snake) is True
    assert b.entity_at(62) == snake
    assert b.entity_at(19) is None  # only the start cell is indexed


def test_cell_stays_taken_after_place():
    b = Board(10)
    b.place(BoardEntity.ladder(2, 38))
    assert not b.can_place(2)
    b.place(BoardEntity.snake(40, 3))
    assert not b.can_place(2)


def test_place_on_taken_cell_is_a_silent_noop():
    b = Board(10)
    first = BoardEntity.snake(62, 19)
    b.place(first)
    assert b.place(BoardEntity.ladder(62, 80)) is False
    assert b.entity_at(62) == first
    assert len(list(b.entities())) == 1


def test_snakes_and_ladders_in_placement_order():
    b = Board(10)
    b.place(BoardEntity.snake(99, 54))
    b.place(BoardEntity.ladder(2, 38))
    b.place(BoardEntity.snake(16, 6))
    assert [s.start for s in b.snakes()] == [99, 16]
    assert [e.start for e in b.ladders()] == [2]


def test_describe():
    b = Board(10)
    b.place(BoardEntity.snake(62, 19))
    b.place(BoardEntity.ladder(2, 38))
    text = b.describe()
    assert "Total Cells: 100" in text
    assert "Snakes: 1" in text
    assert "Snake: 62 -> 19" in text
    assert "Ladders: 1" in text
    assert "Ladder: 2 -> 38" in text
