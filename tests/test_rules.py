from __future__ import annotations

import pytest

from engine.errors import InvalidSquareError
from engine.pieces import Piece
from engine.rules import ALL_SQUARES, Square, parse_square, pieces_along_line, sq, sq_from_index, squares_between


def test_squares_are_interned() -> None:
    assert sq(2, 5) is sq(2, 5)
    assert parse_square("c6") is sq(2, 5)
    assert sq_from_index(sq(2, 5).index) is sq(2, 5)


def test_all_squares_row_major() -> None:
    assert len(ALL_SQUARES) == 64
    assert str(ALL_SQUARES[0]) == "a1"
    assert str(ALL_SQUARES[1]) == "b1"
    assert str(ALL_SQUARES[63]) == "h8"
    assert [s.index for s in ALL_SQUARES] == list(range(64))


@pytest.mark.parametrize("col,row", [(-1, 0), (0, 8), (8, 3), (3, -2)])
def test_sq_rejects_out_of_range(col: int, row: int) -> None:
    with pytest.raises(InvalidSquareError):
        sq(col, row)


@pytest.mark.parametrize("text", ["", "a", "i1", "a9", "a0", "A1", "a10", "1a", "a1\n", " a1"])
def test_parse_square_rejects_bad_designators(text: str) -> None:
    with pytest.raises(InvalidSquareError):
        parse_square(text)


@pytest.mark.parametrize(
    "target,direction",
    [("d6", 0), ("f6", 1), ("h4", 2), ("g1", 3), ("d1", 4), ("a1", 5), ("a4", 6), ("a7", 7)],
)
def test_direction_is_compass_index(target: str, direction: int) -> None:
    assert parse_square("d4").direction(parse_square(target)) == direction


def test_direction_none_when_not_aligned() -> None:
    d4 = parse_square("d4")
    assert d4.direction(parse_square("e6")) is None
    assert d4.direction(d4) is None


def test_distance_and_move_dest() -> None:
    c3 = parse_square("c3")
    assert c3.distance(parse_square("f6")) == 3
    assert c3.distance(parse_square("c8")) == 5
    assert c3.move_dest(1, 3) is parse_square("f6")
    assert c3.move_dest(5, 2) is parse_square("a1")
    assert c3.move_dest(5, 3) is None
    assert c3.move_dest(6, 3) is None


def test_neighbors_respect_edges() -> None:
    assert len(parse_square("a1").neighbors()) == 3
    assert len(parse_square("a4").neighbors()) == 5
    assert len(parse_square("d4").neighbors()) == 8


def test_squares_between() -> None:
    between = squares_between(parse_square("a1"), parse_square("d4"))
    assert [str(s) for s in between] == ["b2", "c3"]
    assert squares_between(parse_square("a1"), parse_square("b1")) == []


def test_pieces_along_line_counts_whole_line() -> None:
    cells = [Piece.EMPTY] * 64
    for name in ("a3", "c3", "h3", "c8"):
        cells[parse_square(name).index] = Piece.WHITE
    c3 = parse_square("c3")
    # Both horizontal directions share the same count.
    assert pieces_along_line(cells, c3, 2) == 3
    assert pieces_along_line(cells, c3, 6) == 3
    assert pieces_along_line(cells, c3, 0) == 2
    assert pieces_along_line(cells, c3, 1) == 1


def test_square_is_value_type() -> None:
    assert Square(1, 2) == sq(1, 2)
    assert hash(Square(1, 2)) == hash(sq(1, 2))


@pytest.mark.parametrize("col,row", [(8, 0), (-1, 0), (0, 8), (3, -1)])
def test_square_construction_rejects_out_of_range(col: int, row: int) -> None:
    with pytest.raises(InvalidSquareError):
        Square(col, row)
