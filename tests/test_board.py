"""Board model: initial layout, cell access and rendering."""

import pytest

from xiangqi import Board, Color, Piece, PieceType
from xiangqi.board import decode, encode, move_to_str, parse_square, square_name
from xiangqi.errors import BoardShapeError, InvalidPieceError, SquareOutOfRangeError

EXPECTED_COUNTS = {
    PieceType.GENERAL: 1,
    PieceType.ADVISOR: 2,
    PieceType.ELEPHANT: 2,
    PieceType.HORSE: 2,
    PieceType.CHARIOT: 2,
    PieceType.CANNON: 2,
    PieceType.SOLDIER: 5,
}


@pytest.mark.parametrize("color", [Color.RED, Color.BLACK])
def test_start_position_piece_counts(color: Color) -> None:
    board = Board.start_position()
    for pt, n in EXPECTED_COUNTS.items():
        assert board.count(color, pt) == n
    assert board.count(color) == 16


def test_start_position_has_32_pieces() -> None:
    assert len(Board.start_position().occupied()) == 32


def test_start_position_layout_is_mirrored() -> None:
    board = Board.start_position()
    for (r, c), piece in board.occupied():
        mirror = board.get((9 - r, c))
        assert mirror == Piece(piece.kind, piece.color.opponent)


def test_start_position_landmarks() -> None:
    board = Board.start_position()
    assert board.get((9, 4)) == Piece(PieceType.GENERAL, Color.RED)
    assert board.get((0, 4)) == Piece(PieceType.GENERAL, Color.BLACK)
    assert board.get((7, 1)) == Piece(PieceType.CANNON, Color.RED)
    assert board.get((2, 7)) == Piece(PieceType.CANNON, Color.BLACK)
    assert board.get((6, 8)) == Piece(PieceType.SOLDIER, Color.RED)
    assert board.get((3, 1)) is None


def test_set_and_get_round_trip() -> None:
    board = Board()
    horse = Piece(PieceType.HORSE, Color.BLACK)
    board.set((4, 4), horse)
    assert board.get((4, 4)) == horse
    assert not board.is_empty((4, 4))
    board.set((4, 4), None)
    assert board.is_empty((4, 4))


def test_set_replaces_occupant() -> None:
    board = Board.start_position()
    board.set((0, 0), Piece(PieceType.SOLDIER, Color.RED))
    assert board.get((0, 0)) == Piece(PieceType.SOLDIER, Color.RED)
    assert len(board.occupied()) == 32


@pytest.mark.parametrize("sq", [(-1, 0), (10, 0), (0, 9), (5, -3)])
def test_out_of_range_access_raises(sq: tuple[int, int]) -> None:
    board = Board()
    with pytest.raises(SquareOutOfRangeError):
        board.get(sq)
    with pytest.raises(SquareOutOfRangeError):
        board.set(sq, None)


def test_relocate_returns_captured_piece() -> None:
    board = Board.start_position()
    captured = board.relocate(((7, 1), (0, 1)))
    assert captured == Piece(PieceType.HORSE, Color.BLACK)
    assert board.is_empty((7, 1))
    assert board.get((0, 1)) == Piece(PieceType.CANNON, Color.RED)


def test_board_copy_independence() -> None:
    board = Board.start_position()
    copy = board.copy()
    copy.grid[0][0] = 0
    assert board.grid[0][0] != 0
    assert copy != board


def test_from_array_rejects_bad_shape() -> None:
    with pytest.raises(BoardShapeError):
        Board.from_array([[0] * 9 for _ in range(9)])


@pytest.mark.parametrize("value", [8, -8, 9, -128, 200, -1000])
def test_from_array_rejects_unknown_piece_value(value: int) -> None:
    grid = [[0] * 9 for _ in range(10)]
    grid[3][3] = value
    with pytest.raises(InvalidPieceError):
        Board.from_array(grid)


def test_encode_decode() -> None:
    assert encode(Color.BLACK, PieceType.CANNON) == -6
    assert decode(-6) == (Color.BLACK, PieceType.CANNON)
    with pytest.raises(InvalidPieceError):
        decode(0)


def test_square_names() -> None:
    assert square_name((9, 4)) == "e0"
    assert square_name((0, 0)) == "a9"
    assert parse_square("e0") == (9, 4)
    assert parse_square(" B7 ") == (2, 1)
    assert parse_square("j1") is None
    assert parse_square("e10") is None


def test_move_to_str() -> None:
    board = Board.start_position()
    assert move_to_str(((7, 1), (7, 4)), board) == "砲b2-e2"
    assert move_to_str(((4, 4), (3, 4)), board) == "???"


def test_display_shows_glyphs_and_river() -> None:
    text = Board.start_position().display()
    assert "帥" in text and "將" in text
    assert "楚河" in text
    assert len(text.splitlines()) == 14


def test_from_array_keeps_extreme_legal_values() -> None:
    grid = [[0] * 9 for _ in range(10)]
    grid[0][0] = -7
    grid[9][8] = 7
    board = Board.from_array(grid)
    assert board.get((0, 0)) == Piece(PieceType.SOLDIER, Color.BLACK)
    assert board.get((9, 8)) == Piece(PieceType.SOLDIER, Color.RED)
