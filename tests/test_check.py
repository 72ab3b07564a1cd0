"""Check detection reuses the movement rules to scan for attackers."""

from xiangqi import Board, Color, Piece, PieceType, find_general, is_in_check
from xiangqi.board import encode
from xiangqi.check import attackers, has_general

R, B = Color.RED, Color.BLACK


def _board(*placements: tuple[int, int, Color, PieceType]) -> Board:
    grid = [[0] * 9 for _ in range(10)]
    for r, c, color, pt in placements:
        grid[r][c] = encode(color, pt)
    return Board.from_array(grid)


def _kings(*extra: tuple[int, int, Color, PieceType]) -> Board:
    return _board((9, 3, R, PieceType.GENERAL), (0, 4, B, PieceType.GENERAL), *extra)


def test_start_position_not_in_check() -> None:
    board = Board.start_position()
    assert not is_in_check(board, R)
    assert not is_in_check(board, B)


def test_find_general() -> None:
    board = Board.start_position()
    assert find_general(board, R) == (9, 4)
    assert find_general(board, B) == (0, 4)
    board.set((0, 4), None)
    assert find_general(board, B) is None
    assert not has_general(board, B)


def test_missing_general_is_not_in_check() -> None:
    board = _board((0, 4, B, PieceType.CHARIOT), (5, 4, R, PieceType.CHARIOT))
    assert not is_in_check(board, B)
    assert not is_in_check(board, R)


def test_chariot_gives_check_on_open_file() -> None:
    board = _kings((5, 4, R, PieceType.CHARIOT))
    assert is_in_check(board, B)
    assert not is_in_check(board, R)
    board.set((3, 4), Piece(PieceType.SOLDIER, B))
    assert not is_in_check(board, B)


def test_cannon_gives_check_only_over_one_screen() -> None:
    board = _kings((5, 4, R, PieceType.CANNON))
    assert not is_in_check(board, B)
    board.set((1, 4), Piece(PieceType.ADVISOR, B))
    assert is_in_check(board, B)
    board.set((3, 4), Piece(PieceType.SOLDIER, R))
    assert not is_in_check(board, B)


def test_horse_check_respects_leg() -> None:
    board = _kings((2, 5, R, PieceType.HORSE))
    assert is_in_check(board, B)
    board.set((1, 5), Piece(PieceType.ADVISOR, B))
    assert not is_in_check(board, B)


def test_soldier_checks() -> None:
    board = _kings((1, 4, R, PieceType.SOLDIER))
    assert is_in_check(board, B)
    board = _kings((0, 3, R, PieceType.SOLDIER))
    assert is_in_check(board, B)
    # A soldier never attacks backwards.
    board = _board(
        (9, 3, R, PieceType.GENERAL),
        (1, 4, B, PieceType.GENERAL),
        (0, 4, R, PieceType.SOLDIER),
    )
    assert not is_in_check(board, B)


def test_black_pieces_check_red() -> None:
    board = _kings((8, 3, B, PieceType.SOLDIER))
    assert is_in_check(board, R)
    board = _kings((7, 2, B, PieceType.HORSE))
    assert is_in_check(board, R)


def test_facing_generals_are_not_check() -> None:
    board = _board((9, 4, R, PieceType.GENERAL), (0, 4, B, PieceType.GENERAL))
    assert not is_in_check(board, R)
    assert not is_in_check(board, B)


def test_own_pieces_never_count_as_attackers() -> None:
    board = _kings((5, 4, B, PieceType.CHARIOT))
    assert not is_in_check(board, B)


def test_attackers_lists_every_reaching_piece() -> None:
    board = _kings(
        (5, 4, R, PieceType.CHARIOT),
        (2, 5, R, PieceType.HORSE),
        (5, 0, R, PieceType.CANNON),
    )
    assert sorted(attackers(board, (0, 4), R)) == [(2, 5), (5, 4)]
