"""
Check detection.

Attacks are found by asking the plain movement rule whether an enemy piece
could move onto the General's square. The rule never consults check status
itself, so there is no recursion between the two.
"""

from __future__ import annotations

from .board import Board, Square
from .geometry import is_geometrically_legal
from .pieces import Color, PieceType


def find_general(board: Board, color: Color) -> Square | None:
    """First square (row-major) holding `color`'s General, or None."""
    for sq, piece in board.pieces_of(color):
        if piece.kind == PieceType.GENERAL:
            return sq
    return None


def has_general(board: Board, color: Color) -> bool:
    return board.count(color, PieceType.GENERAL) > 0


def attackers(board: Board, sq: Square, by: Color) -> list[Square]:
    """Squares of every `by` piece whose movement rule reaches `sq`."""
    return [frm for frm, _ in board.pieces_of(by) if is_geometrically_legal(board, frm, sq)]


def is_in_check(board: Board, color: Color) -> bool:
    """Return True if some opposing piece can reach `color`'s General.

    A side with no General on the board is reported as not in check; its
    absence ends the game through the game-over scan instead.
    """
    king = find_general(board, color)
    if king is None:
        return False
    return any(
        is_geometrically_legal(board, frm, king) for frm, _ in board.pieces_of(color.opponent)
    )
