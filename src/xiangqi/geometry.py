"""
Per-piece movement geometry.

Every rule is a pure predicate over the current occupancy: nothing here looks
at whose turn it is, at move history, or at whether the mover's own General
would be left attacked. The same predicate serves move validation and attack
scanning in check detection.
"""

from __future__ import annotations

from collections.abc import Callable

from .board import (
    BLACK_PALACE_ROWS,
    BLACK_SIDE,
    COLS,
    PALACE_COLS,
    RED_PALACE_ROWS,
    RED_SIDE,
    ROWS,
    Board,
    Square,
    in_bounds,
)
from .pieces import Color, PieceType

Rule = Callable[[Board, Square, Square, Color], bool]


def _in_palace(sq: Square, color: Color) -> bool:
    r, c = sq
    r0, r1 = RED_PALACE_ROWS if color == Color.RED else BLACK_PALACE_ROWS
    return r0 <= r <= r1 and PALACE_COLS[0] <= c <= PALACE_COLS[1]


def _deltas(frm: Square, to: Square) -> tuple[int, int]:
    """(dx, dy) = (|Δcol|, |Δrow|)."""
    return abs(to[1] - frm[1]), abs(to[0] - frm[0])


def path_count(board: Board, frm: Square, to: Square) -> int:
    """Number of pieces strictly between two squares on the same row or column."""
    (r1, c1), (r2, c2) = frm, to
    g = board.grid
    if r1 == r2:
        lo, hi = sorted((c1, c2))
        return int((g[r1, lo + 1 : hi] != 0).sum())
    if c1 == c2:
        lo, hi = sorted((r1, r2))
        return int((g[lo + 1 : hi, c1] != 0).sum())
    raise ValueError(f"{frm} and {to} are not on a common line")


# ── Rules ────────────────────────────────────────────────────────────────────


def _general(board: Board, frm: Square, to: Square, color: Color) -> bool:
    dx, dy = _deltas(frm, to)
    return _in_palace(to, color) and dx + dy == 1


def _advisor(board: Board, frm: Square, to: Square, color: Color) -> bool:
    dx, dy = _deltas(frm, to)
    return _in_palace(to, color) and dx == 1 and dy == 1


def _elephant(board: Board, frm: Square, to: Square, color: Color) -> bool:
    own_half = RED_SIDE if color == Color.RED else BLACK_SIDE
    if to[0] not in own_half:
        return False
    dx, dy = _deltas(frm, to)
    if dx != 2 or dy != 2:
        return False
    # Elephant's eye
    eye = ((frm[0] + to[0]) // 2, (frm[1] + to[1]) // 2)
    return board.is_empty(eye)


def _horse(board: Board, frm: Square, to: Square, color: Color) -> bool:
    dx, dy = _deltas(frm, to)
    if (dx, dy) == (2, 1):
        leg = (frm[0], (frm[1] + to[1]) // 2)
    elif (dx, dy) == (1, 2):
        leg = ((frm[0] + to[0]) // 2, frm[1])
    else:
        return False
    # Hobbled horse
    return board.is_empty(leg)


def _straight(frm: Square, to: Square) -> bool:
    dx, dy = _deltas(frm, to)
    return (dx == 0) != (dy == 0)


def _chariot(board: Board, frm: Square, to: Square, color: Color) -> bool:
    return _straight(frm, to) and path_count(board, frm, to) == 0


def _cannon(board: Board, frm: Square, to: Square, color: Color) -> bool:
    if not _straight(frm, to):
        return False
    screens = path_count(board, frm, to)
    if board.is_empty(to):
        return screens == 0
    return screens == 1


def _soldier(board: Board, frm: Square, to: Square, color: Color) -> bool:
    forward = -1 if color == Color.RED else 1
    crossed = frm[0] in (BLACK_SIDE if color == Color.RED else RED_SIDE)
    dr, dc = to[0] - frm[0], to[1] - frm[1]
    if dr == forward and dc == 0:
        return True
    return crossed and dr == 0 and abs(dc) == 1


RULES: dict[PieceType, Rule] = {
    PieceType.GENERAL: _general,
    PieceType.ADVISOR: _advisor,
    PieceType.ELEPHANT: _elephant,
    PieceType.HORSE: _horse,
    PieceType.CHARIOT: _chariot,
    PieceType.CANNON: _cannon,
    PieceType.SOLDIER: _soldier,
}


def is_geometrically_legal(board: Board, frm: Square, to: Square) -> bool:
    """True if the piece on `frm` may move to `to` under its movement rule.

    Shared preconditions are checked first: the squares differ, the
    destination is on the board, and the destination does not hold a piece
    of the mover's own side. An empty or off-board origin is never legal.
    """
    if frm == to:
        return False
    if not in_bounds(*frm) or not in_bounds(*to):
        return False
    piece = board.get(frm)
    if piece is None:
        return False
    target = board.get(to)
    if target is not None and target.color == piece.color:
        return False
    return RULES[piece.kind](board, frm, to, piece.color)


def reachable_squares(board: Board, frm: Square) -> list[Square]:
    """Every destination the piece on `frm` may legally move to, row-major."""
    return [
        (r, c)
        for r in range(ROWS)
        for c in range(COLS)
        if is_geometrically_legal(board, frm, (r, c))
    ]
