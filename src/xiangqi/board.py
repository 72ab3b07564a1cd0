"""
Xiangqi board representation.
Board: 10 rows x 9 columns (row 0 = BLACK back rank, row 9 = RED back rank)
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from .errors import BoardShapeError, InvalidPieceError, SquareOutOfRangeError
from .pieces import BACK_RANK, PIECE_SYMBOLS, Color, Piece, PieceType

ROWS = 10
COLS = 9

Square = tuple[int, int]
Move = tuple[Square, Square]

# Palace bounds (inclusive)
RED_PALACE_ROWS = (7, 9)
BLACK_PALACE_ROWS = (0, 2)
PALACE_COLS = (3, 5)

# River: rows 0-4 = BLACK territory, rows 5-9 = RED territory
RED_SIDE = range(5, 10)
BLACK_SIDE = range(0, 5)

FILES = "abcdefghi"


# Encoding: piece_type * color  (RED=+, BLACK=-)
def encode(color: Color, pt: PieceType) -> int:
    return int(color) * int(pt)


def decode(val: int) -> tuple[Color, PieceType]:
    if val == 0 or abs(val) > len(PieceType):
        raise InvalidPieceError(f"Cannot decode cell value {val}")
    color = Color.RED if val > 0 else Color.BLACK
    return color, PieceType(abs(val))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < ROWS and 0 <= c < COLS


def square_name(sq: Square) -> str:
    """Board coordinate as file letter + rank digit, e.g. (9, 4) -> 'e0'."""
    r, c = sq
    return f"{FILES[c]}{9 - r}"


def parse_square(text: str) -> Square | None:
    """Inverse of square_name; None when the text is not a board coordinate."""
    text = text.strip().lower()
    if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
        return None
    return 9 - int(text[1]), FILES.index(text[0])


class Board:
    def __init__(self) -> None:
        self.grid: NDArray[np.int8] = np.zeros((ROWS, COLS), dtype=np.int8)

    @classmethod
    def from_array(cls, grid: list[list[int]]) -> Board:
        # Range check before narrowing to int8.
        raw = np.asarray(grid, dtype=np.int64)
        if raw.shape != (ROWS, COLS):
            raise BoardShapeError(f"Expected a {ROWS}x{COLS} grid, got shape {raw.shape}")
        limit = len(PieceType)
        if np.any((raw < -limit) | (raw > limit)):
            raise InvalidPieceError(f"Grid contains values outside -{limit}..{limit}")
        b = cls()
        b.grid = raw.astype(np.int8)
        return b

    @classmethod
    def start_position(cls) -> Board:
        b = cls()
        g = b.grid
        # BLACK pieces (top)
        g[0] = [encode(Color.BLACK, pt) for pt in BACK_RANK]
        g[2, 1] = encode(Color.BLACK, PieceType.CANNON)
        g[2, 7] = encode(Color.BLACK, PieceType.CANNON)
        for c in range(0, 9, 2):
            g[3, c] = encode(Color.BLACK, PieceType.SOLDIER)
        # RED pieces (bottom)
        g[9] = [encode(Color.RED, pt) for pt in BACK_RANK]
        g[7, 1] = encode(Color.RED, PieceType.CANNON)
        g[7, 7] = encode(Color.RED, PieceType.CANNON)
        for c in range(0, 9, 2):
            g[6, c] = encode(Color.RED, PieceType.SOLDIER)
        return b

    def copy(self) -> Board:
        b = Board()
        b.grid = self.grid.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    # ── Cell access ──────────────────────────────────────────────────────

    def _check(self, sq: Square) -> tuple[int, int]:
        r, c = sq
        if not in_bounds(r, c):
            raise SquareOutOfRangeError(r, c)
        return r, c

    def get(self, sq: Square) -> Piece | None:
        r, c = self._check(sq)
        val = int(self.grid[r, c])
        if val == 0:
            return None
        color, pt = decode(val)
        return Piece(pt, color)

    def set(self, sq: Square, piece: Piece | None) -> None:
        r, c = self._check(sq)
        self.grid[r, c] = 0 if piece is None else encode(piece.color, piece.kind)

    def is_empty(self, sq: Square) -> bool:
        r, c = self._check(sq)
        return int(self.grid[r, c]) == 0

    def occupied(self) -> list[tuple[Square, Piece]]:
        """Every occupied cell in row-major order."""
        result: list[tuple[Square, Piece]] = []
        for r, c in np.argwhere(self.grid != 0):
            color, pt = decode(int(self.grid[r, c]))
            result.append(((int(r), int(c)), Piece(pt, color)))
        return result

    def pieces_of(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        return (item for item in self.occupied() if item[1].color == color)

    def count(self, color: Color, pt: PieceType | None = None) -> int:
        if pt is None:
            mask = (self.grid * int(color)) > 0
        else:
            mask = self.grid == encode(color, pt)
        return int(np.count_nonzero(mask))

    def relocate(self, move: Move) -> Piece | None:
        """Move whatever stands on the origin to the destination. Returns the piece removed."""
        (r1, c1), (r2, c2) = move
        self._check((r1, c1))
        self._check((r2, c2))
        captured = self.get((r2, c2))
        self.grid[r2, c2] = self.grid[r1, c1]
        self.grid[r1, c1] = 0
        return captured

    def display(self) -> str:
        lines = []
        lines.append("   a b c d e f g h i")
        lines.append("  ╔═══════════════════╗")
        for r in range(ROWS):
            row_str = f"{9 - r} ║"
            for c in range(COLS):
                val = int(self.grid[r, c])
                if val == 0:
                    row_str += " ·"
                else:
                    color, pt = decode(val)
                    row_str += " " + PIECE_SYMBOLS[(color, pt)]
            row_str += " ║"
            lines.append(row_str)
            if r == 4:
                lines.append("  ║    楚河    漢界    ║")
        lines.append("  ╚═══════════════════╝")
        return "\n".join(lines)


def move_to_str(move: Move, board: Board) -> str:
    """Glyph of the moving piece followed by origin-destination, e.g. '砲b2-e2'."""
    (r1, c1), (r2, c2) = move
    val = int(board.grid[r1, c1])
    if val == 0:
        return "???"
    color, pt = decode(val)
    sym = PIECE_SYMBOLS[(color, pt)]
    return f"{sym}{square_name((r1, c1))}-{square_name((r2, c2))}"
