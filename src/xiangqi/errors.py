"""Exceptions raised by the board layer.

The turn controller checks bounds before it touches the board, so none of
these escape its public operations for in-range input.
"""


class XiangqiError(Exception):
    """Base class for every error raised by this package."""


class SquareOutOfRangeError(XiangqiError, ValueError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Square ({row}, {col}) is outside the 10x9 board")
        self.row = row
        self.col = col


class BoardShapeError(XiangqiError, ValueError):
    """Raised when a grid handed to Board.from_array is not 10 rows x 9 columns."""


class InvalidPieceError(XiangqiError, ValueError):
    """Raised for an encoded cell value that does not name a piece."""
