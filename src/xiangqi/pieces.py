"""
Xiangqi piece definitions.
Pieces: 將/帥(General), 士/仕(Advisor), 象/相(Elephant), 馬/傌(Horse),
        車/俥(Chariot), 炮/砲(Cannon), 卒/兵(Soldier)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    RED = 1  # first side, moves first, bottom of the board
    BLACK = -1  # second side, top of the board

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self is Color.RED else Color.RED

    @property
    def label(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    GENERAL = 1  # 將/帥
    ADVISOR = 2  # 士/仕
    ELEPHANT = 3  # 象/相
    HORSE = 4  # 馬/傌
    CHARIOT = 5  # 車/俥
    CANNON = 6  # 炮/砲
    SOLDIER = 7  # 卒/兵

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Piece:
    kind: PieceType
    color: Color

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[(self.color, self.kind)]

    def __str__(self) -> str:
        return f"{self.color.label} {self.kind.label}"


PIECE_SYMBOLS = {
    (Color.RED, PieceType.GENERAL): "帥",
    (Color.RED, PieceType.ADVISOR): "仕",
    (Color.RED, PieceType.ELEPHANT): "相",
    (Color.RED, PieceType.HORSE): "傌",
    (Color.RED, PieceType.CHARIOT): "俥",
    (Color.RED, PieceType.CANNON): "砲",
    (Color.RED, PieceType.SOLDIER): "兵",
    (Color.BLACK, PieceType.GENERAL): "將",
    (Color.BLACK, PieceType.ADVISOR): "士",
    (Color.BLACK, PieceType.ELEPHANT): "象",
    (Color.BLACK, PieceType.HORSE): "馬",
    (Color.BLACK, PieceType.CHARIOT): "車",
    (Color.BLACK, PieceType.CANNON): "炮",
    (Color.BLACK, PieceType.SOLDIER): "卒",
}

# Back rank, column 0 to 8, identical for both sides.
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.CHARIOT,
    PieceType.HORSE,
    PieceType.ELEPHANT,
    PieceType.ADVISOR,
    PieceType.GENERAL,
    PieceType.ADVISOR,
    PieceType.ELEPHANT,
    PieceType.HORSE,
    PieceType.CHARIOT,
)
