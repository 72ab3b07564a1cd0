from .board import Board, decode, encode, move_to_str, parse_square, square_name
from .check import find_general, is_in_check
from .config import EngineSettings
from .game import GameEvents, GameOverInfo, GamePhase, MoveResult, SelectResult, TurnController
from .geometry import is_geometrically_legal, reachable_squares
from .pieces import Color, Piece, PieceType

__all__ = [
    "Board",
    "Color",
    "EngineSettings",
    "GameEvents",
    "GameOverInfo",
    "GamePhase",
    "MoveResult",
    "Piece",
    "PieceType",
    "SelectResult",
    "TurnController",
    "decode",
    "encode",
    "find_general",
    "is_geometrically_legal",
    "is_in_check",
    "move_to_str",
    "parse_square",
    "reachable_squares",
    "square_name",
]
