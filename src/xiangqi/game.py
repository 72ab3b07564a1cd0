"""TurnController — the stateful core of a Xiangqi game.

Owns the board, the side to move, the current selection, the capture tally
and the game-over flag. Every public operation runs to completion, either
applying a full state transition or reporting failure without touching the
board. Outcomes are returned to the caller and also fired through
``GameEvents`` callbacks so a UI can subscribe instead of polling.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from loguru import logger

from .board import Board, Square, in_bounds, move_to_str, square_name
from .check import has_general, is_in_check
from .config import EngineSettings
from .geometry import is_geometrically_legal, reachable_squares
from .pieces import Color, Piece

KING_CAPTURED = "king captured"


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn controller."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


# ── Results ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameOverInfo:
    winner: Color
    reason: str = KING_CAPTURED


@dataclass(frozen=True)
class SelectResult:
    selected: bool
    candidates: tuple[Square, ...] = ()


@dataclass(frozen=True)
class MoveResult:
    applied: bool
    captured: Piece | None = None
    check_notice: Color | None = None
    game_over: GameOverInfo | None = None
    # Set when a rejected move landed on one of the mover's own pieces.
    reselection: SelectResult | None = None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square], None]
CaptureCallback = Callable[[Piece], None]
CheckCallback = Callable[[Color], None]
GameOverCallback = Callable[[GameOverInfo], None]
RestartCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_restart: list[RestartCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController:
    """Sequences turns for two players sharing one board.

    Only the movement rule of the selected piece decides legality: moving
    into check is allowed, and the game ends only when a General leaves the
    board.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_selection",
        "_captured",
        "_game_over",
        "_pending_check",
        "settings",
        "events",
    )

    def __init__(
        self,
        settings: EngineSettings | None = None,
        board: Board | None = None,
        turn: Color = Color.RED,
    ) -> None:
        self.settings = settings if settings is not None else EngineSettings()
        self.events = GameEvents()
        self._reset(board if board is not None else Board.start_position(), turn)

    def _reset(self, board: Board, turn: Color) -> None:
        self._board = board
        self._turn = turn
        self._selection: Square | None = None
        self._captured: dict[Color, list[Piece]] = {Color.RED: [], Color.BLACK: []}
        self._game_over: GameOverInfo | None = None
        self._pending_check: Color | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The live board. Callers read it for rendering; only tests set up positions on it."""
        return self._board

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def selection(self) -> Square | None:
        return self._selection

    @property
    def game_over(self) -> GameOverInfo | None:
        return self._game_over

    @property
    def is_game_over(self) -> bool:
        return self._game_over is not None

    @property
    def pending_check(self) -> Color | None:
        return self._pending_check

    @property
    def phase(self) -> GamePhase:
        if self._game_over is not None:
            return GamePhase.GAME_OVER
        if self._selection is not None:
            return GamePhase.PIECE_SELECTED
        return GamePhase.AWAITING_SELECTION

    def captured(self, color: Color) -> list[Piece]:
        """Pieces `color` has lost, in capture order."""
        return list(self._captured[color])

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color)

    # ── Operations ───────────────────────────────────────────────────────

    def select(self, sq: Square) -> SelectResult:
        if self._game_over is not None:
            return SelectResult(False)
        if not in_bounds(*sq):
            logger.debug("Select rejected | off-board square {}", sq)
            return SelectResult(False)
        piece = self._board.get(sq)
        if piece is None or piece.color != self._turn:
            logger.debug("Select rejected | {} | turn={}", square_name(sq), self._turn.name)
            return SelectResult(False)

        self._selection = sq
        candidates: tuple[Square, ...] = ()
        if self.settings.show_candidates:
            candidates = tuple(reachable_squares(self._board, sq))
        logger.debug("Selected {} at {} | {} candidate(s)", piece, square_name(sq), len(candidates))
        return SelectResult(True, candidates)

    def attempt_move(self, origin: Square, dest: Square) -> MoveResult:
        if self._game_over is not None or self._selection is None or origin != self._selection:
            return MoveResult(False)

        if not is_geometrically_legal(self._board, origin, dest):
            return self._reject(origin, dest)

        mover = self._turn
        notation = move_to_str((origin, dest), self._board)
        captured = self._board.relocate((origin, dest))
        self._selection = None
        if captured is not None:
            self._captured[captured.color].append(captured)
            logger.info("Move | {} | {} | captured {}", mover.name, notation, captured)
        else:
            logger.info("Move | {} | {}", mover.name, notation)

        game_over = self._evaluate_game_end()
        notice: Color | None = None
        if game_over is not None:
            self._game_over = game_over
            self._pending_check = None
            logger.info("Game over | winner={} | {}", game_over.winner.name, game_over.reason)
        else:
            if self.settings.check_warning and is_in_check(self._board, mover.opponent):
                self._pending_check = mover.opponent
            notice = self._advance_turn()

        self._fire(self.events.on_move, origin, dest)
        if captured is not None:
            self._fire(self.events.on_capture, captured)
        if game_over is not None:
            self._fire(self.events.on_game_over, game_over)
        elif notice is not None:
            self._fire(self.events.on_check, notice)
        return MoveResult(True, captured, notice, game_over)

    def click(self, sq: Square) -> SelectResult | MoveResult | None:
        """Single entry point for a click on a board cell.

        With a piece selected the click is a move attempt, otherwise a
        selection. Returns None once the game is over.
        """
        if self._game_over is not None:
            return None
        if self._selection is not None:
            return self.attempt_move(self._selection, sq)
        return self.select(sq)

    def restart(self) -> None:
        self._reset(Board.start_position(), Color.RED)
        logger.info("Game restarted | RED to move")
        self._fire(self.events.on_restart)

    def status_message(self) -> str:
        if self._game_over is not None:
            winner = self._game_over.winner
            return f"{winner.label} wins! {winner.opponent.label}'s General was captured."
        if self.settings.check_warning and self.is_in_check(self._turn):
            return f"{self._turn.label} is in check!"
        return f"{self._turn.label} to move"

    # ── Internals ────────────────────────────────────────────────────────

    def _reject(self, origin: Square, dest: Square) -> MoveResult:
        target = self._board.get(dest) if in_bounds(*dest) else None
        shown = square_name(dest) if in_bounds(*dest) else str(dest)
        logger.debug("Move rejected | {} -> {}", square_name(origin), shown)
        if target is not None and target.color == self._turn:
            return MoveResult(False, reselection=self.select(dest))
        self._selection = None
        return MoveResult(False)

    def _evaluate_game_end(self) -> GameOverInfo | None:
        for color in (Color.RED, Color.BLACK):
            if not has_general(self._board, color):
                return GameOverInfo(winner=color.opponent, reason=KING_CAPTURED)
        return None

    def _advance_turn(self) -> Color | None:
        """Flip the side to move and return the check notice to surface, if any.

        A notice recorded during the move takes precedence and is consumed
        here; otherwise the new side to move is tested afresh.
        """
        self._turn = self._turn.opponent
        if self._pending_check is not None:
            notice: Color | None = self._pending_check
            self._pending_check = None
        elif self.settings.check_warning and is_in_check(self._board, self._turn):
            notice = self._turn
        else:
            notice = None
        if notice is not None:
            logger.info("Check | {} General is attacked", notice.name)
        return notice

    @staticmethod
    def _fire(handlers: list[Callable[..., None]], *args: object) -> None:
        for handler in handlers:
            handler(*args)
