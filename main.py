"""
Xiangqi — two players, one terminal.

Type a square (e.g. b2) to select a piece, then its destination (e.g. e2).
Both can be given on one line: "b2 e2". Commands: r = restart, q = quit.
"""

import argparse
import sys

from colorama import Fore, Style, init
from loguru import logger

from xiangqi import Board, Color, EngineSettings, MoveResult, TurnController, parse_square
from xiangqi.board import COLS, ROWS, Square, decode
from xiangqi.pieces import PIECE_SYMBOLS, Piece

init(autoreset=True)

# ── Color palette ──────────────────────────────────────────────────────────────
RED_PIECE = Fore.RED + Style.BRIGHT
BLACK_PIECE = Fore.CYAN + Style.BRIGHT
BOARD_FG = Fore.WHITE
DIM = Style.DIM
GOLD = Fore.YELLOW + Style.BRIGHT
GREEN = Fore.GREEN + Style.BRIGHT
WARN = Fore.MAGENTA + Style.BRIGHT
RESET = Style.RESET_ALL


def side_colored(color: Color, text: str) -> str:
    return (RED_PIECE if color == Color.RED else BLACK_PIECE) + text + RESET


def colored_board(
    board: Board,
    selected: Square | None = None,
    candidates: tuple[Square, ...] = (),
) -> str:
    """Return a colored board string with the selection and its candidates marked."""
    marks = set(candidates)
    lines = []
    lines.append(BOARD_FG + "   a b c d e f g h i" + RESET)
    lines.append(BOARD_FG + "  ╔═══════════════════╗" + RESET)
    for r in range(ROWS):
        row_str = BOARD_FG + f"{9 - r} ║" + RESET
        for c in range(COLS):
            val = int(board.grid[r, c])
            if val == 0:
                row_str += (GREEN + " ∗" if (r, c) in marks else DIM + " ·") + RESET
                continue
            color, pt = decode(val)
            sym = PIECE_SYMBOLS[(color, pt)]
            if (r, c) == selected:
                row_str += " " + GOLD + sym + RESET
            elif (r, c) in marks:
                row_str += " " + Style.BRIGHT + Fore.GREEN + sym + RESET
            else:
                row_str += " " + side_colored(color, sym)
        row_str += BOARD_FG + " ║" + RESET
        lines.append(row_str)
        if r == 4:
            lines.append(BOARD_FG + "  ║    楚河    漢界    ║" + RESET)
    lines.append(BOARD_FG + "  ╚═══════════════════╝" + RESET)
    return "\n".join(lines)


def captured_line(game: TurnController, color: Color) -> str:
    lost: list[Piece] = game.captured(color)
    glyphs = " ".join(p.symbol for p in lost) or "-"
    return f"  {side_colored(color, color.label)} lost: {glyphs}"


def report(result: MoveResult) -> None:
    if result.captured is not None:
        print(GOLD + f"  Captured {result.captured.symbol} ({result.captured})" + RESET)
    if result.game_over is not None:
        winner = result.game_over.winner
        print(GOLD + "\n  ★  " + side_colored(winner, f"{winner.label} wins!") + GOLD + "  ★")
        print(DIM + "  Type r to start a new game." + RESET)
    elif result.check_notice is not None:
        print(WARN + f"  ⚠ {result.check_notice.label} is in check!" + RESET)


def play(game: TurnController) -> None:
    candidates: tuple[Square, ...] = ()
    while True:
        print(colored_board(game.board, game.selection, candidates))
        print(captured_line(game, Color.RED))
        print(captured_line(game, Color.BLACK))
        print(f"  {game.status_message()}")
        try:
            line = input(side_colored(game.turn, f"{game.turn.label}> ")).strip().lower()
        except EOFError:
            return
        if line in ("q", "quit"):
            return
        if line in ("r", "restart"):
            game.restart()
            candidates = ()
            continue

        for token in line.split():
            sq = parse_square(token)
            if sq is None:
                print(DIM + f"  Not a square: {token}" + RESET)
                break
            result = game.click(sq)
            if result is None:
                print(DIM + "  The game is over. Type r to restart." + RESET)
                break
            if isinstance(result, MoveResult):
                if result.reselection is not None:
                    candidates = result.reselection.candidates
                else:
                    candidates = ()
                if result.applied:
                    report(result)
            else:
                candidates = result.candidates


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--no-check-warning", action="store_true", help="disable check notices")
    parser.add_argument("--verbose", action="store_true", help="log engine events to stderr")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    settings = EngineSettings(check_warning=not args.no_check_warning)
    play(TurnController(settings=settings))


if __name__ == "__main__":
    main()
