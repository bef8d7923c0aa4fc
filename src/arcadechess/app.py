"""Console entry point: play against the computer in a terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from arcadechess.core.enums import Color, Difficulty, GameStatus
from arcadechess.core.types import Square, parse_square
from arcadechess.game.controller import GameController
from arcadechess.game.state import MoveRecord
from arcadechess.settings import GameSettings

_STATUS_TEXT: dict[GameStatus, str] = {
    GameStatus.PLAYING: "",
    GameStatus.CHECK: "Check!",
    GameStatus.WHITE_WINS: "Checkmate. White wins.",
    GameStatus.BLACK_WINS: "Checkmate. Black wins.",
    GameStatus.STALEMATE: "Stalemate.",
}


def parse_move_text(text: str) -> tuple[Square, Square]:
    """Parse ``e2e4`` / ``e2-e4`` / ``e2 e4`` into two squares."""
    cleaned = text.strip().lower().replace("-", "").replace(" ", "")
    if len(cleaned) != 4:
        raise ValueError(f"Expected a move like e2e4, got {text!r}")
    return parse_square(cleaned[:2]), parse_square(cleaned[2:])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcadechess", description="Play chess against the computer."
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
    )
    parser.add_argument(
        "--depth", type=int, default=3, help="hard search depth below the root"
    )
    parser.add_argument(
        "--play-black", action="store_true", help="let the computer open as white"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def run(
    ctrl: GameController,
    read_line: Callable[[str], str] | None = None,
    out: TextIO | None = None,
) -> GameStatus:
    """Drive *ctrl* until the game ends or the user quits."""
    if read_line is None:
        read_line = input
    if out is None:
        out = sys.stdout

    def show(record: MoveRecord, _state: object) -> None:
        print(f"  {record}", file=out)

    ctrl.events.on_move.append(show)
    state = ctrl.state

    while not state.is_game_over:
        if ctrl.play_ai_turn() is not None:
            continue

        print(repr(state.position.board), file=out)
        if state.status == GameStatus.CHECK:
            print(_STATUS_TEXT[GameStatus.CHECK], file=out)
        try:
            text = read_line(f"{state.turn} to move (e.g. e2e4, 'quit'): ")
        except EOFError:
            break
        if text.strip().lower() in ("quit", "exit"):
            break
        try:
            from_sq, to_sq = parse_move_text(text)
        except ValueError as exc:
            print(exc, file=out)
            continue
        if not ctrl.submit_move(from_sq, to_sq):
            print("That move is not allowed.", file=out)

    if state.is_game_over:
        print(repr(state.position.board), file=out)
        print(_STATUS_TEXT[state.status], file=out)
    return state.status


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    settings = GameSettings(
        difficulty=Difficulty(args.difficulty),
        search_depth=args.depth,
        ai_color=Color.WHITE if args.play_black else Color.BLACK,
        seed=args.seed,
    )
    run(GameController.vs_computer(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
