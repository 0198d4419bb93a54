"""Terminal entry point: play a game between bots, or against one."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import replace
from time import perf_counter, sleep

from checkie.config import Settings, SettingsError, load_settings
from checkie.core.enums import Color, GameResult
from checkie.core.notation import parse_move
from checkie.game.controller import GameController
from checkie.game.interfaces import IPlayer
from checkie.game.player import AIPlayer, HumanPlayer

_LOGGER = logging.getLogger(__name__)

_RESULT_TEXT = {
    GameResult.WHITE_WINS: "White wins",
    GameResult.BLACK_WINS: "Black wins",
    GameResult.DRAW: "Draw",
}


def run_game(
    settings: Settings,
    *,
    out: Callable[[str], object] = print,
    read_move: Callable[[str], str] = input,
) -> GameResult | None:
    """Play one game to the end; ``None`` when a human quits."""
    bot = settings.bot
    engine = bot.make_engine()
    requests: list[Color] = []
    bots: dict[Color, AIPlayer] = {}

    def make_player(color: Color) -> IPlayer:
        if not bot.is_bot(color):
            return HumanPlayer(color)
        bots[color] = AIPlayer(
            color,
            f"Bot ({color})",
            bot.depth_for(color),
            on_request_turn=lambda _board: requests.append(color),
            on_cancel=requests.clear,
        )
        return bots[color]

    ctrl = GameController()
    ctrl.events.on_turn_complete.append(
        lambda record, state: out(f"{record.color}: {record.notation}\n{state.board!r}\n")
    )

    started = perf_counter()
    ctrl.new_game(
        make_player(Color.WHITE),
        make_player(Color.BLACK),
        max_turns=settings.max_turns,
    )
    out(f"{ctrl.state.board!r}\n")

    while not ctrl.state.is_game_over:
        if requests:
            color = requests.pop()
            turn_started = perf_counter()
            moves = engine.best_turn(ctrl.state.board, color, bots[color].depth)
            for idx, move in enumerate(moves):
                # Pause between the steps of a chain so a viewer can follow it.
                if idx and bot.delay_ms:
                    sleep(bot.delay_ms / 1000.0)
                if not ctrl.submit_move(move):
                    raise RuntimeError(
                        f"Engine played an illegal move {move} for {color}"
                    )
            _LOGGER.info(
                "Bot turn time: %d millisec", (perf_counter() - turn_started) * 1000
            )
            continue

        cell = ctrl.state.chain_cell
        prompt = f"{ctrl.state.side_to_move} to move"
        if cell is not None:
            prompt += " (continue capturing)"
        text = read_move(prompt + ": ").strip()
        if text in ("q", "quit"):
            return None
        if text in ("u", "undo"):
            if not ctrl.undo_turn():
                out("Nothing to undo")
            out(f"{ctrl.state.board!r}\n")
            continue
        try:
            move = parse_move(text)
        except ValueError as exc:
            out(str(exc))
            continue
        if not ctrl.submit_move(move):
            legal = ", ".join(str(m) for m in ctrl.state.legal_moves())
            out(f"Illegal move {text!r}; legal: {legal}")

    _LOGGER.info("Game time: %d millisec", (perf_counter() - started) * 1000)
    out(_RESULT_TEXT[ctrl.state.result])
    return ctrl.state.result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checkie", description=__doc__)
    parser.add_argument("--settings", help="settings.json to load")
    parser.add_argument(
        "--human",
        choices=("white", "black", "none"),
        help="side played from the keyboard (default: both sides are bots)",
    )
    parser.add_argument("--white-depth", type=int)
    parser.add_argument("--black-depth", type=int)
    parser.add_argument("--seed", type=int, help="fixed seed, disables randomness")
    parser.add_argument("--max-turns", type=int)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    if args.settings:
        settings = load_settings(args.settings)
    else:
        settings = Settings(bot=replace(Settings().bot, white_is_bot=True))

    bot = settings.bot
    if args.human is not None:
        bot = replace(
            bot,
            white_is_bot=args.human != "white",
            black_is_bot=args.human != "black",
        )
    if args.white_depth is not None:
        bot = replace(bot, white_depth=args.white_depth)
    if args.black_depth is not None:
        bot = replace(bot, black_depth=args.black_depth)
    if args.seed is not None:
        bot = replace(bot, randomize=False, seed=args.seed)
    max_turns = settings.max_turns if args.max_turns is None else args.max_turns
    return replace(settings, bot=bot, max_turns=max_turns)


def main(argv: list[str] | None = None) -> int:
    """Launch a terminal game."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = _resolve_settings(args)
    except SettingsError as exc:
        _LOGGER.error("%s", exc)
        return 2

    result = run_game(settings)
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
