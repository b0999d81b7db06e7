"""
Noughts CLI - Command-line interface for the game.

Usage:
    noughts play [--dimension N] [--legacy-draw]      Play on stdin/stdout
    noughts replay <moves_file> [--dimension N]       Replay moves from a file

Both commands accept --nought-glyph and --cross-glyph to change the marks shown.

Exit status is 0 when the game ends by quit, win or draw, and 1 when
input runs out or the settings are invalid.
"""

import argparse
import sys

from pydantic import ValidationError

from .config import GameSettings
from .log import init_logging
from .session import BoardRenderer, GameLoop, InteractiveInputSource, LoopState, ScriptedInputSource


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "replay":
        return cmd_replay(args)
    else:
        parser.print_help()
        return 1


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dimension", "-n", type=int, default=3, help="Board size N (default 3)")
    common.add_argument(
        "--legacy-draw",
        action="store_true",
        help="Declare a draw one placement before the board is full",
    )
    common.add_argument("--nought-glyph", default="O", help="Character shown for noughts")
    common.add_argument("--cross-glyph", default="X", help="Character shown for crosses")
    common.add_argument("--log-level", default="WARNING", help="Logging level")
    common.add_argument("--log-file", help="Write logs to this file instead of stderr")

    parser = argparse.ArgumentParser(
        description="Noughts - N×N tic tac toe",
        prog="noughts",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("play", parents=[common], help="Play an interactive game")

    replay_parser = subparsers.add_parser("replay", parents=[common], help="Replay moves from a file")
    replay_parser.add_argument("moves_file", help="Text file with one move per line")

    return parser


def cmd_play(args):
    """Play an interactive game on stdin."""
    settings = _load_settings(args)
    if settings is None:
        return 1
    return _run_game(settings, InteractiveInputSource())


def cmd_replay(args):
    """Replay a scripted game."""
    settings = _load_settings(args)
    if settings is None:
        return 1

    try:
        source = ScriptedInputSource.from_file(args.moves_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.moves_file}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {args.moves_file}: {e}")
        return 1

    return _run_game(settings, source)


def _load_settings(args):
    try:
        settings = GameSettings(
            dimension=args.dimension,
            legacy_draw=args.legacy_draw,
            nought_glyph=args.nought_glyph,
            cross_glyph=args.cross_glyph,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValidationError as e:
        print("Invalid settings:")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "settings"
            print(f"  - {field}: {error['msg']}")
        return None

    init_logging(settings.log_level, settings.log_file)
    return settings


def _run_game(settings, source):
    loop = GameLoop(
        settings.new_board(),
        source,
        renderer=BoardRenderer(settings.glyphs()),
    )
    report = loop.run()
    return 1 if report.final_state == LoopState.INPUT_FAILURE else 0


if __name__ == "__main__":
    sys.exit(main())
