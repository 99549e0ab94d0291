import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.app.loop import run_game


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 1280x720, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Be Mine - YES vs NO")
    parser.add_argument("--game", default="yes_or_no", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(1280, 720),
                        help="Window size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--touch", action="store_true",
                        help="Touch-first device: smaller sizes, no click-to-win")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    run_game(
        game_id=args.game,
        screen_size=args.screen,
        fps=args.fps,
        coarse_pointer=args.touch,
        mirror=args.mirror,
    )


if __name__ == "__main__":
    main()
