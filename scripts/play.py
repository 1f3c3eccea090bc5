#!/usr/bin/env python3
"""
Snake Arcade - Play Script

Usage:
    python scripts/play.py                       # Play with config.yaml / defaults
    python scripts/play.py --style classic       # Flat blocks instead of neon
    python scripts/play.py --mute --scores /tmp/snake.json

Controls:
    Arrow Keys or WASD: Steer
    Space: Pause / resume
    ESC: Quit
"""
import sys
import os
import argparse
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from snake_arcade.games.snake.config import RENDER_STYLES
from snake_arcade.utils.config_loader import load_config
from snake_arcade.utils.logging_setup import setup_logging
from snake_arcade.visualization.app import SnakeApp


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Snake Arcade - classic Snake with a persisted high score",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py
  python scripts/play.py --style classic
  python scripts/play.py --config my_config.yaml --log-level DEBUG
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to YAML config file (default: config.yaml)"
    )
    parser.add_argument(
        "--style",
        choices=RENDER_STYLES,
        default=None,
        help="Snake drawing style"
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable the munch sound"
    )
    parser.add_argument(
        "--scores",
        type=str,
        default=None,
        metavar="PATH",
        help="High score file"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Frame rate cap (does not change game speed)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )

    return parser.parse_args(argv)


def build_config(args):
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)

    if args.style:
        config.game.style = args.style
    if args.mute:
        config.audio.enabled = False
    if args.scores:
        config.high_score.path = args.scores
    if args.fps:
        config.display.fps = args.fps
    if args.log_level:
        config.logging.level = args.log_level

    return config


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config.logging)

    print("=" * 50)
    print("Snake Arcade")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Steer")
    print("  Space: Pause / Resume")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    app = SnakeApp(config)
    app.run()


if __name__ == "__main__":
    main()
