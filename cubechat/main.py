#!/usr/bin/env python3
"""Cube Chat - application entry point.

Opens a window with a rotating wireframe cube and an AI chat panel.

Usage:
    python -m cubechat                  # Viewport + chat panel
    python -m cubechat --no-chat        # Viewport only
    python -m cubechat --model gpt-4o   # Use a different model
    python -m cubechat --fps 30         # Slower frame clock
"""

import argparse
from typing import List, Optional

from cubechat import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubechat",
        description="Cube Chat - 3D viewport with an AI assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m cubechat                  # Viewport + chat panel
    python -m cubechat --no-chat        # Viewport only
    python -m cubechat --log-dir logs   # Write cubechat.log to ./logs
        """
    )
    parser.add_argument(
        "--no-chat",
        action="store_true",
        help="Hide the chat panel"
    )
    parser.add_argument(
        "--model",
        default=config.DEFAULT_MODEL,
        help=f"OpenAI model for the assistant (default: {config.DEFAULT_MODEL})"
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for the log file (default: current directory)"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=config.TARGET_FPS,
        help=f"Nominal frame rate of the animation (default: {config.TARGET_FPS})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)
    if args.fps <= 0:
        raise SystemExit("--fps must be positive")

    from cubechat.ui import MainWindow

    app = MainWindow(
        enable_chat=not args.no_chat,
        model=args.model,
        log_dir=args.log_dir,
        frame_interval_ms=int(1000 / args.fps)
    )
    app.run()


if __name__ == "__main__":
    main()
