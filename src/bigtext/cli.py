# SPDX-License-Identifier: Apache-2.0
"""
bigtext - CLI Tool

Fits short text to a screen as large as possible and renders it full-screen
to a PNG file. Keeps a small local history of displayed texts.

Usage:
    bigtext <text> [options]

Examples:
    bigtext "Hello world"                           # Print chosen layout
    bigtext "Hello world" -o hello.png              # Render to PNG
    bigtext "Gate 12" --orientation portrait -W 1080 -H 1920
    bigtext "Happy birthday" --background gradient --save-history
    bigtext --list-history
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

from bigtext.core.errors import BigTextError
from bigtext.core.models import (
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_MIN_FONT_SIZE,
    DEFAULT_PADDING,
    InputFont,
    Orientation,
)
from bigtext.output.background import BackgroundColor, GradientColor
from bigtext.pipeline.display_pipeline import DisplayConfig, DisplayPipeline
from bigtext.pipeline.errors import DisplayError
from bigtext.storage.text_history import TextHistory, preview_label

logger = logging.getLogger(__name__)

# Default history location
DEFAULT_HISTORY_FILE = Path.home() / ".bigtext" / "history.json"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="bigtext",
        description="Display short text full-screen in the largest legible size",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Hello world"                         # Print chosen layout
  %(prog)s "Hello world" -o hello.png            # Render PNG
  %(prog)s "Hi" --orientation portrait           # Portrait line budget
  %(prog)s "Hi" --font pangolin --font-dir ./fonts
  %(prog)s "Hi" --json                           # Machine-readable layout
  %(prog)s --list-history                        # Show saved texts

Environment Variables:
  BIGTEXT_FONT_DIR      Directory searched for font files
  BIGTEXT_HISTORY_FILE  History file (default: ~/.bigtext/history.json)
""",
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="Text to display",
    )

    # Screen options
    screen_group = parser.add_argument_group("Screen options")
    screen_group.add_argument(
        "-W",
        "--width",
        type=int,
        default=1920,
        help="Screen width in pixels (default: 1920)",
    )
    screen_group.add_argument(
        "-H",
        "--height",
        type=int,
        default=1080,
        help="Screen height in pixels (default: 1080)",
    )
    screen_group.add_argument(
        "--padding",
        type=float,
        default=DEFAULT_PADDING,
        help=f"Margin on every side in pixels (default: {DEFAULT_PADDING:g})",
    )
    screen_group.add_argument(
        "--orientation",
        default="landscape",
        choices=[o.value for o in Orientation],
        help="Screen orientation, selects the line budget (default: landscape)",
    )

    # Font options
    font_group = parser.add_argument_group("Font options")
    font_group.add_argument(
        "--font",
        default="montserrat",
        choices=[f.label.lower() for f in InputFont],
        help="Display font (default: montserrat)",
    )
    font_group.add_argument(
        "--font-file",
        type=Path,
        help="Font file to use instead of --font",
    )
    font_group.add_argument(
        "--font-dir",
        type=Path,
        action="append",
        default=[],
        help="Directory searched for font files (repeatable, or set BIGTEXT_FONT_DIR)",
    )
    font_group.add_argument(
        "--min-font-size",
        type=float,
        default=DEFAULT_MIN_FONT_SIZE,
        help=f"Smallest font size tried (default: {DEFAULT_MIN_FONT_SIZE:g})",
    )
    font_group.add_argument(
        "--max-font-size",
        type=float,
        default=DEFAULT_MAX_FONT_SIZE,
        help=f"Largest font size tried (default: {DEFAULT_MAX_FONT_SIZE:g})",
    )
    font_group.add_argument(
        "--max-lines",
        type=int,
        help="Largest line count tried (default: depends on orientation)",
    )

    # Background options
    bg_group = parser.add_argument_group("Background options")
    bg_group.add_argument(
        "--background",
        default="black",
        choices=[b.value for b in BackgroundColor],
        help="Background (default: black)",
    )
    bg_group.add_argument(
        "--gradient",
        choices=[g.name.lower() for g in GradientColor],
        help="Gradient for --background gradient (default: random)",
    )

    # Output options
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered screen to this PNG file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the chosen layout as JSON",
    )

    # History options
    history_group = parser.add_argument_group("History options")
    history_group.add_argument(
        "--save-history",
        action="store_true",
        help="Save the text to the history",
    )
    history_group.add_argument(
        "--history-file",
        type=Path,
        help="History file (or set BIGTEXT_HISTORY_FILE)",
    )
    history_group.add_argument(
        "--list-history",
        action="store_true",
        help="List saved texts, newest first, and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def get_history_path(args: argparse.Namespace) -> Path:
    """Resolve the history file from arguments or environment."""
    if args.history_file:
        return args.history_file
    env_path = os.environ.get("BIGTEXT_HISTORY_FILE")
    if env_path:
        return Path(env_path)
    return DEFAULT_HISTORY_FILE


def get_font_dirs(args: argparse.Namespace) -> tuple[Path, ...]:
    """Font search directories from arguments plus BIGTEXT_FONT_DIR."""
    dirs = list(args.font_dir)
    env_dir = os.environ.get("BIGTEXT_FONT_DIR")
    if env_dir:
        dirs.append(Path(env_dir))
    return tuple(dirs)


def build_config(args: argparse.Namespace) -> DisplayConfig:
    """Create pipeline configuration from arguments."""
    return DisplayConfig(
        width=args.width,
        height=args.height,
        padding=args.padding,
        orientation=Orientation(args.orientation),
        font=InputFont.from_label(args.font),
        font_file=args.font_file,
        font_dirs=get_font_dirs(args),
        background=BackgroundColor(args.background),
        gradient=GradientColor[args.gradient.upper()] if args.gradient else None,
        min_font_size=args.min_font_size,
        max_font_size=args.max_font_size,
        max_line_candidates=args.max_lines,
        history_path=get_history_path(args),
    )


def list_history(path: Path) -> int:
    """Print saved texts, newest first."""
    history = TextHistory(path)
    entries = history.entries()
    if not entries:
        print("History is empty")
        return 0
    for entry in entries:
        print(f"{entry.id:>4}  {entry.timestamp}  {preview_label(entry.text)}")
    return 0


async def run(args: argparse.Namespace) -> int:
    """Execute the display pipeline.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    if args.list_history:
        return list_history(get_history_path(args))

    if args.text is None:
        print("Error: No text given", file=sys.stderr)
        return 1

    if args.font_file is not None and not args.font_file.exists():
        print(f"Error: Font file not found: {args.font_file}", file=sys.stderr)
        return 1

    try:
        pipeline = DisplayPipeline(build_config(args))
        result = await pipeline.display(
            args.text,
            output_path=args.output,
            save_history=args.save_history,
        )
    except (BigTextError, DisplayError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    fit_result = result.fit
    if args.json:
        print(json.dumps(fit_result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(fit_result.rendered_text)
    print()
    print(f"Font size: {fit_result.font_size:.1f}")
    print(f"Lines: {fit_result.line_count}")
    print(f"Area used: {fit_result.utilization_fraction:.1%}")
    if not fit_result.fits_in_box:
        print("Warning: text does not fit even at the minimum font size")
    if args.output:
        print(f"Output: {args.output}")
    if result.entry is not None:
        print(f"Saved to history (#{result.entry.id})")
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
