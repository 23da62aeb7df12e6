"""Command-line interface for livefx."""

import argparse
from pathlib import Path

from . import __version__
from .config import SessionConfig
from .core.commands import HELP_TEXT
from .core.io import parse_source
from .core.settings import INTENSITY_MAX, INTENSITY_MIN

EPILOG = f"""\
Examples:
  livefx                              preview camera 0
  livefx http://192.168.0.32:8080/videofeed -o take1.avi
  livefx clip.mp4 --headless --keys "gbb" --intensity 7 -o blurred.avi

{HELP_TEXT}
Keys for --keys are typed as-is; use <space>, <bs> and <esc> for the
control keys.
"""


def parse_args(args=None) -> SessionConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        SessionConfig with parsed options.
    """
    parser = argparse.ArgumentParser(
        prog="livefx",
        description="Toggle a chain of image filters on a live video stream.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "source",
        type=str,
        nargs="?",
        default="0",
        help="Camera index, stream URL, video or image file (default: 0)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default="output.avi",
        help="Recording output file (default: output.avi)",
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=60.0,
        help="Recording frames per second (default: 60)",
    )

    parser.add_argument(
        "--codec",
        type=str,
        default="MJPG",
        help="Four-character recording codec (default: MJPG)",
    )

    parser.add_argument(
        "--wait-ms",
        type=int,
        default=1,
        help="Key poll wait per cycle in milliseconds (default: 1)",
    )

    parser.add_argument(
        "--hide-original",
        action="store_true",
        help="Only show the processed window",
    )

    parser.add_argument(
        "--keys",
        type=str,
        default="",
        help="Commands applied before the first frame, e.g. 'gbb' (default: none)",
    )

    parser.add_argument(
        "--intensity",
        type=int,
        default=1,
        help=f"Starting intensity, {INTENSITY_MIN}-{INTENSITY_MAX} (default: 1)",
    )

    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render the whole input file to --output without windows",
    )

    parser.add_argument(
        "--frames",
        type=int,
        default=60,
        help="Frames to render for an image input with --headless (default: 60)",
    )

    parsed = parser.parse_args(args)

    if len(parsed.codec) != 4:
        parser.error("--codec must be exactly four characters")
    if not INTENSITY_MIN <= parsed.intensity <= INTENSITY_MAX:
        parser.error(f"--intensity must be between {INTENSITY_MIN} and {INTENSITY_MAX}")
    if parsed.fps <= 0:
        parser.error("--fps must be positive")
    if parsed.wait_ms < 1:
        parser.error("--wait-ms must be at least 1")
    if parsed.frames < 1:
        parser.error("--frames must be at least 1")
    if parsed.headless:
        if not isinstance(parse_source(parsed.source), str) or not Path(parsed.source).exists():
            parser.error(f"Input file not found: {parsed.source}")

    return SessionConfig.from_args(
        source=parsed.source,
        output_path=parsed.output,
        fps=parsed.fps,
        codec=parsed.codec,
        wait_ms=parsed.wait_ms,
        show_original=not parsed.hide_original,
        keys=parsed.keys,
        intensity=parsed.intensity,
        frames=parsed.frames,
        headless=parsed.headless,
    )
