"""Entry point for python -m livefx."""

import sys

from .cli import parse_args
from .runners.headless import run_headless
from .runners.interactive import run_interactive


def main():
    """Main entry point."""
    config = parse_args()
    try:
        if config.headless:
            run_headless(config)
        else:
            run_interactive(config)
    except (IOError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
