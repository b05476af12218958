"""Entry point for running the CLI as a module."""

import argparse
import shutil
import sys

from seemore.core.truncation import AVAILABLE_STRATEGIES

from .config import CLIConfig
from .seemore_cli import main


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render long text collapsed to a few lines with a 'See more' toggle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="Text to render (default: read from stdin)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=shutil.get_terminal_size().columns,
        help="Render width in cells (default: terminal width)",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=None,
        help="Lines shown while collapsed (default: from config)",
    )
    parser.add_argument(
        "--strategy",
        choices=AVAILABLE_STRATEGIES,
        default=None,
        help="Truncation strategy (default: from config)",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Treat input as HTML and clean it first",
    )
    parser.add_argument(
        "--expanded",
        action="store_true",
        help="Start in the expanded state",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Keep reading toggle/width commands after rendering",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def cli_entry() -> None:
    """CLI entry point."""
    args = parse_args()

    if args.text is None:
        if args.interactive:
            sys.exit("--interactive needs the text as an argument")
        text = sys.stdin.read()
    else:
        text = args.text

    config = CLIConfig(
        width=args.width,
        max_lines=args.max_lines,
        strategy=args.strategy,
        html=args.html,
        expanded=args.expanded,
        use_color=not args.no_color,
    )

    try:
        main(text, config, interactive=args.interactive, debug=args.debug)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    cli_entry()
