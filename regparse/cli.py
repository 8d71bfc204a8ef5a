"""
Command-line interface for regparse.

Provides the main entry point with subcommands for parsing patterns and
inspecting their tokens.
"""

import argparse
import logging
import sys
import unicodedata

from .core import PatternCompiler
from .utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="regparse",
        description="regparse: regular expression parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m regparse parse "a(b|c)*"
  python -m regparse parse "[a-z]+\\d?" --format json
  python -m regparse tokens "a\\*b"
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a pattern and print its syntax tree"
    )
    parse_parser.add_argument(
        "pattern",
        type=str,
        help="Pattern to parse"
    )
    parse_parser.add_argument(
        "--format",
        choices=DEFAULT_SETTINGS.format_choices,
        default=DEFAULT_SETTINGS.output_format,
        help="Output format (default: tree)"
    )
    parse_parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_SETTINGS.max_group_depth,
        help=f"Deepest allowed group nesting (default: {DEFAULT_SETTINGS.max_group_depth})"
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a pattern"
    )
    tokens_parser.add_argument(
        "pattern",
        type=str,
        help="Pattern to tokenize"
    )
    tokens_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Set up root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def _display_width(text: str) -> int:
    """Terminal columns taken by text, counting wide characters twice."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def format_error_pointer(pattern: str, position: int) -> str:
    """Show the pattern with a caret under the character at position.

    Args:
        pattern: The pattern that failed to parse
        position: Index of the offending character

    Returns:
        str: Two lines, the pattern and the caret line
    """
    shown = pattern.expandtabs()
    offset = _display_width(pattern[:position].expandtabs())
    return f"  {shown}\n  {' ' * offset}^"


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    try:
        settings = Settings(max_group_depth=args.max_depth, output_format=args.format)
    except ValueError as e:
        print(f"[regparse] Error: {e}", file=sys.stderr)
        return 2

    compiler = PatternCompiler(settings)
    logger.debug(f"Parsing {args.pattern!r} (format={args.format}, max depth={args.max_depth})")

    result = compiler.check(args.pattern)
    if not result.success:
        print(f"[regparse] Error: {result.error_message}", file=sys.stderr)
        if result.position is not None:
            print(format_error_pointer(args.pattern, result.position), file=sys.stderr)
        return 1

    print(compiler.render(result.tree))
    return 0


def handle_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0, tokenizing cannot fail)
    """
    for index, token in enumerate(PatternCompiler().tokenize(args.pattern)):
        print(f"{index:4d}  {token.type.name:<22} {token.value!r}")
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"regparse version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    if args.command == "parse":
        return handle_parse(args)
    elif args.command == "tokens":
        return handle_tokens(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
