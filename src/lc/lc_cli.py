"""Command-line tool that parses LC source and prints the tree or its diagnostics."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lc.lc import LC
from lc.lc_error import LCNestingDepthError, LCParseError


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the LC checker CLI."""
    parser = argparse.ArgumentParser(
        description='Parse lambda calculus source and report syntax errors',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a file
  lc-check term.lc

  # Check an expression given on the command line
  lc-check -e "λx.x y"

  # Check from stdin and show the parsed tree
  echo "(λx.x) a" | lc-check - --tree
"""
    )
    parser.add_argument(
        'input',
        nargs='?',
        help='Input file (use "-" for stdin)'
    )
    parser.add_argument(
        '-e', '--expression',
        help='Expression to parse instead of reading a file'
    )
    parser.add_argument(
        '--tree',
        action='store_true',
        help='Print the parsed tree as an outline instead of source text'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=200,
        help='Maximum nesting of groups and abstractions (default: 200)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if (args.input is None) == (args.expression is None):
        print("Error: Provide exactly one of an input file or --expression", file=sys.stderr)
        return 2

    if args.expression is not None:
        source = args.expression

    elif args.input == '-':
        source = sys.stdin.read()

    else:
        try:
            source = Path(args.input).read_text(encoding='utf-8')

        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read '{args.input}': {e}", file=sys.stderr)
            return 2

    front_end = LC(max_depth=args.max_depth)

    try:
        ast = front_end.parse(source)

    except LCParseError as e:
        for error in e.errors:
            print(front_end.render(error, source))
            print()

        return 1

    except LCNestingDepthError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.tree:
        print(front_end.printer.format_tree(ast))

    else:
        print(front_end.printer.format(ast))

    return 0


if __name__ == '__main__':
    sys.exit(main())
