"""
pizzac - tokenize a PizzaLang source file and print the tokens.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import Lexer, FileTokenSink, collect_diagnostics, raise_for_errors, LexerError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "examples/slices-per-person.pizza"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pizzac",
        description="Tokenize a PizzaLang source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    pizzac                                   # examples/slices-per-person.pizza
    pizzac recipe.pizza --tokens-out tokens.txt
    pizzac recipe.pizza --strict --quiet     # exit 1 on any lexical error
        """,
    )
    parser.add_argument('path', nargs='?', default=DEFAULT_SOURCE,
                        help=f'Source file to tokenize (default: {DEFAULT_SOURCE})')
    parser.add_argument('--tokens-out', metavar='FILE',
                        help='Also write every token to FILE, one per line')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if any lexical error is found')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print tokens to stdout')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for pizzac"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    logger.debug("reading %s", args.path)
    try:
        with open(args.path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", args.path, e)
        return 1

    lexer = Lexer(source, args.path)
    if args.tokens_out:
        try:
            with FileTokenSink(args.tokens_out) as sink:
                tokens = lexer.tokenize(sink=sink)
        except OSError as e:
            logger.error("cannot write %s: %s", args.tokens_out, e)
            return 1
        logger.info("tokens written to %s", args.tokens_out)
    else:
        tokens = lexer.tokenize()

    if not args.quiet:
        for token in tokens:
            print(f"{token.type.name}\t{token.lexeme!r}\t{token.line}:{token.column}")

    for diagnostic in collect_diagnostics(tokens):
        logger.warning("%s", str(diagnostic).rstrip())

    if args.strict:
        try:
            raise_for_errors(tokens)
        except LexerError as e:
            print(f"lexer error: {e.diagnostic.message} at {e.diagnostic.location}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
