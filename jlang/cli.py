"""
Command line demo for the jlang tokenizer.

    jlang                      # lex the built-in demo snippet
    jlang program.j            # lex a file
    jlang -e "1 + 0x1F" -k let # lex a snippet, treating 'let' as a keyword
"""

import logging
import sys
from typing import Iterable, List

import click

from . import __version__
from .lexer import Token, lex
from .diagnostics import DiagnosticsConfig, format_error

logger = logging.getLogger(__name__)

DEMO_FILENAME = "demo_code"
DEMO_CODE = "let test 0xABCD"
DEMO_KEYWORDS = ("let",)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as ``[ a, b, c ]``, or ``[ ]`` when there are none."""
    body = ", ".join(str(token) for token in tokens)
    if not body:
        return "[ ]"
    return f"[ {body} ]"


@click.command()
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("-e", "--expr", "snippet", help="Lex this source text instead of a file.")
@click.option("-k", "--keyword", "keywords", multiple=True,
              help="Word to classify as a keyword (repeatable).")
@click.option("--ascii", "ascii_only", is_flag=True,
              help="Underline errors with ASCII characters only.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="jlang")
def main(path, snippet, keywords, ascii_only, verbose):
    """Tokenize jlang source and print the tokens or the first error."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if path and snippet is not None:
        raise click.UsageError("Pass either PATH or --expr, not both.")

    keyword_list: List[str] = list(keywords)
    if path:
        filename = path
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    elif snippet is not None:
        filename, source = "<expr>", snippet
    else:
        filename, source = DEMO_FILENAME, DEMO_CODE
        keyword_list = keyword_list or list(DEMO_KEYWORDS)
        click.echo(f"Demo code: {source}")

    logger.debug("Lexing %s (%d characters)", filename, len(source))
    result = lex(filename, source, keyword_list)

    if not result.ok:
        config = DiagnosticsConfig(unicode=False if ascii_only else None)
        click.echo(format_error(result.error, config), err=True, nl=False)
        sys.exit(1)

    click.echo(f"Tokens: {format_tokens(result.tokens)}")


if __name__ == "__main__":
    main()
