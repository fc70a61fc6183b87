"""
Diagnostics rendering for jlang.

Turns a source span into an excerpt of the affected lines with the span
underlined, and wraps positioned errors into console-ready messages:

    NumberFormat Error: Expected number after decimal point.
    File demo.j, line 1
    1 + 2.
        ╰╯
"""

import codecs
import locale
from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .lexer.tokens import Position
from .lexer.errors import Diagnostic, PositionedError


UNICODE_GLYPHS = ("╰", "─", "╯")
ASCII_GLYPHS = ("\\", "_", "/")


def _preferred_encoding_is_utf8() -> bool:
    try:
        return codecs.lookup(locale.getpreferredencoding(False)).name == "utf-8"
    except LookupError:
        return False


@dataclass
class DiagnosticsConfig:
    """Configuration for rendering source excerpts"""
    unicode: Optional[bool] = None  # None detects from the preferred encoding
    strip_indent: bool = True  # Drop indentation shared by all shown lines

    def glyphs(self) -> Tuple[str, str, str]:
        """Left corner, dash and right corner for multi-character underlines."""
        use_unicode = self.unicode
        if use_unicode is None:
            use_unicode = _preferred_encoding_is_utf8()
        return UNICODE_GLYPHS if use_unicode else ASCII_GLYPHS


def line_of(source: str, index: int) -> int:
    """Gets the 0-based line that the character at ``index`` is on."""
    return source.count("\n", 0, index)


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def underline_selection(position: Position, config: Optional[DiagnosticsConfig] = None) -> str:
    """
    Render the lines covered by ``position`` with the span underlined.

    Each covered line is followed by an underline row: a caret when the
    span covers a single character on that line, otherwise a bracket such
    as ``╰───╯`` (or ``\\___/`` without UTF-8 output).

    Args:
        position: Span to show
        config: Rendering options, defaults to DiagnosticsConfig()

    Returns:
        The excerpt, every row terminated by a newline
    """
    config = config or DiagnosticsConfig()
    left_pipe, underscore, right_pipe = config.glyphs()

    lines = position.source.split("\n")
    line_starts: List[int] = []
    offset = 0
    for line in lines:
        line_starts.append(offset)
        offset += len(line) + 1

    start = position.start_index
    # Index of the last covered character; zero-length spans mark a point
    last = position.end_index - 1 if position.length else start
    first_line = bisect_right(line_starts, start) - 1
    last_line = bisect_right(line_starts, last) - 1

    # (line text, first underlined column, last underlined column)
    covered: List[Tuple[str, int, int]] = []
    for n in range(first_line, last_line + 1):
        text = lines[n]
        col_start = start - line_starts[n] if n == first_line else 0
        if n == last_line:
            col_end = last - line_starts[n]
            # A span ending on the newline stops at the line's last character
            if position.length and col_end >= len(text):
                col_end = max(col_start, len(text) - 1)
        else:
            col_end = max(col_start, len(text) - 1)
        covered.append((text, col_start, col_end))

    indent = 0
    if config.strip_indent:
        # Blank lines don't count, and the span's own start must stay visible
        widths = [_indent_width(text) for text, _, _ in covered if text.strip()]
        indent = min(widths + [covered[0][1]])

    rows: List[str] = []
    for n, (text, col_start, col_end) in enumerate(covered):
        rows.append(text[indent:].rstrip())

        if n > 0 and _indent_width(text) <= col_end:
            col_start = max(col_start, _indent_width(text))
        start_col = max(col_start - indent, 0)
        end_col = max(col_end - indent, start_col)

        span = end_col - start_col + 1
        if span == 1:
            underline = "^"
        else:
            underline = left_pipe + underscore * (span - 2) + right_pipe
        rows.append(" " * start_col + underline)

    return "".join(row + "\n" for row in rows)


def format_error(error: Union[PositionedError, Diagnostic],
                 config: Optional[DiagnosticsConfig] = None) -> str:
    """
    Format a positioned error as a full console message.

    Args:
        error: A lexer or type error, or its Diagnostic

    Returns:
        Kind, message, filename, 1-based line and the underlined excerpt
    """
    diagnostic = error.diagnostic if isinstance(error, PositionedError) else error
    position = diagnostic.position
    line = line_of(position.source, position.start_index) + 1

    return (
        f"{diagnostic.kind} Error: {diagnostic.message}\n"
        f"File {position.filename}, line {line}\n"
        f"{underline_selection(position, config)}"
    )
