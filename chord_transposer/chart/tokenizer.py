"""Whitespace- and column-aware tokenization for chord charts.

Two views of the same text are offered: flat spans that rejoin into the
original text byte for byte (used when rewriting a chart), and tokens
with column spans (used when pointing at chords inside a line).
"""

from __future__ import annotations

import re

from chord_transposer.chart.models import Token

WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")

# Brackets, commas and pipes glue chords together in charts like "(G) | C, D"
PUNCTUATION_CHARS = ",|()[]"
PUNCTUATION_SPLIT_RE = re.compile(r"([,|()\[\]])")


def split_preserving_whitespace(text: str) -> list[str]:
    """Split text into alternating non-whitespace and whitespace spans.

    Whitespace runs are kept as spans of their own, so joining the
    result reproduces ``text`` exactly.

    Parameters
    ----------
    text : str
        Any text, possibly spanning several lines.

    Returns
    -------
    list[str]
        Non-empty spans in order.

    Examples
    --------
    >>> split_preserving_whitespace("C  G\\nAm")
    ['C', '  ', 'G', '\\n', 'Am']
    >>> split_preserving_whitespace("")
    []
    """
    return [span for span in WHITESPACE_SPLIT_RE.split(text) if span]


def has_punctuation(token: str) -> bool:
    """Check whether a span contains bracket, comma or pipe characters."""
    return any(c in PUNCTUATION_CHARS for c in token)


def split_punctuation(token: str) -> list[str]:
    """Split a span on punctuation, keeping each punctuation mark.

    Examples
    --------
    >>> split_punctuation("(G)")
    ['(', 'G', ')']
    >>> split_punctuation("C,Am|F")
    ['C', ',', 'Am', '|', 'F']
    """
    return [piece for piece in PUNCTUATION_SPLIT_RE.split(token) if piece]


def tokenize_line(line: str) -> list[Token]:
    """Tokenize a line preserving column spans.

    Splits on whitespace while tracking the start and end column positions
    of each token. Does not strip the line, preserving whitespace semantics.

    Parameters
    ----------
    line : str
        The line to tokenize. Should not include newline characters.

    Returns
    -------
    list[Token]
        List of tokens with text, start (inclusive), end (exclusive),
        and kind set to "other" (classification happens later).

    Examples
    --------
    >>> tokens = tokenize_line("Gm     C")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('Gm', 0, 2), ('C', 7, 8)]
    """
    tokens: list[Token] = []
    i = 0
    n = len(line)

    while i < n:
        # Skip whitespace
        if line[i].isspace():
            i += 1
            continue

        start = i

        # Capture maximal non-whitespace substring
        while i < n and not line[i].isspace():
            i += 1

        tokens.append(Token(text=line[start:i], start=start, end=i, kind="other"))

    return tokens


def split_token(token: Token) -> list[Token]:
    """Break a token on punctuation, keeping column spans.

    Examples
    --------
    >>> parts = split_token(Token(text="(G)", start=4, end=7, kind="other"))
    >>> [(t.text, t.start, t.end) for t in parts]
    [('(', 4, 5), ('G', 5, 6), (')', 6, 7)]
    """
    if not has_punctuation(token.text):
        return [token]

    parts: list[Token] = []
    col = token.start
    for piece in split_punctuation(token.text):
        parts.append(Token(text=piece, start=col, end=col + len(piece), kind="other"))
        col += len(piece)
    return parts
