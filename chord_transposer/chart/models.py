"""Data models for chord chart tokens.

Tokens keep their column span so that chords found in monospace charts
can be pointed at (for diagram look-ups) without disturbing the text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from chord_transposer.models import Chord


TokenKind = Literal["chord", "word", "punct", "other"]


@dataclass(frozen=True)
class Token:
    """A token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.
    chord : Chord | None
        Parsed Chord object when pychord understands a chord token,
        None otherwise.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3, kind="chord")
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int
    kind: TokenKind
    chord: Chord | None = None


@dataclass(frozen=True)
class Hotspot:
    """A chord token located in a multi-line chart.

    Parameters
    ----------
    line : int
        0-based line index.
    token : Token
        The chord token; its ``start`` is the column within the line.
    """

    line: int
    token: Token

    @property
    def chord(self) -> str:
        """The chord symbol as written."""
        return self.token.text

    @property
    def col(self) -> int:
        """0-based column of the first character."""
        return self.token.start

    @property
    def length(self) -> int:
        """Width of the symbol in characters."""
        return self.token.end - self.token.start
