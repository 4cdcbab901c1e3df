"""Chord detection for free-form chord charts.

Chord-likeness is a lexical heuristic tuned for pasted charts: it accepts
anything that starts with an uppercase root and continues with chord-ish
characters. Tokens that pass are additionally parsed with pychord where
possible so callers get the quality and the chord tones.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chord_transposer.chart.models import Hotspot, Token
from chord_transposer.chart.tokenizer import split_token, tokenize_line
from chord_transposer.converter import from_pychord
from chord_transposer.pitch_class import ACCIDENTALS, NATURALS

if TYPE_CHECKING:
    from chord_transposer.models import Chord

# Constants for hotspot detection
MAX_CHORD_LENGTH = 15
TAB_SPACES = 4

# Root letters are case-sensitive so lyrics like "am" or "be" stay lyrics;
# the tail is matched case-insensitively ("Cmaj7", "CMaj7", "CM7").
CHORD_LIKE_RE = re.compile(
    rf"[{NATURALS}][{ACCIDENTALS}]?"
    r"(?i:maj|min|dim|aug|sus|add|m|\d|/|"
    rf"[{NATURALS}]|[{ACCIDENTALS}]|\+|-|°|Δ)*"
)


def looks_like_chord(token: str) -> bool:
    """Check whether a token reads like a chord symbol.

    Parameters
    ----------
    token : str
        A single whitespace-free span.

    Returns
    -------
    bool
        True if the token starts with a root letter A-G and contains only
        chord-ish characters after it.

    Examples
    --------
    >>> looks_like_chord("Bb7/D")
    True
    >>> looks_like_chord("Take")
    False
    >>> looks_like_chord("am")
    False
    """
    return bool(token) and CHORD_LIKE_RE.fullmatch(token) is not None


def parse_chord(text: str, prefer_sharps: bool | None = None) -> Chord | None:
    """Parse a chord string into a Chord object.

    Parameters
    ----------
    text : str
        The chord string to parse.
    prefer_sharps : bool | None
        Accidentals for the chord tones; by default those of the root's key.

    Returns
    -------
    Chord | None
        The parsed Chord object, or None if pychord cannot read it.

    Examples
    --------
    >>> chord = parse_chord("F7")
    >>> chord.quality, chord.tones
    ('7', ('F', 'A', 'C', 'Eb'))
    >>> parse_chord("Hello") is None
    True
    """
    try:
        return from_pychord(text, prefer_sharps)
    except (ValueError, Exception):  # pychord may raise various exceptions
        return None


def classify_token(token: Token) -> Token:
    """Classify a single token as chord, word, punct, or other.

    Parameters
    ----------
    token : Token
        The token to classify (with kind="other").

    Returns
    -------
    Token
        A new token with updated kind and chord fields.

    Examples
    --------
    >>> t = Token(text="Gm7", start=0, end=3, kind="other")
    >>> classify_token(t).kind
    'chord'
    """
    text = token.text

    if len(text) <= MAX_CHORD_LENGTH and looks_like_chord(text):
        return Token(
            text=text,
            start=token.start,
            end=token.end,
            kind="chord",
            chord=parse_chord(text),
        )

    # Check if it's punctuation only
    if all(not c.isalnum() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="punct")

    # Check if it contains alphabetic characters (word)
    if any(c.isalpha() for c in text):
        return Token(text=text, start=token.start, end=token.end, kind="word")

    return token


def classify_tokens(tokens: list[Token]) -> list[Token]:
    """Classify all tokens in a list."""
    return [classify_token(t) for t in tokens]


def normalize_chart_text(text: str) -> str:
    """Normalize line endings to "\\n" and expand tabs to spaces."""
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\t", " " * TAB_SPACES)


def tokenize_chart_line(line: str) -> list[Token]:
    """Tokenize and classify one line, splitting punctuated tokens.

    Examples
    --------
    >>> [(t.text, t.kind) for t in tokenize_chart_line("(G) love")]
    [('(', 'punct'), ('G', 'chord'), (')', 'punct'), ('love', 'word')]
    """
    pieces: list[Token] = []
    for token in tokenize_line(line):
        pieces.extend(split_token(token))
    return classify_tokens(pieces)


def detect_hotspots(text: str) -> list[Hotspot]:
    """Locate every chord symbol in a chart.

    Parameters
    ----------
    text : str
        The full chart. Line endings are normalized and tabs expanded
        before columns are measured.

    Returns
    -------
    list[Hotspot]
        Chord tokens in reading order with their line and column.

    Examples
    --------
    >>> [(h.chord, h.line, h.col) for h in detect_hotspots("C   G\\nTake (Am)")]
    [('C', 0, 0), ('G', 0, 4), ('Am', 1, 6)]
    """
    hotspots: list[Hotspot] = []
    for index, line in enumerate(normalize_chart_text(text).split("\n")):
        for token in tokenize_chart_line(line):
            if token.kind == "chord":
                hotspots.append(Hotspot(line=index, token=token))
    return hotspots


def unique_chords(text: str) -> list[str]:
    """Distinct chord symbols in order of first appearance.

    Examples
    --------
    >>> unique_chords("C G Am F\\nC G F")
    ['C', 'G', 'Am', 'F']
    """
    seen: dict[str, None] = {}
    for hotspot in detect_hotspots(text):
        seen.setdefault(hotspot.chord, None)
    return list(seen)
