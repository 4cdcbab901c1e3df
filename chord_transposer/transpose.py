"""Transposition of notes, chord symbols and whole charts.

Only note letters change: qualities, extensions, punctuation, lyrics
and every whitespace character come through exactly as written.
"""

from __future__ import annotations

import re

from chord_transposer.chart.chord_detector import looks_like_chord
from chord_transposer.chart.tokenizer import (
    has_punctuation,
    split_preserving_whitespace,
    split_punctuation,
)
from chord_transposer.models import ChordSymbol
from chord_transposer.pitch_class import (
    normalize_spelling,
    note_to_pc,
    prefer_sharps_for_key,
    semitone_steps_between,
    spell,
)

# Root (letter plus optional accidental) followed by a tail without slashes
CHORD_SYMBOL_RE = re.compile(r"([A-Ga-g][#b♯♭]?)([^/\s]*)")


def transpose_note(raw_note: str, steps: int, prefer_sharps: bool) -> str:
    """Transpose a single note name.

    Parameters
    ----------
    raw_note : str
        The note as written (e.g., "Bb", "c#", "E♭").
    steps : int
        Semitones to move; negative values go down.
    prefer_sharps : bool
        Spell black keys with sharps rather than flats.

    Returns
    -------
    str
        The transposed note, or ``raw_note`` unchanged if it is not a note.

    Examples
    --------
    >>> transpose_note("C", 2, True)
    'D'
    >>> transpose_note("A", 1, False)
    'Bb'
    >>> transpose_note("H", 3, True)
    'H'
    """
    note = normalize_spelling(raw_note)
    if note is None:
        return raw_note
    return spell(note_to_pc(note) + steps, prefer_sharps)


def parse_chord_symbol(symbol: str) -> ChordSymbol | None:
    """Split a (non-slash) chord symbol into root and tail.

    Examples
    --------
    >>> parse_chord_symbol("F#m7")
    ChordSymbol(root='F#', tail='m7')
    >>> parse_chord_symbol("Verse") is None
    True
    """
    match = CHORD_SYMBOL_RE.fullmatch(symbol)
    if match is None:
        return None
    root = normalize_spelling(match.group(1))
    if root is None:
        return None
    return ChordSymbol(root=root, tail=match.group(2))


def transpose_chord_symbol(symbol: str, steps: int, prefer_sharps: bool) -> str:
    """Transpose a chord symbol, including slash chords.

    The root is transposed and the tail appended untouched. For slash
    chords the part before the first ``/`` and the rest are transposed
    independently and rejoined.

    Parameters
    ----------
    symbol : str
        The chord as written (e.g., "Am7", "C/E").
    steps : int
        Semitones to move; negative values go down.
    prefer_sharps : bool
        Spell black keys with sharps rather than flats.

    Returns
    -------
    str
        The transposed symbol; unparseable symbols come back unchanged.

    Examples
    --------
    >>> transpose_chord_symbol("C/E", -2, False)
    'Bb/D'
    >>> transpose_chord_symbol("F#m7b5", 1, True)
    'Gm7b5'
    """
    if "/" in symbol:
        top, _, bass = symbol.partition("/")
        return (
            f"{transpose_chord_symbol(top, steps, prefer_sharps)}"
            f"/{transpose_chord_symbol(bass, steps, prefer_sharps)}"
        )

    parsed = parse_chord_symbol(symbol)
    if parsed is None:
        return symbol
    return f"{transpose_note(parsed.root, steps, prefer_sharps)}{parsed.tail}"


def _transpose_span(span: str, steps: int, prefer_sharps: bool) -> str:
    if not span or span.isspace():
        return span

    if has_punctuation(span):
        return "".join(
            transpose_chord_symbol(piece, steps, prefer_sharps) if looks_like_chord(piece) else piece
            for piece in split_punctuation(span)
        )

    if looks_like_chord(span):
        return transpose_chord_symbol(span, steps, prefer_sharps)
    return span


def transpose_chord_text(text: str, steps: int, prefer_sharps: bool) -> str:
    """Transpose every chord in a block of text.

    Parameters
    ----------
    text : str
        A chord chart, lyrics and all.
    steps : int
        Semitones to move; negative values go down.
    prefer_sharps : bool
        Spell black keys with sharps rather than flats.

    Returns
    -------
    str
        The chart with chord roots rewritten. Everything that does not
        look like a chord, including all whitespace, is copied verbatim.

    Examples
    --------
    >>> transpose_chord_text("C G Am F", 2, True)
    'D A Bm G'
    >>> transpose_chord_text("(G)  Take it | C", 5, True)
    '(C)  Take it | F'
    """
    return "".join(
        _transpose_span(span, steps, prefer_sharps) for span in split_preserving_whitespace(text)
    )


def transpose_chart(text: str, from_key: str, to_key: str) -> str:
    """Rewrite a chart written in ``from_key`` so it sounds in ``to_key``.

    Spelling follows the target key's sharp/flat preference.

    Examples
    --------
    >>> transpose_chart("G D Em C", "G", "F")
    'F C Dm Bb'
    """
    steps = semitone_steps_between(from_key, to_key)
    return transpose_chord_text(text, steps, prefer_sharps_for_key(to_key))
